"""Document — schema + parser."""
from .schema import EditorDocument
from .parser import decode_document, parse_block, parse_document

__all__ = [
    "EditorDocument",
    "decode_document",
    "parse_block",
    "parse_document",
]
