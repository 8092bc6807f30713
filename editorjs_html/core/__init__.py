"""Core module pour editorjs_html : erreurs + configuration."""
from .config import ParserConfig
from .errors import (
    EditorJsError,
    BlockDataError,
    MissingFieldError,
    InvalidFieldError,
)

__all__ = [
    "ParserConfig",
    "EditorJsError",
    "BlockDataError",
    "MissingFieldError",
    "InvalidFieldError",
]
