"""
editorjs_html — rendu HTML des documents Editor.js.

Usage (texte JSON):
    >>> from editorjs_html import render
    >>> render('{"blocks": [{"type": "header", "data": {"text": "Hi", "level": 2}}]}')
    '<h2>Hi</h2>'

Usage (document typé):
    >>> from editorjs_html import EditorJsParser
    >>> parser = EditorJsParser()
    >>> doc = parser.parse(text)
    >>> html = parser.render_document(doc)
"""

# ── Blocs ────────────────────────────────────────────────────────────────────
from .blocks import (
    BaseBlock, BlockData,
    HeaderBlock, HeaderData,
    ParagraphBlock, ParagraphData,
    MarkerBlock, MarkerData,
    ListBlock, ListData, ListItem,
    TableBlock, TableData,
    WarningBlock, WarningData,
    RawBlock, RawData,
    BlockUnion,
)

# ── Document ─────────────────────────────────────────────────────────────────
from .document import EditorDocument, decode_document, parse_block, parse_document

# ── Rendu ────────────────────────────────────────────────────────────────────
from .renderer import Renderer, HtmlRenderer, render_block, render_blocks
from .builder import EditorJsParser, render

# ── Core ─────────────────────────────────────────────────────────────────────
from .core import (
    ParserConfig,
    EditorJsError, BlockDataError, MissingFieldError, InvalidFieldError,
)

__version__ = "0.1.0"

__all__ = [
    # blocs
    "BaseBlock", "BlockData",
    "HeaderBlock", "HeaderData",
    "ParagraphBlock", "ParagraphData",
    "MarkerBlock", "MarkerData",
    "ListBlock", "ListData", "ListItem",
    "TableBlock", "TableData",
    "WarningBlock", "WarningData",
    "RawBlock", "RawData",
    "BlockUnion",
    # document
    "EditorDocument", "decode_document", "parse_block", "parse_document",
    # rendu
    "Renderer", "HtmlRenderer", "render_block", "render_blocks",
    "EditorJsParser", "render",
    # core
    "ParserConfig",
    "EditorJsError", "BlockDataError", "MissingFieldError", "InvalidFieldError",
]
