"""
Blocs — exports publics + BlockUnion discriminé.
"""
from typing import Annotated, Union
from pydantic import Field

from .base import BaseBlock, BlockData
from .header import HeaderBlock, HeaderData
from .paragraph import ParagraphBlock, ParagraphData
from .marker import MarkerBlock, MarkerData
from .nested_list import ListBlock, ListData, ListItem
from .table import TableBlock, TableData
from .warning import WarningBlock, WarningData
from .raw import RawBlock, RawData

# Union discriminée par type — utilisable dans Pydantic avec discriminator
BlockUnion = Annotated[
    Union[
        HeaderBlock,
        ParagraphBlock,
        MarkerBlock,
        ListBlock,
        TableBlock,
        WarningBlock,
        RawBlock,
    ],
    Field(discriminator="type"),
]

__all__ = [
    # Base
    "BaseBlock", "BlockData",
    # Header
    "HeaderBlock", "HeaderData",
    # Paragraph
    "ParagraphBlock", "ParagraphData",
    # Marker
    "MarkerBlock", "MarkerData",
    # List
    "ListBlock", "ListData", "ListItem",
    # Table
    "TableBlock", "TableData",
    # Warning
    "WarningBlock", "WarningData",
    # Raw
    "RawBlock", "RawData",
    # Union
    "BlockUnion",
]
