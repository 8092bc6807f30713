"""Bloc Paragraph."""
from typing import Literal
from .base import BaseBlock, BlockData


class ParagraphData(BlockData):
    text: str


class ParagraphBlock(BaseBlock):
    type: Literal["paragraph"] = "paragraph"
    data: ParagraphData
