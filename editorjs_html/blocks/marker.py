"""Bloc Marker — type `text` (@editorjs/marker), rendu comme un paragraphe."""
from typing import Literal
from .base import BaseBlock, BlockData


class MarkerData(BlockData):
    text: str


class MarkerBlock(BaseBlock):
    type: Literal["text"] = "text"
    data: MarkerData
