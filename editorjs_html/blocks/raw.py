"""Bloc Raw (@editorjs/raw) — HTML recopié tel quel."""
from typing import Literal
from .base import BaseBlock, BlockData


class RawData(BlockData):
    html: str


class RawBlock(BaseBlock):
    type: Literal["raw"] = "raw"
    data: RawData
