"""Bloc Warning (@editorjs/warning) — encart role="alert"."""
from typing import Literal
from .base import BaseBlock, BlockData


class WarningData(BlockData):
    title: str
    message: str


class WarningBlock(BaseBlock):
    type: Literal["warning"] = "warning"
    data: WarningData
