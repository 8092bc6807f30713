"""Bloc Header — titre h1…h6 (@editorjs/header)."""
from typing import Literal
from pydantic import Field
from .base import BaseBlock, BlockData


class HeaderData(BlockData):
    text: str
    level: int = Field(..., ge=1, le=6)


class HeaderBlock(BaseBlock):
    type: Literal["header"] = "header"
    data: HeaderData
