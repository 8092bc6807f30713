"""Bloc Table (@editorjs/table) — première ligne en <thead> si withHeadings."""
from typing import List, Literal
from pydantic import ConfigDict
from .base import BaseBlock, BlockData


class TableData(BlockData):
    # cellules numériques acceptées et converties en texte
    model_config = ConfigDict(coerce_numbers_to_str=True)

    withHeadings: bool
    content: List[List[str]]


class TableBlock(BaseBlock):
    type: Literal["table"] = "table"
    data: TableData
