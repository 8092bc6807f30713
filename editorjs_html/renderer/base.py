"""
Protocol Renderer — interface pluggable pour les renderers (HTML, texte…).
"""
from typing import Iterable, Protocol, runtime_checkable
from ..blocks.base import BaseBlock


@runtime_checkable
class Renderer(Protocol):
    def render_block(self, block: BaseBlock) -> str: ...
    def render_blocks(self, blocks: Iterable[BaseBlock]) -> str: ...
