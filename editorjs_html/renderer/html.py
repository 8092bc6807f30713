"""
Renderer HTML — un fragment par bloc, concaténés dans l'ordre du document.
Le contenu des blocs est du HTML de confiance : rien n'est échappé.
"""
import logging
from typing import Callable, Dict, Iterable, List

from ..blocks.base import BaseBlock
from ..blocks.header      import HeaderBlock
from ..blocks.paragraph   import ParagraphBlock
from ..blocks.marker      import MarkerBlock
from ..blocks.nested_list import ListBlock, ListItem
from ..blocks.table       import TableBlock
from ..blocks.warning     import WarningBlock
from ..blocks.raw         import RawBlock

log = logging.getLogger(__name__)


# ── Renderers blocs ─────────────────────────────────────────────────────────

def render_header_block(b: HeaderBlock) -> str:
    d = b.data
    return f"<h{d.level}>{d.text}</h{d.level}>"


def render_paragraph_block(b: ParagraphBlock) -> str:
    return f"<p>{b.data.text}</p>"


def render_marker_block(b: MarkerBlock) -> str:
    return f"<p>{b.data.text}</p>"


def render_list_items(style: str, items: List[ListItem]) -> str:
    """
    Rend une liste et ses sous-listes (même style à tous les niveaux).
    Parcours avec pile explicite : profondeur bornée par la mémoire seule.
    """
    open_tag, close_tag = ("<ol>", "</ol>") if style == "ordered" else ("<ul>", "</ul>")

    parts = [open_tag]
    stack = [iter(items)]
    while stack:
        item = next(stack[-1], None)
        if item is None:
            stack.pop()
            parts.append(close_tag)
            if stack:
                parts.append("</li>")
            continue

        parts.append(f"<li>{item.content}")
        if item.items:
            parts.append(open_tag)
            stack.append(iter(item.items))
        else:
            parts.append("</li>")
    return "".join(parts)


def render_list_block(b: ListBlock) -> str:
    return render_list_items(b.data.style, b.data.items)


def _render_row(cells: List[str]) -> str:
    return "<tr>" + "".join(f"<td>{cell}</td>" for cell in cells) + "</tr>"


def render_table_block(b: TableBlock) -> str:
    d = b.data
    rows = list(d.content)  # copie : l'entrée n'est jamais modifiée

    head = ""
    if d.withHeadings:
        heading = rows.pop(0) if rows else []
        head = f"<thead>{_render_row(heading)}</thead>"

    body = "".join(_render_row(row) for row in rows)
    return f"<table>{head}<tbody>{body}</tbody></table>"


def render_warning_block(b: WarningBlock) -> str:
    d = b.data
    return f'<div role="alert"><h4>{d.title}</h4><p>{d.message}</p></div>'


def render_raw_block(b: RawBlock) -> str:
    return b.data.html


# ── Dispatch ────────────────────────────────────────────────────────────────

_RENDERERS: Dict[type, Callable[..., str]] = {
    HeaderBlock:    render_header_block,
    ParagraphBlock: render_paragraph_block,
    MarkerBlock:    render_marker_block,
    ListBlock:      render_list_block,
    TableBlock:     render_table_block,
    WarningBlock:   render_warning_block,
    RawBlock:       render_raw_block,
}


def render_block(block: BaseBlock) -> str:
    """Dispatch vers le renderer du bloc ; bloc non enregistré → fragment vide."""
    renderer = _RENDERERS.get(type(block))
    if renderer is None:
        log.debug("Aucun renderer pour %s", type(block).__name__)
        return ""
    return renderer(block)


def render_blocks(blocks: Iterable[BaseBlock]) -> str:
    return "".join(render_block(block) for block in blocks)


class HtmlRenderer:
    """Renderer HTML par défaut (sans état, partageable)."""

    def render_block(self, block: BaseBlock) -> str:
        return render_block(block)

    def render_blocks(self, blocks: Iterable[BaseBlock]) -> str:
        return render_blocks(blocks)
