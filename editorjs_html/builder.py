"""
API publique : JSON Editor.js → HTML.
"""
from typing import Optional

from .core.config import ParserConfig
from .document.parser import decode_document, parse_document
from .document.schema import EditorDocument
from .renderer.base import Renderer
from .renderer.html import HtmlRenderer


class EditorJsParser:
    """
    Parser Editor.js → HTML.

    Usage:
        >>> parser = EditorJsParser()
        >>> parser('{"blocks": [{"type": "paragraph", "data": {"text": "A"}}]}')
        '<p>A</p>'
    """

    def __init__(
        self,
        config: Optional[ParserConfig] = None,
        renderer: Optional[Renderer] = None,
    ):
        """
        Args:
            config: Options (défaut : lues depuis l'environnement)
            renderer: Renderer à utiliser (défaut : HtmlRenderer)
        """
        self.config = config or ParserConfig.from_env()
        self.renderer = renderer or HtmlRenderer()

    def __call__(self, text: str) -> Optional[str]:
        """
        Rend un document JSON en HTML.

        Returns:
            HTML concaténé, "" si aucun bloc, None si le document est invalide

        Raises:
            BlockDataError: bloc reconnu au `data` incomplet (mode strict)
        """
        document = self.parse(text)
        if document is None:
            return None
        return self.render_document(document)

    def parse(self, text: str) -> Optional[EditorDocument]:
        """Décode + valide le texte ; None si la forme de premier niveau est invalide."""
        payload = decode_document(text)
        if payload is None:
            return None
        return parse_document(payload, self.config)

    def render_document(self, document: EditorDocument) -> str:
        return self.renderer.render_blocks(document.blocks)


# Fonction raccourcie pour usage direct
def render(text: str, config: Optional[ParserConfig] = None) -> Optional[str]:
    """
    Rend un document JSON en HTML (fonction raccourcie).

    Args:
        text: Document Editor.js (JSON)
        config: Options (défaut : lues depuis l'environnement)

    Returns:
        HTML, ou None si le document est invalide
    """
    return EditorJsParser(config=config)(text)
