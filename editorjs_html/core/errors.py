"""
Hiérarchie d'exceptions editorjs_html.

Module volontairement sans dépendance : importé partout (parser, renderer, tests).
"""
from typing import Optional


class EditorJsError(Exception):
    """Exception de base du package."""


class BlockDataError(EditorJsError, ValueError):
    """Le `data` d'un bloc reconnu ne permet pas de construire son modèle typé."""

    def __init__(self, block_type: str, field: Optional[str], message: str):
        self.block_type = block_type
        self.field = field
        super().__init__(message)


class MissingFieldError(BlockDataError):
    """Champ requis absent du `data` d'un bloc."""

    def __init__(self, block_type: str, field: str):
        super().__init__(
            block_type, field,
            f"Champ manquant : {field!r} pour le bloc {block_type!r}",
        )


class InvalidFieldError(BlockDataError):
    """Champ présent mais de mauvais type ou hors bornes."""

    def __init__(self, block_type: str, field: Optional[str], reason: str):
        self.reason = reason
        super().__init__(
            block_type, field,
            f"Champ invalide : {field!r} pour le bloc {block_type!r} ({reason})",
        )
