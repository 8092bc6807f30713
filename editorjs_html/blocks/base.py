"""
Blocs de base editorjs_html.
Un bloc = `type` (discriminant) + `data` (champs propres au type).
"""
from typing import Optional
from pydantic import BaseModel


class BlockData(BaseModel):
    """Champs d'un bloc (contenu HTML de confiance, jamais échappé). Clés inconnues ignorées."""
    pass


class BaseBlock(BaseModel):
    """Bloc de base (classe parente des sept blocs)."""
    type: str
    id: Optional[str] = None
