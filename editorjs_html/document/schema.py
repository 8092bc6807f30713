"""
Schéma d'un document Editor.js décodé.
JSON → decode_document() → parse_document() → EditorDocument → render

Exemple (sortie de editor.save()) :
{
  "time": 1700000000000,
  "blocks": [
    {"id": "a1", "type": "header",    "data": {"text": "Titre", "level": 2}},
    {"id": "b2", "type": "paragraph", "data": {"text": "Du <b>texte</b>"}}
  ],
  "version": "2.28.2"
}
"""
from typing import List, Optional
from pydantic import BaseModel, Field

from ..blocks import BlockUnion


class EditorDocument(BaseModel):
    """Document typé : blocs reconnus et valides, dans l'ordre d'origine."""
    time: Optional[int] = None
    version: Optional[str] = None
    blocks: List[BlockUnion] = Field(default_factory=list)
