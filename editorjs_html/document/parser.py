"""
Parser — texte JSON → EditorDocument (blocs typés).

Blocs sans `type`/`data`, de type inconnu ou mal formés : ignorés.
Bloc reconnu dont le `data` est incomplet : BlockDataError (mode strict)
ou bloc ignoré avec warning (mode lenient).
"""
import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from ..core.config import ParserConfig
from ..core.errors import BlockDataError, InvalidFieldError, MissingFieldError
from .schema import EditorDocument

# ── Registry des blocs ───────────────────────────────────────────────────────
from ..blocks import (
    BaseBlock, HeaderBlock, ParagraphBlock, MarkerBlock, ListBlock,
    TableBlock, WarningBlock, RawBlock,
)

log = logging.getLogger(__name__)

_BLOCK_REGISTRY: dict = {
    "header":    HeaderBlock,
    "paragraph": ParagraphBlock,
    "text":      MarkerBlock,
    "list":      ListBlock,
    "table":     TableBlock,
    "warning":   WarningBlock,
    "raw":       RawBlock,
}


def decode_document(text: Any) -> Optional[dict]:
    """
    Décode le JSON et vérifie la forme de premier niveau.
    Retourne None si le texte est indécodable, n'est pas un objet,
    n'a pas de clé `blocks` ou si `blocks` n'est pas une liste.
    """
    try:
        payload = json.loads(text)
    except (TypeError, ValueError, RecursionError) as e:
        log.debug("Document indécodable : %s", e)
        return None

    if not isinstance(payload, dict) or "blocks" not in payload:
        log.debug("Document sans clé 'blocks'")
        return None
    if not isinstance(payload["blocks"], list):
        log.debug("'blocks' n'est pas une liste : %s", type(payload["blocks"]).__name__)
        return None
    return payload


def _to_block_error(block_type: str, exc: ValidationError) -> BlockDataError:
    """Première erreur pydantic → MissingFieldError / InvalidFieldError."""
    err = exc.errors()[0]
    # erreur déjà qualifiée par un validateur (ex. items de liste)
    original = err.get("ctx", {}).get("error")
    if isinstance(original, BlockDataError):
        return original

    loc = list(err["loc"])
    if loc and loc[0] == "data":
        loc = loc[1:]
    field = ".".join(str(part) for part in loc) or None

    if err["type"] == "missing" and field:
        return MissingFieldError(block_type, field)
    return InvalidFieldError(block_type, field, err["msg"])


def parse_block(raw: Any) -> Optional[BaseBlock]:
    """
    Instancie un bloc typé depuis sa forme JSON.
    Retourne None si le bloc doit être ignoré (incomplet ou type inconnu).
    """
    if not isinstance(raw, dict) or "type" not in raw or "data" not in raw:
        log.debug("Bloc incomplet ignoré : %r", raw)
        return None

    block_type = raw["type"]
    block_cls = _BLOCK_REGISTRY.get(block_type) if isinstance(block_type, str) else None
    if block_cls is None:
        log.debug("Bloc inconnu ignoré : %r", block_type)
        return None
    if not isinstance(raw["data"], dict):
        log.debug("Bloc %r ignoré : 'data' n'est pas un objet", block_type)
        return None

    block_id = raw.get("id")
    try:
        return block_cls.model_validate({
            "type": block_type,
            "id": block_id if isinstance(block_id, str) else None,
            "data": raw["data"],
        })
    except ValidationError as e:
        raise _to_block_error(block_type, e) from e


def parse_document(payload: dict, config: Optional[ParserConfig] = None) -> EditorDocument:
    """
    Convertit un document décodé en EditorDocument.

    1. Instancie chaque bloc depuis le registry (ordre conservé)
    2. Ignore les blocs incomplets / inconnus
    3. Bloc invalide : raise (strict) ou warning + skip (lenient)
    """
    config = config or ParserConfig()

    blocks = []
    for index, raw in enumerate(payload["blocks"]):
        try:
            block = parse_block(raw)
        except BlockDataError as e:
            if config.strict:
                raise
            log.warning("Bloc #%s ignoré : %s", index, e)
            continue
        if block is not None:
            blocks.append(block)

    time = payload.get("time")
    version = payload.get("version")
    return EditorDocument(
        time=time if isinstance(time, int) and not isinstance(time, bool) else None,
        version=version if isinstance(version, str) else None,
        blocks=blocks,
    )
