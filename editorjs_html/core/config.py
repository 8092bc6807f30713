"""
Configuration du parser.

Valeur par défaut surchargeable via variable d'environnement :
  EDITORJS_HTML_STRICT → strict (1/true/yes/on, 0/false/no/off)
"""
import os

from pydantic import BaseModel, ConfigDict, Field

_TRUE  = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} : valeur booléenne invalide {raw!r}")


class ParserConfig(BaseModel):
    """Options du parser (immuables, partageables entre threads)."""
    model_config = ConfigDict(frozen=True)

    strict: bool = Field(
        default=True,
        description="True → BlockDataError remonte à l'appelant ; False → bloc ignoré + warning",
    )

    @classmethod
    def from_env(cls) -> "ParserConfig":
        return cls(strict=_env_bool("EDITORJS_HTML_STRICT", True))
