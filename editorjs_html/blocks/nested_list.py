"""Bloc List — liste imbriquée (@editorjs/nested-list), profondeur non bornée."""
from typing import Any, List, Literal
from pydantic import BaseModel, ValidationError, field_validator, model_validator
from ..core.errors import InvalidFieldError, MissingFieldError
from .base import BaseBlock, BlockData


class ListItem(BaseModel):
    content: str
    items: List["ListItem"] = []

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, value: Any) -> Any:
        # @editorjs/list classique : items = ["a", "b"]
        if isinstance(value, str):
            return {"content": value, "items": []}
        # items absent, null ou vide → pas d'enfants
        if isinstance(value, dict) and value.get("items") is None:
            return {**value, "items": []}
        return value


ListItem.model_rebuild()


class _ItemContent(BaseModel):
    content: str


def build_list_items(raw_items: List[Any]) -> List[ListItem]:
    """
    Construit l'arbre des items niveau par niveau (pile explicite).
    Pydantic ne valide qu'un `content` à la fois : aucune limite de profondeur.
    """
    root: List[ListItem] = []
    stack = [(raw_items, root, "items")]
    while stack:
        raw_level, out, path = stack.pop()
        if not isinstance(raw_level, list):
            raise InvalidFieldError("list", path, "liste attendue")

        for index, raw in enumerate(raw_level):
            loc = f"{path}.{index}"
            if isinstance(raw, ListItem):
                out.append(raw)
                continue
            if isinstance(raw, str):
                raw = {"content": raw}
            if not isinstance(raw, dict):
                raise InvalidFieldError("list", loc, "objet attendu")
            if "content" not in raw:
                raise MissingFieldError("list", f"{loc}.content")
            try:
                fields = _ItemContent.model_validate({"content": raw["content"]})
            except ValidationError as e:
                raise InvalidFieldError("list", f"{loc}.content", e.errors()[0]["msg"]) from e

            item = ListItem.model_construct(content=fields.content, items=[])
            out.append(item)
            children = raw.get("items")
            if children:
                stack.append((children, item.items, f"{loc}.items"))
    return root


class ListData(BlockData):
    style: str
    items: List[ListItem]

    @field_validator("items", mode="before")
    @classmethod
    def _build_items(cls, value: Any) -> Any:
        if not isinstance(value, list):
            return value
        return build_list_items(value)


class ListBlock(BaseBlock):
    type: Literal["list"] = "list"
    data: ListData
