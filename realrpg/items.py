"""Item labels and availability checks."""

from __future__ import annotations

from .entities import Character, ItemKind

_LABELS = {
    ItemKind.HEALING_POTION: "회복 물약",
    ItemKind.ROAD_BREAD: "길 가다 주운 빵",
    ItemKind.TRASH: "쓰레기",
}


def _as_kind(kind: int) -> ItemKind | None:
    try:
        return ItemKind(kind)
    except ValueError:
        return None


def describe_item(character: Character, kind: int) -> str:
    """Return the label and count of an item; empty for an empty slot."""
    item = _as_kind(kind)
    if item is None:
        return ""
    return f"{_LABELS[item]} : {character.item_count(item)}개"


def item_exists(character: Character, kind: int) -> bool:
    """Tell whether the character still carries any item of a kind."""
    item = _as_kind(kind)
    return item is not None and character.item_count(item) > 0