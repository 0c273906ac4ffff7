"""Fighters of the game: the shared combat stats, the monster and the hero."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

INVENTORY_SIZE = 10
POTION_HEAL = 250


class ItemKind(IntEnum):
    """Item codes as stored in inventory slots; 0 marks an empty slot."""

    HEALING_POTION = 1
    ROAD_BREAD = 2
    TRASH = 3


@dataclass
class Combatant:
    """Base stats, damage taken and the final stats derived from them."""

    base_health: int
    base_strength: int
    base_defense: int
    damage_taken: int = 0
    health: int = 0
    strength: int = 0
    defense: int = 0

    def refresh_stats(self) -> None:
        """Recompute the final stats from the base stats and damage taken."""
        self.health = self.base_health - self.damage_taken
        self.strength = self.base_strength
        self.defense = self.base_defense

    def stats_text(self) -> str:
        """Return the stat lines shown on the status screen."""
        return "\n".join(
            (
                f"체력 : {self.health}",
                f"공격력 : {self.strength}",
                f"방어력 : {self.defense}",
            )
        )

    def attack(self, target: Combatant) -> None:
        """Hit target with this fighter's strength less the target's defense."""
        target.damage_taken += self.strength - target.defense


@dataclass
class Monster(Combatant):
    """The dungeon's opponent."""

    base_health: int = 1000
    base_strength: int = 30
    base_defense: int = 10


def _starting_slots() -> list[int]:
    slots = [0] * INVENTORY_SIZE
    slots[:3] = [ItemKind.HEALING_POTION, ItemKind.ROAD_BREAD, ItemKind.TRASH]
    return slots


def _starting_counts() -> dict[ItemKind, int]:
    return {ItemKind.HEALING_POTION: 1, ItemKind.ROAD_BREAD: 10, ItemKind.TRASH: 5}


@dataclass
class Character(Combatant):
    """The player's hero, with inventory slots and item counts."""

    base_health: int = 1000
    base_strength: int = 50
    base_defense: int = 10
    slots: list[int] = field(default_factory=_starting_slots)
    counts: dict[ItemKind, int] = field(default_factory=_starting_counts)

    def use_item(self, kind: int) -> str | None:
        """Use one item of a kind; return the message it shows, if any."""
        kind = ItemKind(kind)
        self.counts[kind] -= 1
        if kind is ItemKind.HEALING_POTION:
            self.damage_taken = max(self.damage_taken - POTION_HEAL, 0)
            return None
        if kind is ItemKind.ROAD_BREAD:
            return "빵이다!"
        return "쓰레기다!"

    def gain_item(self, kind: int, count: int) -> None:
        """Add count items of a kind."""
        self.counts[ItemKind(kind)] += count

    def item_count(self, kind: int) -> int:
        """Return how many items of a kind the hero carries."""
        return self.counts[ItemKind(kind)]

    def reset_slot(self, index: int) -> None:
        """Empty an inventory slot."""
        self.slots[index] = 0

    def pull_slot(self, index: int) -> None:
        """Move the item in a slot one place to the left."""
        self.slots[index - 1] = self.slots[index]
        self.slots[index] = 0