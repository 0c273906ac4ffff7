"""The dungeon: an endless line of monsters to fight."""

from __future__ import annotations

from .console import Console
from .entities import Character, Monster
from .inventory import Inventory


class Dungeon:
    """Spawns monsters and runs turn-based fights against them."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def run(self, character: Character, inventory: Inventory) -> None:
        """Fight new monsters until the hero dies or leaves."""
        while True:
            left = self.fight(character, Monster(), inventory)
            if left or character.health <= 0:
                return

    def _show(self, character: Character, monster: Monster) -> None:
        self.console.clear()
        for line in (
            "{ Character}{ Monster }",
            f"체력 : {character.health}체력 : {monster.health}",
            f"공격력 : {character.strength}공격력 : {monster.strength}",
            f"방어력 : {character.defense}방어력 : {monster.defense}",
            "1. 공격하기",
            "2. 인벤토리",
            "Space. 던전 나가기",
        ):
            self.console.write(line)

    def fight(self, character: Character, monster: Monster, inventory: Inventory) -> bool:
        """Fight one monster; return True if the player chose to leave."""
        while True:
            while True:
                character.refresh_stats()
                monster.refresh_stats()
                self._show(character, monster)
                key = self.console.read_key()
                if key == "1":
                    character.attack(monster)
                    break
                if key == "2":
                    # Inventory use does not spend a turn.
                    inventory.open(character, self.console)
                    continue
                if key == " ":
                    return True

            monster.refresh_stats()
            if monster.health <= 0:
                return False

            monster.attack(character)
            character.refresh_stats()
            if character.health <= 0:
                return False