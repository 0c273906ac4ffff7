"""The inventory screen and slot housekeeping."""

from __future__ import annotations

from .console import Console
from .entities import INVENTORY_SIZE, Character
from .items import describe_item, item_exists


def clean_inventory(character: Character) -> None:
    """Empty slots whose items ran out and shift the rest to the left."""
    for index, kind in enumerate(character.slots):
        if kind and not item_exists(character, kind):
            character.reset_slot(index)
    kept = [kind for kind in character.slots if kind]
    character.slots[:] = kept + [0] * (len(character.slots) - len(kept))


class Inventory:
    """The screen where the player looks at and uses items."""

    def render(self, character: Character) -> str:
        """Return the inventory screen text."""
        lines = ["{ 인벤토리 }"]
        lines.extend(
            f"{index}. {describe_item(character, character.slots[index])}"
            for index in range(INVENTORY_SIZE)
        )
        lines.append("Space. 나가기")
        return "\n".join(lines)

    def open(self, character: Character, console: Console) -> None:
        """Show the inventory until the player presses Space."""
        while True:
            console.clear()
            console.write(self.render(character))
            key = console.read_key()
            if key.isdigit() and len(key) == 1 and key.isascii():
                kind = character.slots[int(key)]
                if kind:
                    message = character.use_item(kind)
                    if message:
                        console.write(message)
            elif key != " ":
                continue
            clean_inventory(character)
            if key == " ":
                return