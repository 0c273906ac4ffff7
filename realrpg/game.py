"""Title screen, status screen and the command entry point."""

from __future__ import annotations

from .console import Console
from .dungeon import Dungeon
from .entities import Character
from .inventory import Inventory


def _title(console: Console) -> bool:
    """Show the title screen; return True to start, False to quit."""
    while True:
        console.clear()
        for line in ("{ Text RPG }", "{ 선택지 }", "1. 게임 시작 ", "Space. 게임 나가기"):
            console.write(line)
        key = console.read_key()
        if key == "1":
            return True
        if key == " ":
            return False


def run_game(console: Console) -> None:
    """Play the game on a console until the player quits."""
    if not _title(console):
        return
    character = Character()
    inventory = Inventory()
    dungeon = Dungeon(console)
    while True:
        character.refresh_stats()
        console.clear()
        console.write("{ 스탯 창 }")
        console.write(character.stats_text())
        console.write("{ 선택지 } ")
        console.write("1. 던전 들어가기")
        console.write("Space. 게임 나가기")
        key = console.read_key()
        if key == "1":
            dungeon.run(character, inventory)
        elif key == " ":
            return


def main(argv: list[str] | None = None) -> int:
    """Start the game in the terminal."""
    try:
        run_game(Console())
    except (EOFError, KeyboardInterrupt):
        pass
    return 0