# realrpg

A small turn-based text RPG for the terminal. You control a single
character, walk into a dungeon and fight one monster after another. Every
choice is made with a single key press. The on-screen text is in Korean.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Playing

```
realrpg
```

The title screen asks you to press `1` to start or `Space` to quit.

The stat screen shows your health, attack and defense. Press `1` to enter
the dungeon or `Space` to quit the game.

In the dungeon each turn shows both fighters' stats side by side:

- `1` attacks the monster. If it survives, it strikes back.
- `2` opens the inventory. Using items there doesn't cost a turn.
- `Space` leaves the dungeon and takes you back to the stat screen.

Any other key is ignored and the screen is shown again.

Damage is the attacker's strength minus the defender's defense. Your
character starts with 1000 health, 50 strength and 10 defense. Each
monster has 1000 health, 30 strength and 10 defense. A new monster
appears as soon as the last one falls. The dungeon run ends when your
health drops to zero or below, and you return to the stat screen. Damage
you have taken carries over between dungeon visits. It is only reduced by
healing potions.

`Ctrl-C` or end of input (`Ctrl-D`, or `Ctrl-Z` on Windows) also ends the
game.

## Inventory

The inventory has ten slots, numbered `0` to `9`. Press a slot's number
to use the item in it, or `Space` to close the inventory. You start with:

| Item            | Count | Effect                                  |
|-----------------|-------|-----------------------------------------|
| Healing potion  | 1     | Removes up to 250 damage taken          |
| Road-side bread | 10    | Shows a message, nothing else           |
| Trash           | 5     | Shows a message, nothing else           |

When an item runs out, its slot is cleared and the remaining items shift
forward to fill the gap.

## What the game does not do

The game does not save or load progress. Defeating a monster earns no
experience, levels or loot. Nothing in the game adds items to the
inventory, so the starting items are all you get. A defeated character is
not revived.

## Using it from Python

`realrpg.game.run_game(console)` plays the game on a
`realrpg.console.Console`. With no arguments, `Console` reads single keys
from the terminal and writes to standard output. It clears the screen only
when the output is a terminal. You can also pass text streams, for example
to script a session:

```python
import io

from realrpg.console import Console
from realrpg.game import run_game

out = io.StringIO()
# start, enter the dungeon, attack once, leave the dungeon, quit
run_game(Console(stdin=io.StringIO("111  "), stdout=out))
print(out.getvalue())
```

When a scripted input stream runs out, `Console.read_key` raises
`EOFError`.

The other modules:

- `realrpg.entities`: `ItemKind`, `Combatant` (`refresh_stats`,
  `stats_text`, `attack`), `Monster`, and `Character` (`use_item`,
  `gain_item`, `item_count`, `reset_slot`, `pull_slot`).
- `realrpg.items`: `describe_item(character, kind)` and
  `item_exists(character, kind)`.
- `realrpg.inventory`: `Inventory` (`render`, `open`) and
  `clean_inventory(character)`.
- `realrpg.dungeon`: `Dungeon(console)` with `run(character, inventory)`
  and `fight(character, monster, inventory)`. `fight` returns `True` when
  the player chose to leave.