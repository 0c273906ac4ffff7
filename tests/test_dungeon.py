import io

import pytest

from realrpg.console import Console
from realrpg.dungeon import Dungeon
from realrpg.entities import Character, ItemKind, Monster
from realrpg.inventory import Inventory


def _dungeon(keys):
    out = io.StringIO()
    return Dungeon(Console(stdin=io.StringIO(keys), stdout=out)), out


def test_leaving_returns_true_without_damage():
    dungeon, out = _dungeon(" ")
    hero = Character()
    assert dungeon.fight(hero, Monster(), Inventory()) is True
    assert hero.damage_taken == 0
    assert "{ Character}{ Monster }" in out.getvalue()


def test_one_exchange_of_blows():
    dungeon, _ = _dungeon("x1 ")
    hero, monster = Character(), Monster()
    assert dungeon.fight(hero, monster, Inventory()) is True
    assert monster.damage_taken == hero.strength - monster.defense
    assert hero.damage_taken == monster.strength - hero.defense


def test_inventory_does_not_spend_a_turn():
    dungeon, _ = _dungeon("20  ")
    hero, monster = Character(), Monster()
    dungeon.fight(hero, monster, Inventory())
    assert hero.damage_taken == 0
    assert monster.damage_taken == 0
    assert hero.item_count(ItemKind.HEALING_POTION) == 0


def test_monster_defeated_returns_false():
    hero, monster = Character(), Monster()
    monster.damage_taken = monster.base_health - 1
    dungeon, _ = _dungeon("1")
    assert dungeon.fight(hero, monster, Inventory()) is False
    assert monster.health <= 0
    assert hero.damage_taken == 0


def test_run_ends_when_hero_dies():
    hero = Character()
    hero.damage_taken = hero.base_health - 1
    dungeon, _ = _dungeon("1")
    dungeon.run(hero, Inventory())
    assert hero.health <= 0


def test_run_spawns_next_monster_after_victory():
    hero = Character()
    dungeon, _ = _dungeon("1" * 25 + " ")
    dungeon.run(hero, Inventory())
    assert 0 < hero.health < hero.base_health


def test_run_needs_input_while_fighting():
    dungeon, _ = _dungeon("1")
    with pytest.raises(EOFError):
        dungeon.run(Character(), Inventory())