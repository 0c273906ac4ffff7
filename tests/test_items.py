from realrpg.entities import Character, ItemKind
from realrpg.items import describe_item, item_exists


def test_describe_potion():
    assert describe_item(Character(), ItemKind.HEALING_POTION) == "회복 물약 : 1개"


def test_describe_follows_count():
    hero = Character()
    hero.gain_item(ItemKind.TRASH, 2)
    text = describe_item(hero, ItemKind.TRASH)
    assert text.startswith("쓰레기 : ")
    assert text == f"쓰레기 : {hero.item_count(ItemKind.TRASH)}개"


def test_describe_empty_slot():
    assert describe_item(Character(), 0) == ""


def test_item_exists_tracks_count():
    hero = Character()
    assert item_exists(hero, ItemKind.HEALING_POTION) is True
    hero.use_item(ItemKind.HEALING_POTION)
    assert item_exists(hero, ItemKind.HEALING_POTION) is False


def test_empty_slot_has_no_item():
    assert item_exists(Character(), 0) is False