import pytest

from simplemenu.hashtable import HashTable


def test_set_then_get_returns_value():
    table = HashTable(16)
    table.set("snes", "Super Nintendo")
    assert table.get("snes") == "Super Nintendo"


def test_set_replaces_existing_value():
    table = HashTable(16)
    table.set("gba", "first")
    table.set("gba", "second")
    assert table.get("gba") == "second"


def test_missing_key_returns_none():
    table = HashTable(8)
    table.set("present", "yes")
    assert table.get("absent") is None


@pytest.mark.parametrize("size", [0, -3])
def test_invalid_size_rejected(size):
    with pytest.raises(ValueError):
        HashTable(size)


def test_single_bucket_keeps_every_key():
    table = HashTable(1)
    keys = ["d", "b", "c", "a", "e", "ab"]
    for key in keys:
        table.set(key, key.upper())
    assert [table.get(key) for key in keys] == [key.upper() for key in keys]


def test_bucket_of_within_range():
    table = HashTable(7)
    keys = ["", "a", "mario", "Zelda (USA).zip", "x" * 40]
    assert all(0 <= table.bucket_of(key) < 7 for key in keys)


def test_bucket_of_empty_key_is_seed():
    assert HashTable(10000).bucket_of("") == 5381


def test_bucket_is_deterministic_for_same_size():
    first = HashTable(31)
    second = HashTable(31)
    assert first.bucket_of("Sonic") == second.bucket_of("Sonic")


def test_contains():
    table = HashTable(4)
    table.set("key", "value")
    assert "key" in table
    assert "other" not in table


def test_non_ascii_keys_round_trip():
    table = HashTable(5)
    table.set("pokémon", "poke")
    table.set("ポケモン", "jp")
    assert table.get("pokémon") == "poke"
    assert table.get("ポケモン") == "jp"