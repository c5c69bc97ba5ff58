import pytest

from perfect_hash import CollisionError, HashFinder, InvalidConfigurationError, PerfectHashTable


def test_table_resolves_every_keyword(go_family, go_keywords):
    assert HashFinder().search(go_family, 6, go_keywords).success

    table = PerfectHashTable.build(go_family, 6, go_keywords)

    assert len(table) == 25
    assert table.load_factor == pytest.approx(25 / 64)
    for position, keyword in enumerate(go_keywords):
        assert table.lookup(keyword) == position
        assert keyword in table
    assert sum(slot is not None for slot in table.slots) == 25
    table.verify()


def test_table_rejects_unknown_keys(go_family, go_keywords):
    HashFinder().search(go_family, 6, go_keywords)
    table = PerfectHashTable.build(go_family, 6, go_keywords)

    for probe in ["BREAK", "goroutine", "x", ""]:
        assert table.lookup(probe) is None
        assert probe not in table
    assert 42 not in table
    with pytest.raises(KeyError):
        table.verify(["nil"])


def test_unsearched_family_collides(go_family, go_keywords):
    with pytest.raises(CollisionError) as excinfo:
        PerfectHashTable.build(go_family, 6, go_keywords)
    err = excinfo.value
    assert err.existing in go_keywords
    assert err.key in go_keywords
    assert 0 <= err.slot < 64


def test_duplicate_keys_collide(go_family):
    with pytest.raises(CollisionError) as excinfo:
        PerfectHashTable.build(go_family, 6, ["for", "for"])
    assert excinfo.value.existing == excinfo.value.key == "for"


def test_invalid_table_size(go_family):
    with pytest.raises(InvalidConfigurationError):
        PerfectHashTable.build(go_family, 0, ["a"])
