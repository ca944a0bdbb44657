import pytest

from starfield.gametype import GameObjectType, hash_name


def test_empty_name_hashes_to_zero():
    assert hash_name("") == 0


def test_none_hashes_to_zero():
    assert hash_name(None) == 0


def test_single_character_value():
    assert hash_name("a") == 6357089


def test_short_names_are_case_sensitive():
    assert hash_name("Asteroid") != hash_name("asteroid")


def test_full_blocks_are_case_insensitive():
    assert hash_name("ABCDEFGHIJKLMNOP") == hash_name("abcdefghijklmnop")


def test_trailing_bytes_keep_case():
    assert hash_name("ABCDEFGHIJKLMNOPq") == hash_name("abcdefghijklmnopq")
    assert hash_name("abcdefghijklmnopQ") != hash_name("abcdefghijklmnopq")


@pytest.mark.parametrize("name", ["Spaceship", "Bullet", "x" * 7, "y" * 20000])
def test_result_fits_in_32_bits(name):
    value = hash_name(name)
    assert 0 <= value <= 0xFFFFFFFF


def test_short_name_components_are_reduced():
    value = hash_name("Spaceship")
    assert value & 0xFFFF < 65521
    assert value >> 16 < 65521


def test_two_character_value():
    assert hash_name("ab") == 19136707


def test_type_keeps_name_and_id():
    t = GameObjectType("Asteroid")
    assert t.type_name == "Asteroid"
    assert t.type_id == hash_name("Asteroid")


def test_equality_by_identifier():
    assert GameObjectType("Asteroid") == GameObjectType("Asteroid")
    assert GameObjectType("Asteroid") != GameObjectType("Spaceship")


def test_ordering_follows_identifier():
    a = GameObjectType("Asteroid")
    b = GameObjectType("Spaceship")
    assert (a < b) == (a.type_id < b.type_id)
    assert sorted([b, a]) == sorted([a, b])


def test_usable_in_sets():
    types = {GameObjectType("Bullet"), GameObjectType("Bullet"), GameObjectType("Asteroid")}
    assert len(types) == 2


def test_comparison_with_other_type_is_false():
    assert (GameObjectType("Bullet") == "Bullet") is False