import random

import pytest

from sceneobjects.colors import (
    COLOR_DICTIONARY,
    Color,
    from_name,
    nearest_color_name,
    random_color,
)


def test_from_name_is_case_insensitive():
    assert from_name("ORANGE") == COLOR_DICTIONARY["orange"]
    assert from_name("Purple") == COLOR_DICTIONARY["purple"]


def test_from_name_known_value():
    assert from_name("orange") == Color(255, 165, 0)


def test_from_name_unknown_falls_back_to_white():
    assert from_name("no such colour") == COLOR_DICTIONARY["white"]


@pytest.mark.parametrize("name", list(COLOR_DICTIONARY))
def test_nearest_name_of_dictionary_colour_is_itself(name):
    assert nearest_color_name(COLOR_DICTIONARY[name]) == name


def test_nearest_name_of_close_colour():
    assert nearest_color_name(Color(250, 160, 10)) == "orange"
    assert nearest_color_name(Color(5, 5, 5)) == "black"


def test_nearest_name_ignores_alpha():
    assert nearest_color_name(Color(0, 0, 255, 0)) == "blue"


def test_random_color_comes_from_dictionary():
    rng = random.Random(7)
    values = set(COLOR_DICTIONARY.values())
    for _ in range(50):
        assert random_color(rng) in values


def test_random_color_reaches_every_entry():
    rng = random.Random(1)
    seen = {random_color(rng) for _ in range(2000)}
    assert seen == set(COLOR_DICTIONARY.values())


def test_random_color_is_reproducible_with_seed():
    first = [random_color(random.Random(3)) for _ in range(5)]
    second = [random_color(random.Random(3)) for _ in range(5)]
    assert first == second


def test_channel_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(256, 0, 0)


def test_as_linear_of_white_is_one():
    assert COLOR_DICTIONARY["white"].as_linear() == (1.0, 1.0, 1.0, 1.0)