from decimal import Decimal

import pytest

from extensible_choice.core.normalize import choice_to_string, trim_name


@pytest.mark.parametrize(
    "raw, expected",
    [(None, None), ("name", "name"), ("  name\t", "name"), ("   ", ""), ("", ""), (" a b ", "a b")],
)
def test_trim_name(raw, expected):
    assert trim_name(raw) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        ("  text ", "  text "),
        (True, "true"),
        (False, "false"),
        (42, "42"),
        (-7, "-7"),
        (1.0, "1.0"),
        (0.1, "0.1"),
        (2.5e-10, "2.5e-10"),
        (Decimal("3.14"), "3.14"),
        (b"caf\xc3\xa9", "café"),
        ([1, "a", None], '[1,"a",null]'),
        ((True, 2), "[true,2]"),
        ({"k": "v"}, '{"k":"v"}'),
    ],
)
def test_choice_to_string(value, expected):
    assert choice_to_string(value) == expected


def test_choice_to_string_nested_unknown_objects():
    class Version:
        def __str__(self):
            return "v1"

    assert choice_to_string([Version()]) == '["v1"]'
    assert choice_to_string(Version()) == "v1"
