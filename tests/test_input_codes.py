import string

import pytest

from hazel.input_codes import Key, MouseButton


@pytest.mark.parametrize(
    "code, name",
    [(257, "ENTER"), (256, "ESCAPE"), (348, "MENU"), (32, "SPACE")],
)
def test_named_keys_by_value(code, name):
    assert Key(code).name == name


def test_letters_match_ascii():
    assert [Key(ord(letter)).name for letter in string.ascii_uppercase] == list(
        string.ascii_uppercase
    )


def test_digits_match_ascii():
    assert [Key(ord(str(digit))).name for digit in range(10)] == [
        f"D{digit}" for digit in range(10)
    ]


@pytest.mark.parametrize("number", range(1, 26))
def test_function_keys_are_consecutive(number):
    assert Key(290 + number - 1).name == f"F{number}"


def test_keypad_digits_are_consecutive():
    assert [Key(320 + d).name for d in range(10)] == [f"KP_{d}" for d in range(10)]


def test_lookup_by_value():
    assert Key(32) is Key.SPACE


def test_mouse_button_aliases():
    assert MouseButton(0) is MouseButton.LEFT
    assert MouseButton(1) is MouseButton.RIGHT
    assert MouseButton(2) is MouseButton.MIDDLE
    assert MouseButton(7) is MouseButton.LAST


def test_mouse_buttons_are_distinct_codes():
    assert [MouseButton(code) for code in range(8)] == list(MouseButton)


def test_unknown_key_code_rejected():
    with pytest.raises(ValueError):
        Key(1)