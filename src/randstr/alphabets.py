"""Built-in character classes, computed once at import from predicates."""

from collections.abc import Callable
from enum import Enum


class CharacterClass(str, Enum):
    UPPER = "upper"
    LOWER = "lower"
    LETTER = "letter"
    DIGIT = "digit"
    SYMBOL = "symbol"
    WHITESPACE = "whitespace"
    CUSTOM = "custom"


# Code points 0..126; DEL (127) is never part of a class.
_ASCII_LIMIT = 127
_ASCII_WHITESPACE = frozenset(" \t\n\x0b\x0c\r")


def _is_lower(ch: str) -> bool:
    return "a" <= ch <= "z"


def _is_upper(ch: str) -> bool:
    return "A" <= ch <= "Z"


def _is_letter(ch: str) -> bool:
    return _is_lower(ch) or _is_upper(ch)


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_whitespace(ch: str) -> bool:
    return ch in _ASCII_WHITESPACE


def _is_control(ch: str) -> bool:
    return ord(ch) < 0x20 or ord(ch) == 0x7F


def _is_symbol(ch: str) -> bool:
    return not (
        _is_control(ch)
        or _is_letter(ch)
        or _is_digit(ch)
        or _is_whitespace(ch)
    )


def _build_alphabet(predicate: Callable[[str], bool]) -> bytes:
    return bytes(
        code for code in range(_ASCII_LIMIT) if predicate(chr(code))
    )


_REGISTRY: dict[CharacterClass, bytes] = {
    CharacterClass.UPPER: _build_alphabet(_is_upper),
    CharacterClass.LOWER: _build_alphabet(_is_lower),
    CharacterClass.LETTER: _build_alphabet(_is_letter),
    CharacterClass.DIGIT: _build_alphabet(_is_digit),
    CharacterClass.SYMBOL: _build_alphabet(_is_symbol),
    CharacterClass.WHITESPACE: _build_alphabet(_is_whitespace),
}

BUILTIN_CLASSES: tuple[CharacterClass, ...] = tuple(_REGISTRY)


def get_alphabet(char_class: CharacterClass) -> bytes:
    """Return the sorted, deduplicated bytes of a built-in class.

    Raises ValueError for CharacterClass.CUSTOM, whose characters are
    supplied by the caller rather than the registry.
    """
    char_class = CharacterClass(char_class)
    try:
        return _REGISTRY[char_class]
    except KeyError as err:
        raise ValueError(
            f"{char_class.value!r} has no built-in alphabet"
        ) from err
