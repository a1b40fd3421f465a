"""randstr: random strings from configurable character classes."""

from randstr.alphabets import BUILTIN_CLASSES, CharacterClass, get_alphabet
from randstr.builder import RandStrBuilder, randstr
from randstr.errors import (
    InvalidCustomError,
    NoAlphabetError,
    RandStrError,
    TooShortError,
)
from randstr.models import RandStrConfig
from randstr.presets import get_preset, get_preset_names
from randstr.sampler import RandomSource, RandStr

__all__ = [
    "BUILTIN_CLASSES",
    "CharacterClass",
    "InvalidCustomError",
    "NoAlphabetError",
    "RandStr",
    "RandStrBuilder",
    "RandStrConfig",
    "RandStrError",
    "RandomSource",
    "TooShortError",
    "get_alphabet",
    "get_preset",
    "get_preset_names",
    "randstr",
]
