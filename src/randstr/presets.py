"""Named generator configurations.

Each preset is a set of overrides applied on top of an empty
``RandStrConfig``, so presets stay valid as the config model grows.
"""

from dataclasses import dataclass
from typing import Any

from randstr.models import RandStrConfig


@dataclass
class Preset:
    """A single named configuration."""

    name: str
    description: str
    config_overrides: dict[str, Any]


PRESETS: dict[str, Preset] = {
    p.name: p
    for p in [
        Preset(
            "password",
            "letters, digits and symbols; one of each kind required",
            {
                "letter": True,
                "digit": True,
                "symbol": True,
                "must_upper": True,
                "must_lower": True,
                "must_digit": True,
                "must_symbol": True,
                "length": 16,
            },
        ),
        Preset(
            "alphanumeric",
            "letters and digits",
            {"letter": True, "digit": True, "length": 16},
        ),
        Preset(
            "pin",
            "digits only",
            {"digit": True, "length": 6},
        ),
        Preset(
            "token",
            "letters and digits; at least one of each",
            {
                "letter": True,
                "digit": True,
                "must_letter": True,
                "must_digit": True,
                "length": 32,
            },
        ),
        Preset(
            "hex",
            "lowercase hexadecimal digits",
            {"custom": "0123456789abcdef", "length": 32},
        ),
    ]
}


def get_preset_names() -> list[str]:
    return list(PRESETS)


def get_preset(name: str) -> RandStrConfig:
    """Return a fresh config for the named preset.

    Raises ValueError for unknown names.
    """
    try:
        preset = PRESETS[name]
    except KeyError as err:
        valid = ", ".join(get_preset_names())
        raise ValueError(
            f"Unknown preset: {name!r} (valid: {valid})"
        ) from err
    return RandStrConfig(**preset.config_overrides)
