from typing import Any

from pydantic import BaseModel, Field, model_validator

from randstr.alphabets import CharacterClass

_CLASS_FIELDS = (
    "upper",
    "lower",
    "letter",
    "digit",
    "symbol",
    "whitespace",
)


def _validate_no_bool_length(data: Any) -> None:
    if not isinstance(data, dict):
        return
    if isinstance(data.get("length"), bool):
        raise ValueError("length: bool is not allowed")


class RandStrConfig(BaseModel):
    """Serializable generator configuration.

    Holds the class toggles, the mandatory flags, the optional custom class
    and the target length. The random source is deliberately absent: it is
    attached by the builder and never serialized.
    """

    upper: bool = Field(default=False, description="Allow A-Z")
    lower: bool = Field(default=False, description="Allow a-z")
    letter: bool = Field(default=False, description="Allow A-Z and a-z")
    digit: bool = Field(default=False, description="Allow 0-9")
    symbol: bool = Field(default=False, description="Allow ASCII punctuation")
    whitespace: bool = Field(
        default=False, description="Allow ASCII whitespace"
    )
    custom: str | None = Field(
        default=None, description="Caller-supplied characters"
    )

    must_upper: bool = False
    must_lower: bool = False
    must_letter: bool = False
    must_digit: bool = False
    must_symbol: bool = False
    must_whitespace: bool = False
    must_custom: bool = False

    length: int = Field(default=0, ge=0, description="Output length")

    @model_validator(mode="before")
    @classmethod
    def validate_input(cls, data: Any) -> Any:
        _validate_no_bool_length(data)
        return data

    @model_validator(mode="after")
    def validate_config(self) -> "RandStrConfig":
        # A mandatory class is always enabled, as with the builder setters.
        for name in _CLASS_FIELDS:
            if getattr(self, f"must_{name}"):
                setattr(self, name, True)
        if self.must_custom and not self.custom:
            raise ValueError("must_custom requires a non-empty custom set")
        if self.custom is not None and not self.custom.isascii():
            raise ValueError("custom must be ASCII-only")
        return self

    def enabled_classes(self) -> list[CharacterClass]:
        enabled = [
            CharacterClass(name)
            for name in _CLASS_FIELDS
            if getattr(self, name)
        ]
        if self.custom is not None:
            enabled.append(CharacterClass.CUSTOM)
        return enabled

    def mandatory_classes(self) -> list[CharacterClass]:
        """Mandatory classes in the order their constraints are checked."""
        order = (
            CharacterClass.UPPER,
            CharacterClass.LOWER,
            CharacterClass.LETTER,
            CharacterClass.DIGIT,
            CharacterClass.WHITESPACE,
            CharacterClass.SYMBOL,
            CharacterClass.CUSTOM,
        )
        return [c for c in order if getattr(self, f"must_{c.value}")]
