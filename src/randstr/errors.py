class RandStrError(ValueError):
    """Base class for generator configuration errors."""


class NoAlphabetError(RandStrError):
    """Raised when no enabled class contributes a character to sample."""

    def __init__(self) -> None:
        super().__init__("No alphabet specified")


class TooShortError(RandStrError):
    """Raised when length cannot hold one character per mandatory class."""

    def __init__(self, required: int, length: int) -> None:
        super().__init__(
            f"Length {length} is too short to contain all {required} "
            "mandatory alphabets"
        )
        self.required = required
        self.length = length


class InvalidCustomError(RandStrError):
    """Raised when the custom class cannot be sampled or satisfied."""
