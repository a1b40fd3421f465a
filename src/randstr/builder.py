import logging
import random

from randstr.alphabets import CharacterClass, get_alphabet
from randstr.errors import (
    InvalidCustomError,
    NoAlphabetError,
    RandStrError,
    TooShortError,
)
from randstr.models import RandStrConfig
from randstr.sampler import RandomSource, RandStr

logger = logging.getLogger(__name__)


class RandStrBuilder:
    """Fluent builder that compiles a configuration into a ``RandStr``.

    Every setter mutates the builder and returns it, so calls chain::

        gen = randstr().all().must_digit().length(12).build()
    """

    def __init__(self, config: RandStrConfig | None = None) -> None:
        if config is None:
            config = RandStrConfig()
        self._config = config.model_copy()
        self._rng: RandomSource | None = None

    @classmethod
    def from_config(
        cls, config: RandStrConfig, rng: RandomSource | None = None
    ) -> "RandStrBuilder":
        builder = cls(RandStrConfig.model_validate(config.model_dump()))
        builder._rng = rng
        return builder

    @property
    def config(self) -> RandStrConfig:
        return self._config.model_copy()

    def upper(self) -> "RandStrBuilder":
        self._config.upper = True
        return self

    def lower(self) -> "RandStrBuilder":
        self._config.lower = True
        return self

    def letter(self) -> "RandStrBuilder":
        self._config.letter = True
        return self

    def digit(self) -> "RandStrBuilder":
        self._config.digit = True
        return self

    def symbol(self) -> "RandStrBuilder":
        self._config.symbol = True
        return self

    def whitespace(self) -> "RandStrBuilder":
        self._config.whitespace = True
        return self

    def custom(self, chars: str) -> "RandStrBuilder":
        """Use ``chars`` as the custom class, replacing any previous one."""
        self._config.custom = chars
        return self

    def all(self) -> "RandStrBuilder":
        return self.letter().digit().symbol()

    def must_upper(self) -> "RandStrBuilder":
        self._config.must_upper = True
        return self.upper()

    def must_lower(self) -> "RandStrBuilder":
        self._config.must_lower = True
        return self.lower()

    def must_letter(self) -> "RandStrBuilder":
        self._config.must_letter = True
        return self.letter()

    def must_digit(self) -> "RandStrBuilder":
        self._config.must_digit = True
        return self.digit()

    def must_symbol(self) -> "RandStrBuilder":
        self._config.must_symbol = True
        return self.symbol()

    def must_whitespace(self) -> "RandStrBuilder":
        self._config.must_whitespace = True
        return self.whitespace()

    def must_custom(self, chars: str) -> "RandStrBuilder":
        self.custom(chars)
        self._config.must_custom = True
        return self

    def length(self, n: int) -> "RandStrBuilder":
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"length must be an int, got {type(n).__name__}")
        if n < 0:
            raise ValueError(f"length must be >= 0, got {n}")
        self._config.length = n
        return self

    def rng(self, rng: RandomSource) -> "RandStrBuilder":
        self._rng = rng
        return self

    def _class_bytes(self, char_class: CharacterClass) -> bytes:
        if char_class is CharacterClass.CUSTOM:
            return (self._config.custom or "").encode("ascii")
        return get_alphabet(char_class)

    def try_build(self) -> RandStr:
        """Compile the configuration.

        Raises NoAlphabetError when no enabled class contributes a
        character, and TooShortError when the length cannot hold one
        character from every mandatory class. Raises InvalidCustomError
        when the custom class is not ASCII, or is mandatory but empty.
        """
        config = self._config
        if config.custom is not None and not config.custom.isascii():
            raise InvalidCustomError("custom characters must be ASCII-only")
        if config.must_custom and not config.custom:
            raise InvalidCustomError(
                "mandatory custom class has no characters"
            )
        combined = b"".join(
            self._class_bytes(c) for c in config.enabled_classes()
        )
        if not combined:
            raise NoAlphabetError()
        alphabet = bytes(sorted(set(combined)))

        mandatory_sets = [
            self._class_bytes(c) for c in config.mandatory_classes()
        ]
        if config.length < len(mandatory_sets):
            raise TooShortError(len(mandatory_sets), config.length)

        rng = self._rng if self._rng is not None else random.Random()
        logger.debug(
            "compiled generator: alphabet=%d chars, mandatory=%d, length=%d",
            len(alphabet),
            len(mandatory_sets),
            config.length,
        )
        return RandStr(alphabet, mandatory_sets, config.length, rng)

    def build(self) -> RandStr:
        """Compile the configuration, treating misconfiguration as a bug.

        Raises RuntimeError chained from the underlying RandStrError.
        """
        try:
            return self.try_build()
        except RandStrError as err:
            logger.warning("invalid randstr configuration: %s", err)
            raise RuntimeError(
                f"invalid randstr configuration: {err}"
            ) from err


def randstr() -> RandStrBuilder:
    """Return a new, empty builder."""
    return RandStrBuilder()
