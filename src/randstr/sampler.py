"""Compiled random string generator and its constrained sampling algorithm."""

import logging
from collections.abc import Iterator, MutableSequence, Sequence
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Uniform randomness consumed by the generator.

    ``random.Random`` and ``random.SystemRandom`` both satisfy it.
    """

    def choice(self, seq: Sequence[Any]) -> Any: ...

    def shuffle(self, x: MutableSequence[Any]) -> None: ...


class RandStr:
    """Produces random strings from a compiled alphabet.

    Instances are built by ``RandStrBuilder`` and own their random source;
    every ``generate()`` call advances it. Share an instance across threads
    only behind a lock.
    """

    def __init__(
        self,
        alphabet: bytes,
        mandatory_sets: Sequence[bytes],
        length: int,
        rng: RandomSource,
    ) -> None:
        self._alphabet = alphabet
        self._mandatory_sets = tuple(mandatory_sets)
        self._mandatory_lookup = tuple(
            frozenset(required) for required in self._mandatory_sets
        )
        self._length = length
        self._rng = rng

    @property
    def alphabet(self) -> bytes:
        return self._alphabet

    @property
    def mandatory_sets(self) -> tuple[bytes, ...]:
        return self._mandatory_sets

    @property
    def length(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return (
            f"RandStr(alphabet_size={len(self._alphabet)}, "
            f"mandatory={len(self._mandatory_sets)}, length={self._length})"
        )

    def generate(self) -> str:
        """Return one freshly sampled string of exactly ``length`` chars."""
        rng = self._rng
        length = self._length
        buf = bytearray(rng.choice(self._alphabet) for _ in range(length))

        # Free positions that are the first match of a satisfied class.
        witnesses: set[int] = set()
        appended = 0
        for required, lookup in zip(
            self._mandatory_sets, self._mandatory_lookup
        ):
            pos = next(
                (i for i, code in enumerate(buf) if code in lookup), None
            )
            if pos is None:
                buf.append(rng.choice(required))
                appended += 1
            elif pos < length:
                witnesses.add(pos)

        if not appended:
            return buf.decode("ascii")

        logger.debug(
            "rearranging: %d mandatory chars appended, %d witnesses kept",
            appended,
            len(witnesses),
        )
        # length >= len(mandatory_sets) guarantees enough droppable slots.
        droppable = [i for i in range(length) if i not in witnesses]
        rng.shuffle(droppable)
        dropped = set(droppable[:appended])
        kept = [code for i, code in enumerate(buf) if i not in dropped]
        rng.shuffle(kept)
        return bytes(kept).decode("ascii")

    def generate_many(self, count: int) -> Iterator[str]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        for _ in range(count):
            yield self.generate()
