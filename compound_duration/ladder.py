"""Unit ladders and the shared decompose-and-render routine.

A ladder is an ordered list of units, largest first, ending with a unit of
size 1. Rendering a value walks the ladder once, peeling off the count for
each unit with `divmod` and skipping units whose count is zero.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from typing_extensions import override

from compound_duration.util import DAY, HOUR, MINUTE, MS, NANOS, NS, SECOND, US, WEEK


@dataclass(frozen=True, kw_only=True)
class Unit:
    label: str
    size: int

    def __post_init__(self) -> None:
        if not self.label:
            raise ValueError("Unit label must be a non-empty string")
        if self.size < 1:
            raise ValueError(
                f"Unit size must be >= 1, got {self.size} for {self.label!r}"
            )


@dataclass(frozen=True, kw_only=True)
class Term:
    """One `count` + `label` piece of a rendered duration."""

    count: int
    unit: Unit

    @property
    def value(self) -> int:
        """Magnitude of this term in the ladder's base unit."""
        return self.count * self.unit.size

    @override
    def __str__(self) -> str:
        return f"{self.count}{self.unit.label}"


@dataclass(frozen=True)
class Ladder:
    units: tuple[Unit, ...]

    def __post_init__(self) -> None:
        if not self.units:
            raise ValueError("Ladder must contain at least one unit")

        labels = [unit.label for unit in self.units]
        if len(set(labels)) != len(labels):
            raise ValueError(f"Ladder labels must be unique, got {labels}")

        for larger, smaller in zip(self.units, self.units[1:]):
            if larger.size <= smaller.size:
                raise ValueError(
                    f"Ladder sizes must be strictly descending.\n"
                    f"Got {larger.label}={larger.size} before "
                    f"{smaller.label}={smaller.size}\n"
                    f"Hint: list units from largest to smallest"
                )

        if self.units[-1].size != 1:
            raise ValueError(
                f"Ladder must end with a unit of size 1.\n"
                f"Got {self.units[-1].label}={self.units[-1].size}\n"
                f"Hint: without a base unit the remainder cannot be rendered"
            )

    @property
    def smallest(self) -> Unit:
        return self.units[-1]

    @property
    def zero(self) -> str:
        """Rendering of a zero value, e.g. "0s"."""
        return f"0{self.smallest.label}"

    def decompose(self, value: int) -> Iterator[Term]:
        """Yield the non-zero terms of `value`, largest unit first.

        The terms partition `value` exactly: summing `term.value` gives the
        input back. Zero yields no terms at all.
        """
        remainder = value
        for unit in self.units:
            count, remainder = divmod(remainder, unit.size)
            if count != 0:
                yield Term(count=count, unit=unit)

    def render(self, value: int) -> str:
        """Concatenate the terms of `value` with no separators."""
        if value == 0:
            return self.zero
        return "".join(str(term) for term in self.decompose(value))


def ladder(*pairs: tuple[str, int]) -> Ladder:
    """Build a ladder from `(label, size)` pairs, largest first.

    Example:
        >>> ladder(("h", 3600), ("m", 60), ("s", 1)).render(3661)
        '1h1m1s'
    """
    return Ladder(tuple(Unit(label=label, size=size) for label, size in pairs))


DHMS = ladder(
    ("d", DAY),
    ("h", HOUR),
    ("m", MINUTE),
    ("s", SECOND),
)

WDHMS = ladder(("w", WEEK), *((unit.label, unit.size) for unit in DHMS.units))

DHMS_NS = ladder(
    ("d", DAY * NANOS),
    ("h", HOUR * NANOS),
    ("m", MINUTE * NANOS),
    ("s", SECOND * NANOS),
    ("ms", MS),
    ("\u00b5s", US),
    ("ns", NS),
)
