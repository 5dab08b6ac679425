"""Core data types for slice maps and morph pairs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Mapping, Sequence


@dataclass(frozen=True)
class Interval:
    """One vertical ink run in a column.

    Coordinates are normalized to [0, 1] with ``top < bottom``. The invariant is
    not enforced here so malformed data can still be represented and rejected by
    :func:`slice_morph.validation.validate_slice_map`.
    """
    top: float
    bottom: float

    @property
    def center(self) -> float:
        return (self.top + self.bottom) / 2

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @classmethod
    def coerce(cls, value: Any) -> "Interval":
        """Build an Interval from an Interval, a ``{"top", "bottom"}`` mapping or a pair."""
        if isinstance(value, Interval):
            return value
        if isinstance(value, Mapping):
            return cls(top=value["top"], bottom=value["bottom"])
        if isinstance(value, Sequence) and not isinstance(value, str) and len(value) == 2:
            return cls(top=value[0], bottom=value[1])
        raise TypeError(f"Cannot interpret {value!r} as an Interval")

    def to_dict(self) -> dict[str, float]:
        return {"top": self.top, "bottom": self.bottom}


Column = List[Interval]
SliceMap = List[Column]

# Small centered interval (height 0.03) used wherever a column has nothing to
# show: empty extraction results, appearing/vanishing partners and padding.
SEED_INTERVAL = Interval(top=0.485, bottom=0.515)


@dataclass
class MatchPair:
    """Matched segments for one column.

    ``current_segments[i]`` morphs into ``target_segments[i]``.
    """
    current_segments: List[Interval] = field(default_factory=list)
    target_segments: List[Interval] = field(default_factory=list)
    slice_index: int = 0

    def __post_init__(self) -> None:
        if len(self.current_segments) != len(self.target_segments):
            raise ValueError(
                "current_segments and target_segments must have the same length "
                f"({len(self.current_segments)} != {len(self.target_segments)})"
            )

    def __len__(self) -> int:
        return len(self.current_segments)

    def pairs(self) -> list[tuple[Interval, Interval]]:
        return list(zip(self.current_segments, self.target_segments))


MorphPairs = List[MatchPair]


def as_column(segments: Sequence[Any]) -> Column:
    """Return ``segments`` as a list of Interval objects."""
    return [Interval.coerce(seg) for seg in segments]


def as_slice_map(columns: Sequence[Sequence[Any]]) -> SliceMap:
    """Return ``columns`` as a SliceMap of Interval objects."""
    return [as_column(col) for col in columns]


__all__ = [
    "Interval",
    "Column",
    "SliceMap",
    "SEED_INTERVAL",
    "MatchPair",
    "MorphPairs",
    "as_column",
    "as_slice_map",
]
