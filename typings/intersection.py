from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from utils.vector_operations import approx_equal


@dataclass(frozen=True, slots=True, eq=False)
class Intersection:
    t: float
    obj: object

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.obj is other.obj and approx_equal(self.t, other.t)


def intersections(*records: Intersection) -> List[Intersection]:
    """Collects records into a list ordered smallest t first."""
    return sorted(records, key=lambda record: record.t)


def hit(records: Iterable[Intersection]) -> Intersection | None:
    """The visible intersection: lowest non-negative t, or None when everything is behind the ray."""
    best_hit: Intersection | None = None
    for record in records:
        if record.t < 0.0:
            continue
        if best_hit is None or record.t < best_hit.t:
            best_hit = record
    return best_hit
