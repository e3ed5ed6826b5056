"""
Per-location reroll counters.

The counters belong to whoever orchestrates the recommendation (a screen,
a request handler); the selector only ever receives the current number.
``RerollState`` is an immutable value: every change returns a new state, so
a concurrent reroll for the same location resolves as last write wins in
the caller.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping


def _check_counter(location_id: str, counter: Any) -> int:
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise ValueError(f"Reroll counter for {location_id!r} must be an int, got {counter!r}")
    if counter < 0:
        raise ValueError(f"Reroll counter for {location_id!r} must be >= 0, got {counter}")
    return counter


@dataclass(frozen=True)
class RerollState:
    """
    Mapping of location id -> reroll counter.

    Location ids are stored as strings; every method converts the id it is
    given with ``str()``. States are hashable and compare by their counters.
    """
    counters: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_mapping(cls, counters: Mapping[str, Any]) -> "RerollState":
        """
        Build a state from stored counters.

        Raises:
            ValueError: If any counter is negative or not an int.
        """
        checked = {str(k): _check_counter(str(k), v) for k, v in counters.items()}
        return cls(MappingProxyType(checked))

    def _with(self, counters: Dict[str, int]) -> "RerollState":
        return RerollState(MappingProxyType(counters))

    def counter_for(self, location_id: Any) -> int:
        return self.counters.get(str(location_id), 0)

    def add(self, location_id: Any) -> "RerollState":
        """Start tracking a location at 0 (resets an existing counter)."""
        counters = dict(self.counters)
        counters[str(location_id)] = 0
        return self._with(counters)

    def reroll(self, location_id: Any) -> "RerollState":
        """Bump a location's counter; an untracked location starts from 0."""
        key = str(location_id)
        counters = dict(self.counters)
        counters[key] = counters.get(key, 0) + 1
        return self._with(counters)

    def remove(self, location_id: Any) -> "RerollState":
        key = str(location_id)
        if key not in self.counters:
            return self
        counters = dict(self.counters)
        del counters[key]
        return self._with(counters)

    def __contains__(self, location_id: object) -> bool:
        return str(location_id) in self.counters

    def __len__(self) -> int:
        return len(self.counters)

    def __hash__(self) -> int:
        return hash(frozenset(self.counters.items()))

    def to_dict(self) -> Dict[str, int]:
        return dict(self.counters)
