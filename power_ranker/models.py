"""
Core dataclasses for the power ranker system.

Defines Preference, VarianceEntry and SampleSuggestion models with validation,
plus parsing of raw preference records.
"""

from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import Field, TypeAdapter, ValidationError as PydanticValidationError
from typing_extensions import TypedDict

from .exceptions import InvalidArgumentError

# Items are opaque identifiers; they must be hashable and mutually comparable.
Item = Hashable


@dataclass(frozen=True)
class Preference:
    """
    One pairwise vote.

    A value of 0.5 or more means preference flows from source toward target
    with strength ``value``; below 0.5 it flows from target toward source with
    strength ``1 - value``.
    """

    source: Item
    target: Item
    value: float

    def __post_init__(self) -> None:
        """Validate preference data."""
        if not 0.0 <= self.value <= 1.0:
            raise InvalidArgumentError(f"Preference value must be in [0, 1], got {self.value}")
        if self.source == self.target:
            raise InvalidArgumentError(f"Preference source and target must differ, got {self.source!r}")


@dataclass(frozen=True)
class VarianceEntry:
    """Beta-distribution variance of the outcome between two items."""

    item_a: Item
    item_b: Item
    variance: float


@dataclass(frozen=True)
class SampleSuggestion:
    """Pair of items suggested for the next comparison."""

    item_a: Item
    item_b: Item
    cum_sum_variance: float


class PreferenceRecord(TypedDict):
    """Raw preference record as received from callers or JSON."""
    source: Hashable
    target: Hashable
    value: Annotated[float, Field(ge=0.0, le=1.0)]


_records_adapter = TypeAdapter(list[PreferenceRecord])


def parse_preferences(records: Iterable[Mapping[str, Any] | Preference]) -> list[Preference]:
    """
    Convert a mix of Preference objects and raw mappings into Preferences.

    Raw mappings are validated with pydantic; validation failures are raised
    as InvalidArgumentError.
    """
    records = list(records)
    raw = [r for r in records if not isinstance(r, Preference)]
    try:
        validated = iter(_records_adapter.validate_python(raw))
    except PydanticValidationError as e:
        raise InvalidArgumentError(f"Invalid preference record: {e}") from e

    preferences = []
    for record in records:
        if isinstance(record, Preference):
            preferences.append(record)
        else:
            parsed = next(validated)
            preferences.append(Preference(
                source=parsed["source"],
                target=parsed["target"],
                value=float(parsed["value"]),
            ))
    return preferences
