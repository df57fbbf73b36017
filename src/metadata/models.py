"""Data models for extracted dependency metadata."""

from dataclasses import dataclass
from typing import Dict, Tuple

from constants import Fields


@dataclass(frozen=True)
class FieldPair:
    """One classified term block: the field it describes and its cleaned value."""
    field: Fields
    value: str

    def as_tuple(self) -> Tuple[str, str]:
        return (self.field.value, self.value)


# Field name -> normalized value, for a single dependency.
DependencyMetadata = Dict[str, str]

# Dependency name -> DependencyMetadata, for one run.
AggregateResult = Dict[str, DependencyMetadata]

# (dependency name, (field name, value)) as folded by the aggregator.
MetaEntry = Tuple[str, Tuple[str, str]]
