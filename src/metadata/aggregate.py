"""Fold extracted field pairs into the per-run nested mapping."""

from __future__ import annotations

from functools import reduce
from typing import Iterable, Optional, Sequence

from constants import Constants
from metadata.models import AggregateResult, MetaEntry


def update_meta_dep(meta_dep: AggregateResult, entry: MetaEntry) -> AggregateResult:
    """Set one field for one dependency, creating the dependency if absent.

    A later write to the same dependency/field overwrites the earlier value.
    The accumulator is updated in place and returned so this can be used as a
    ``functools.reduce`` step.

    Args:
        meta_dep: Accumulated result, possibly empty.
        entry: ``(dependency_name, (field_name, value))``.

    Returns:
        The updated result.
    """
    dep_name, (field_name, value) = entry
    meta_dep.setdefault(dep_name, {})[field_name] = value
    return meta_dep


def fold_entries(entries: Iterable[MetaEntry], meta_dep: Optional[AggregateResult] = None) -> AggregateResult:
    """Reduce entries into ``meta_dep`` (a new mapping when not given)."""
    return reduce(update_meta_dep, entries, {} if meta_dep is None else meta_dep)


def drop_fields(meta_dep: AggregateResult, fields: Sequence[str]) -> AggregateResult:
    """Return a copy of ``meta_dep`` without the named fields."""
    return {
        dep_name: {k: v for k, v in dep_fields.items() if k not in fields}
        for dep_name, dep_fields in meta_dep.items()
    }


def select_fields(meta_dep: AggregateResult, licences: bool = False, verbose: bool = False) -> AggregateResult:
    """Apply the output mode.

    Full output is the default; only ``licences`` without ``verbose`` removes
    Maintainers and Repo. Licenses and Version always remain.
    """
    if verbose or not licences:
        return meta_dep
    return drop_fields(meta_dep, Constants.LICENSES_ONLY_DROP)
