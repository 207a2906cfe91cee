"""Value extraction strategies.

Each ValueType turns an item into the list of candidate strings a filter
tests against its pattern:

* ``NAME``: the item's own names.
* ``FOLDER_NAME``: the names of the item's direct parent.
* ``BUILD_VERSION``: the labels of every build of every job the item holds.

Lists may contain ``None`` and duplicates; the matcher skips ``None`` and
stops at the first hit, so order and repetition do not change the verdict.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional

from ..core.errors import UnknownVariantError
from ..core.protocols import NamedItem, TopLevelItem
from .options import MatchOptions


MatchValues = List[Optional[str]]


def _item_values(item: TopLevelItem, options: MatchOptions, values: MatchValues) -> None:
    if options.match_name:
        values.append(item.name)
    if options.match_full_name:
        values.append(item.full_name)
    if options.match_display_name:
        values.append(item.display_name)
    if options.match_full_display_name:
        values.append(item.full_display_name)


def _folder_values(item: TopLevelItem, options: MatchOptions, values: MatchValues) -> None:
    parent = item.parent
    if parent is None:
        return
    # Only the simple name needs the parent to expose one; groups such as the
    # root container have no simple name at all.
    if options.match_name and isinstance(parent, NamedItem):
        values.append(parent.name)
    if options.match_full_name:
        values.append(parent.full_name)
    if options.match_display_name:
        values.append(parent.display_name)
    if options.match_full_display_name:
        values.append(parent.full_display_name)


def _build_values(item: TopLevelItem, options: MatchOptions, values: MatchValues) -> None:
    all_jobs = item.all_jobs
    if all_jobs is None:
        return
    # Snapshot: the host may add or remove jobs while we read.
    jobs = list(all_jobs)
    want_full = options.match_full_name or options.match_full_display_name
    want_short = options.match_name or options.match_display_name
    for job in jobs:
        for run in job.builds:
            if want_full:
                values.append(run.full_display_name)
            if want_short:
                values.append(run.display_name)


class ValueType(Enum):
    """Closed set of value extraction variants, keyed by persisted tag."""

    NAME = "NAME"
    FOLDER_NAME = "FOLDER_NAME"
    BUILD_VERSION = "BUILD_VERSION"

    @classmethod
    def tags(cls) -> List[str]:
        """Known persisted tags."""
        return [member.value for member in cls]

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "ValueType":
        """Resolve a persisted tag, failing loudly on anything unknown."""
        try:
            return cls(tag)
        except ValueError as e:
            raise UnknownVariantError(
                f"Unknown value type: {tag!r} (expected one of {', '.join(cls.tags())})",
                tag=tag,
                known=cls.tags(),
            ) from e

    def get_match_values(self, item: TopLevelItem, options: MatchOptions) -> MatchValues:
        """Collect the candidate strings of ``item`` for this variant."""
        values: MatchValues = []
        _EXTRACTORS[self](item, options, values)
        return values


_EXTRACTORS: Dict[ValueType, Callable[[TopLevelItem, MatchOptions, MatchValues], None]] = {
    ValueType.NAME: _item_values,
    ValueType.FOLDER_NAME: _folder_values,
    ValueType.BUILD_VERSION: _build_values,
}
