"""Protocol definitions for the host's read-only item model.

The host owns items, jobs and builds; the filter only reads them. Protocols
describe the accessors the filter relies on so any host model can be plugged
in without subclassing.
"""

from typing import Collection, Optional, Protocol, Sequence, runtime_checkable


class Run(Protocol):
    """One historical build of a job."""

    @property
    def display_name(self) -> Optional[str]:
        """Short build label, e.g. ``#5``."""

    @property
    def full_display_name(self) -> Optional[str]:
        """Build label qualified with its job, e.g. ``MyJob #5``."""


class Job(Protocol):
    """A buildable unit with a build history."""

    @property
    def builds(self) -> Sequence[Run]:
        """Builds in host order."""


@runtime_checkable
class ItemGroup(Protocol):
    """Anything that can contain items, including the virtual root."""

    @property
    def full_name(self) -> Optional[str]:
        """Slash-separated path of names."""

    @property
    def display_name(self) -> Optional[str]:
        """Human readable name."""

    @property
    def full_display_name(self) -> Optional[str]:
        """Human readable path."""


@runtime_checkable
class NamedItem(Protocol):
    """Anything exposing a simple name.

    Groups that are not items (the root container) do not satisfy this
    protocol because they expose no ``name``.
    """

    @property
    def name(self) -> Optional[str]:
        """Simple name, unique within the parent."""


@runtime_checkable
class Item(ItemGroup, NamedItem, Protocol):
    """An item with its own simple name and a parent group."""

    @property
    def parent(self) -> Optional[ItemGroup]:
        """Containing group, ``None`` when detached."""


class TopLevelItem(Item, Protocol):
    """An item as handed to a view filter."""

    @property
    def all_jobs(self) -> Optional[Collection[Job]]:
        """Every job the item contains (itself for a plain job)."""
