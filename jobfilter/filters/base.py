"""Base contract shared by view job filters."""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.protocols import TopLevelItem


class IncludeExcludeJobFilter(ABC):
    """A filter that reports one verdict per item.

    The include/exclude mode tag is kept as given; combining verdicts of
    several filters under that mode is the host view's job.
    """

    def __init__(self, include_exclude_type_string: Optional[str]) -> None:
        self._include_exclude_type_string = include_exclude_type_string

    @property
    def include_exclude_type_string(self) -> Optional[str]:
        """Opaque include/exclude mode tag."""
        return self._include_exclude_type_string

    @abstractmethod
    def matches(self, item: TopLevelItem) -> bool:
        """Return True if ``item`` satisfies this filter."""
