"""Apply a filter across a catalog of items."""

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from ..core.enums import SelectionOutcome
from ..core.log import get_logger, log_selection_event
from ..core.protocols import TopLevelItem
from .base import IncludeExcludeJobFilter

logger = get_logger(__name__)


@dataclass
class SelectionResult:
    """Items partitioned by one filter's verdict."""

    matched: List[TopLevelItem]
    unmatched: List[TopLevelItem]
    total: int
    outcomes: List[Tuple[TopLevelItem, SelectionOutcome]] = field(default_factory=list)

    @property
    def matched_count(self) -> int:
        """Number of matching items."""
        return len(self.matched)

    @property
    def unmatched_count(self) -> int:
        """Number of non-matching items."""
        return len(self.unmatched)

    @property
    def match_rate(self) -> float:
        """Percentage of items that matched."""
        if self.total == 0:
            return 0.0
        return self.matched_count / self.total * 100


class Selector:
    """Evaluates one filter for every item, keeping the host's order."""

    def __init__(self, job_filter: IncludeExcludeJobFilter, logger_factory=None):
        """Initialize selector.

        Args:
            job_filter: Filter whose verdict partitions the items
            logger_factory: Optional logger factory for dependency injection
        """
        if logger_factory:
            self.logger = logger_factory.create_logger("selector")
        else:
            self.logger = logger
        self.job_filter = job_filter

    def select(self, items: Iterable[TopLevelItem]) -> SelectionResult:
        """Partition ``items`` into matched and unmatched lists."""
        items = list(items)
        matched: List[TopLevelItem] = []
        unmatched: List[TopLevelItem] = []
        outcomes: List[Tuple[TopLevelItem, SelectionOutcome]] = []
        for item in items:
            if self.job_filter.matches(item):
                matched.append(item)
                outcomes.append((item, SelectionOutcome.MATCHED))
            else:
                unmatched.append(item)
                outcomes.append((item, SelectionOutcome.UNMATCHED))

        result = SelectionResult(matched, unmatched, len(items), outcomes)
        log_selection_event(
            self.logger, "complete", result.matched_count, result.total,
            match_rate=round(result.match_rate, 1),
        )
        return result
