"""Matching axes: which textual forms of a candidate are compared."""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class MatchOptions:
    """Four independent switches selecting the strings a filter tests."""

    match_name: bool = False
    match_full_name: bool = False
    match_display_name: bool = False
    match_full_display_name: bool = False

    @property
    def any_enabled(self) -> bool:
        """True when at least one axis is switched on."""
        return (
            self.match_name
            or self.match_full_name
            or self.match_display_name
            or self.match_full_display_name
        )

    def with_default_policy(self) -> "MatchOptions":
        """Return options guaranteed to test at least one axis.

        With every switch off a filter could never match anything, so the
        simple name is enabled instead. Options that already have an axis
        enabled are returned unchanged.
        """
        if self.any_enabled:
            return self
        return replace(self, match_name=True)
