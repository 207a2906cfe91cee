"""Regular expression job filter."""

import re
from typing import Any, Mapping, Optional, Pattern, Union

from pydantic import ValidationError

from ..core.errors import ConfigurationError, PatternCompileError, UnknownVariantError
from ..core.log import get_logger, log_filter_event
from ..core.protocols import TopLevelItem
from ..core.types import RegexFilterSettings
from .base import IncludeExcludeJobFilter
from .options import MatchOptions
from .value_type import ValueType

logger = get_logger(__name__)


def compile_pattern(regex: Optional[str]) -> Pattern[str]:
    """Compile ``regex`` or raise PatternCompileError."""
    if regex is None:
        raise PatternCompileError("Regular expression is missing", pattern=None)
    try:
        return re.compile(regex)
    except re.error as e:
        raise PatternCompileError(
            f"Invalid regular expression {regex!r}: {e}",
            pattern=regex,
            position=e.pos,
        ) from e


class RegexJobFilter(IncludeExcludeJobFilter):
    """Matches items whose selected names fully match a regular expression.

    A filter is built from its persisted strings and booleans, either through
    the constructor or through :meth:`restore`. Both paths compile the pattern
    and resolve the value type before returning, so a filter that exists can
    always answer :meth:`matches`. Nothing is mutated afterwards; build a new
    filter to change the configuration.
    """

    def __init__(
        self,
        regex: str,
        include_exclude_type_string: Optional[str],
        value_type_string: str,
        match_name: bool = False,
        match_full_name: bool = False,
        match_display_name: bool = False,
        match_full_display_name: bool = False,
        logger_factory=None,
    ) -> None:
        """Create a filter.

        Args:
            regex: Pattern source; the whole candidate must match it
            include_exclude_type_string: Mode tag handed to the host view
            value_type_string: ``NAME``, ``FOLDER_NAME`` or ``BUILD_VERSION``
            match_name: Test simple names
            match_full_name: Test slash-separated full names
            match_display_name: Test display names
            match_full_display_name: Test full display names
            logger_factory: Optional logger factory for dependency injection

        Raises:
            PatternCompileError: ``regex`` is not a valid pattern
            UnknownVariantError: ``value_type_string`` names no variant
        """
        super().__init__(include_exclude_type_string)
        if logger_factory:
            self._logger = logger_factory.create_logger("regex_filter")
        else:
            self._logger = logger

        self._regex = regex
        self._value_type_string = value_type_string
        try:
            self._pattern = compile_pattern(regex)
            self._value_type = ValueType.from_tag(value_type_string)
        except (PatternCompileError, UnknownVariantError) as e:
            self._logger.error("Rejected filter configuration: %s", e.message)
            raise

        self._options = MatchOptions(
            match_name=match_name,
            match_full_name=match_full_name,
            match_display_name=match_display_name,
            match_full_display_name=match_full_display_name,
        ).with_default_policy()
        log_filter_event(self._logger, "created", regex=regex, value_type=value_type_string)

    @classmethod
    def restore(
        cls,
        persisted: Union[RegexFilterSettings, Mapping[str, Any]],
        logger_factory=None,
    ) -> "RegexJobFilter":
        """Rebuild a filter from its persisted form.

        Accepts a :class:`RegexFilterSettings` or a mapping with either the
        camelCase or the snake_case field names.
        """
        if not isinstance(persisted, RegexFilterSettings):
            try:
                persisted = RegexFilterSettings.model_validate(persisted)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid persisted filter: {e}") from e

        restored = cls(
            persisted.regex,
            persisted.include_exclude_type_string,
            persisted.value_type_string,
            match_name=persisted.match_name,
            match_full_name=persisted.match_full_name,
            match_display_name=persisted.match_display_name,
            match_full_display_name=persisted.match_full_display_name,
            logger_factory=logger_factory,
        )
        log_filter_event(
            restored._logger, "restored", regex=restored.regex,
            value_type=restored.value_type_string,
        )
        return restored

    def to_settings(self) -> RegexFilterSettings:
        """Persisted form: strings and booleans only."""
        return RegexFilterSettings(
            regex=self._regex,
            include_exclude_type_string=self.include_exclude_type_string,
            value_type_string=self._value_type_string,
            match_name=self._options.match_name,
            match_full_name=self._options.match_full_name,
            match_display_name=self._options.match_display_name,
            match_full_display_name=self._options.match_full_display_name,
        )

    @property
    def regex(self) -> str:
        return self._regex

    @property
    def pattern(self) -> Pattern[str]:
        return self._pattern

    @property
    def value_type_string(self) -> str:
        return self._value_type_string

    @property
    def value_type(self) -> ValueType:
        return self._value_type

    @property
    def options(self) -> MatchOptions:
        return self._options

    def matches(self, item: TopLevelItem) -> bool:
        """Return True if any candidate string of ``item`` fully matches."""
        for value in self._value_type.get_match_values(item, self._options):
            if value is not None and self._pattern.fullmatch(value):
                return True
        return False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(regex={self._regex!r}, "
            f"value_type={self._value_type_string!r}, options={self._options})"
        )
