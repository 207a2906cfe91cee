"""Core type definitions for the jobfilter package."""

from typing import List, Optional
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator


class RegexFilterSettings(BaseModel):
    """Persisted form of a regex job filter.

    Only strings and booleans are stored. The compiled pattern and the
    resolved value type are derived again whenever a filter is restored.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    regex: str
    include_exclude_type_string: Optional[str] = Field(
        None, alias="includeExcludeTypeString"
    )
    value_type_string: Optional[str] = Field(None, alias="valueTypeString")
    match_name: bool = Field(False, alias="matchName")
    match_full_name: bool = Field(False, alias="matchFullName")
    match_display_name: bool = Field(False, alias="matchDisplayName")
    match_full_display_name: bool = Field(False, alias="matchFullDisplayName")


class JobFilterConfig(BaseModel):
    """Main package configuration."""

    log_level: str = "INFO"
    verbose: int = 0
    log_file: Optional[Path] = None
    default_value_type: str = "NAME"
    filters: List[RegexFilterSettings] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_config(self) -> "JobFilterConfig":
        """Validate configuration without side effects."""
        from .errors import ConfigurationError
        from ..filters.value_type import ValueType

        if self.default_value_type not in ValueType.tags():
            raise ConfigurationError(
                f"Unknown default value type: {self.default_value_type}",
                details={"known": ValueType.tags()},
            )

        if self.log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"Invalid log level: {self.log_level}")

        return self
