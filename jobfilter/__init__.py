"""
jobfilter: regular expression job filters

Decides, item by item, whether a job catalog entry matches a user supplied
regular expression. The strings tested come from the item itself, from its
parent folder, or from the labels of its builds, selected by four matching
switches.
"""

__version__ = "1.0.0"

from .core.errors import (
    JobFilterError,
    ConfigurationError,
    PatternCompileError,
    UnknownVariantError,
)
from .core.types import RegexFilterSettings, JobFilterConfig
from .filters.options import MatchOptions
from .filters.value_type import ValueType
from .filters.regex_filter import RegexJobFilter
from .filters.validation import FormValidation, check_regex

__all__ = [
    "__version__",
    "JobFilterError",
    "ConfigurationError",
    "PatternCompileError",
    "UnknownVariantError",
    "RegexFilterSettings",
    "JobFilterConfig",
    "MatchOptions",
    "ValueType",
    "RegexJobFilter",
    "FormValidation",
    "check_regex",
]
