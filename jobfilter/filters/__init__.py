"""Job filters and the value extraction strategies they use."""

from .base import IncludeExcludeJobFilter
from .options import MatchOptions
from .value_type import ValueType
from .regex_filter import RegexJobFilter, compile_pattern
from .selector import Selector, SelectionResult
from .validation import FormValidation, check_regex

__all__ = [
    "IncludeExcludeJobFilter",
    "MatchOptions",
    "ValueType",
    "RegexJobFilter",
    "compile_pattern",
    "Selector",
    "SelectionResult",
    "FormValidation",
    "check_regex",
]
