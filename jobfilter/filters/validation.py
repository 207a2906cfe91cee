"""Advisory validation for interactive configuration forms."""

import re
from dataclasses import dataclass
from typing import Optional

from ..core.enums import ValidationKind


@dataclass(frozen=True)
class FormValidation:
    """Result of checking one form field."""

    kind: ValidationKind
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == ValidationKind.OK

    @classmethod
    def success(cls) -> "FormValidation":
        return cls(ValidationKind.OK)

    @classmethod
    def error(cls, message: str) -> "FormValidation":
        return cls(ValidationKind.ERROR, message)


def check_regex(value: Optional[str]) -> FormValidation:
    """Check a candidate pattern without raising.

    Empty or blank input is accepted so a half-filled form shows no error.
    """
    if value is None or not value.strip():
        return FormValidation.success()
    try:
        re.compile(value)
    except re.error as e:
        return FormValidation.error(str(e))
    return FormValidation.success()
