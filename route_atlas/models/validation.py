"""
Data-quality reporting for a loaded route network.

Issues found while building a RouteNetworkModel are collected rather than
raised. Errors mean a record was dropped (duplicate codes, unusable
coordinates); warnings mean a record was kept but cannot be drawn (a route
whose endpoint is not a known airport).
"""

from dataclasses import dataclass, field
from typing import List, Any, Optional

ERROR = 'error'
WARNING = 'warning'


@dataclass(frozen=True)
class DataIssue:
    """One problem with one dataset record."""

    kind: str  # 'airport', 'airline' or 'route'
    message: str
    record: Any = None
    severity: str = ERROR

    def __str__(self) -> str:
        if self.record is not None:
            return f"{self.kind} {self.record}: {self.message}"
        return f"{self.kind}: {self.message}"


@dataclass
class ValidationResult:
    errors: List[DataIssue] = field(default_factory=list)
    warnings: List[DataIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """No record was dropped."""
        return not self.errors

    @property
    def is_clean(self) -> bool:
        """Every record was loaded and can be drawn."""
        return not self.errors and not self.warnings

    @property
    def issue_count(self) -> int:
        return len(self.errors) + len(self.warnings)

    @property
    def issues(self) -> List[DataIssue]:
        return self.errors + self.warnings

    def add_error(self, kind: str, message: str, record: Any = None) -> None:
        self.errors.append(DataIssue(kind, message, record, ERROR))

    def add_warning(self, kind: str, message: str, record: Any = None) -> None:
        self.warnings.append(DataIssue(kind, message, record, WARNING))

    def __str__(self) -> str:
        if self.is_clean:
            return "Clean"
        return f"{len(self.errors)} dropped, {len(self.warnings)} undrawable"


class ModelValidationError(Exception):
    """Raised by a strict build when the dataset has any issue."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.validation_result = validation_result

    def __str__(self) -> str:
        if not self.validation_result:
            return super().__str__()
        lines = [f"  - [{issue.severity}] {issue}" for issue in self.validation_result.issues]
        return "\n".join([super().__str__()] + lines)
