"""Check results for graphs."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Errors make export fail; warnings flag output that may surprise."""

    ERROR = "error"
    WARNING = "warning"


@dataclass
class ValidationIssue:
    """A problem found in a graph, optionally pinned to a node."""

    code: str
    message: str
    severity: Severity
    node: int | None = None
    label: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """Render the node position and label, e.g. ``[node 2 "Leaf"]``."""
        if self.node is None:
            return ""
        if self.label is None:
            return f"[node {self.node}]"
        return f'[node {self.node} "{self.label}"]'


@dataclass
class ValidationResult:
    """Issues collected by one or more checks."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def by_severity(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self.by_severity(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self.by_severity(Severity.WARNING)

    @property
    def is_valid(self) -> bool:
        """Check if the graph can be exported."""
        return not self.errors

    def report(
        self,
        severity: Severity,
        code: str,
        message: str,
        node: int | None = None,
        label: str | None = None,
        **details: Any,
    ) -> None:
        """Record an issue; extra keyword arguments become its details."""
        self.issues.append(
            ValidationIssue(code, message, severity, node, label, details)
        )

    def merge(self, other: "ValidationResult") -> None:
        self.issues.extend(other.issues)
