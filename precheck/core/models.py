"""Core domain models for precheck."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class Finding:
    """One signature match in a scanned file.

    ``matched`` always holds the masked form of the matched text, never the
    raw secret.
    """

    file: str = ""
    line: int = 1
    pattern: str = ""
    matched: str = ""

    def __post_init__(self) -> None:
        """Validate the line number."""
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the four-field record shape."""
        return {
            "file": self.file,
            "line": self.line,
            "pattern": self.pattern,
            "matched": self.matched,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Finding":
        """Create from a four-field record."""
        return cls(
            file=data["file"],
            line=int(data["line"]),
            pattern=data["pattern"],
            matched=data["matched"],
        )


@dataclass
class ScanReport:
    """Represents the result of a directory scan."""

    root: str = ""
    findings: List[Finding] = field(default_factory=list)
    files_scanned: int = 0
    files_skipped: int = 0
    read_errors: int = 0
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    @property
    def duration_seconds(self) -> Optional[float]:
        """Calculate scan duration in seconds."""
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return None

    @property
    def total_findings(self) -> int:
        """Total number of findings."""
        return len(self.findings)

    @property
    def findings_by_pattern(self) -> Dict[str, int]:
        """Count findings grouped by signature name."""
        counts: Dict[str, int] = {}
        for finding in self.findings:
            counts[finding.pattern] = counts.get(finding.pattern, 0) + 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the report for JSON output."""
        return {
            "root": self.root,
            "files_scanned": self.files_scanned,
            "files_skipped": self.files_skipped,
            "read_errors": self.read_errors,
            "total_findings": self.total_findings,
            "findings": [f.to_dict() for f in self.findings],
        }
