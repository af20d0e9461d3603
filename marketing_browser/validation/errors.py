from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    record_index: Optional[int] = None

    def __str__(self) -> str:
        where = f"[record {self.record_index}] " if self.record_index is not None else ""
        return f"{self.code}: {where}{self.message}"


class ValidationError(Exception):
    """Raised with every issue found in a records file, not just the first."""

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        super().__init__("\n".join(str(i) for i in issues))

    @property
    def codes(self) -> List[str]:
        return [i.code for i in self.issues]
