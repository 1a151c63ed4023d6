from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class MCDMError(Exception):
    """Base class for failures shown to the user."""


class ValidationError(MCDMError):
    """A decision matrix cell that cannot be sent to the ranking service."""

    def __init__(self, message: str, alternative: int, criterion: int) -> None:
        super().__init__(message)
        self.alternative = alternative
        self.criterion = criterion


class SubmissionError(MCDMError):
    """Transport failure or non-success answer from the ranking service."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class Payload:
    decision_matrix: List[List[float]] = field(default_factory=list)
    criteria_types: List[str] = field(default_factory=list)
    method: str = "all"
    use_automatic_weights: bool = True

    def to_dict(self) -> dict:
        return {
            "decision_matrix": [list(row) for row in self.decision_matrix],
            "criteria_types": list(self.criteria_types),
            "method": self.method,
            "use_merec_weights": self.use_automatic_weights,
        }
