from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

DIRECTIONS = {
    "max": "Maximize",
    "min": "Minimize",
}


@dataclass
class Criterion:
    name: str
    direction: str = "max"


@dataclass
class Alternative:
    name: str
    values: List[str] = field(default_factory=list)


@dataclass
class RunConfig:
    method: str = "all"
    use_automatic_weights: bool = True


@dataclass
class SubmissionResult:
    weights_used: List[float] = field(default_factory=list)
    topsis_ranking: Optional[List[int]] = None
    mairca_ranking: Optional[List[int]] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SubmissionResult":
        topsis = data.get("topsis_ranking")
        mairca = data.get("mairca_ranking")
        return cls(
            weights_used=[float(value) for value in data.get("weights_used", [])],
            topsis_ranking=[int(index) for index in topsis] if topsis is not None else None,
            mairca_ranking=[int(index) for index in mairca] if mairca is not None else None,
        )
