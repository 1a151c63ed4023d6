from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from mcdm.grid import DecisionGrid
from models import Alternative, Criterion, SubmissionResult

WEIGHT_FORMAT = "{:.4f}"


@dataclass
class RenderedResult:
    weights: List[Tuple[str, str]] = field(default_factory=list)
    rankings: Dict[str, List[str]] = field(default_factory=dict)
    weights_text: str = ""


def alternative_label(alternatives: Sequence[Alternative], index: int) -> str:
    # Rank indices are positions at submission time; names come from the live grid.
    if 0 <= index < len(alternatives) and alternatives[index].name:
        return alternatives[index].name
    return f"Alternative {index + 1}"


def criterion_label(criteria: Sequence[Criterion], index: int) -> str:
    if 0 <= index < len(criteria) and criteria[index].name:
        return criteria[index].name
    return f"C{index + 1}"


def ranking_names(ranking: Sequence[int], alternatives: Sequence[Alternative]) -> List[str]:
    return [alternative_label(alternatives, index) for index in ranking]


def weight_entries(weights: Sequence[float], criteria: Sequence[Criterion]) -> List[Tuple[str, str]]:
    return [
        (criterion_label(criteria, index), WEIGHT_FORMAT.format(weight))
        for index, weight in enumerate(weights)
    ]


def format_weights(weights: Sequence[float], criteria: Sequence[Criterion]) -> str:
    return " | ".join(f"{label}: {value}" for label, value in weight_entries(weights, criteria))


def render_result(result: SubmissionResult, grid: DecisionGrid) -> RenderedResult:
    """Map a service result onto the names currently shown in the grid.

    Indices that no longer exist (a row removed after submitting) or rows
    with an empty name fall back to a generated positional label.
    """
    rankings: Dict[str, List[str]] = {}
    if result.topsis_ranking is not None:
        rankings["TOPSIS"] = ranking_names(result.topsis_ranking, grid.alternatives)
    if result.mairca_ranking is not None:
        rankings["MAIRCA"] = ranking_names(result.mairca_ranking, grid.alternatives)
    return RenderedResult(
        weights=weight_entries(result.weights_used, grid.criteria),
        rankings=rankings,
        weights_text=format_weights(result.weights_used, grid.criteria),
    )
