from __future__ import annotations

import math
import re
from typing import List

from mcdm.core import Payload, ValidationError
from mcdm.grid import DecisionGrid
from models import RunConfig

# ASCII decimal with optional exponent; no digit separators
NUMBER_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def parse_cell(text: str | None) -> float | None:
    """Return the finite float written in ``text`` or ``None`` if there is none."""
    if is_blank(text):
        return None
    stripped = text.strip()
    if not NUMBER_PATTERN.fullmatch(stripped):
        return None
    value = float(stripped)
    if not math.isfinite(value):
        return None
    return value


def build_decision_matrix(grid: DecisionGrid) -> List[List[float]]:
    matrix: List[List[float]] = []
    for alt_index, alternative in enumerate(grid.alternatives):
        row: List[float] = []
        for crit_index in range(len(grid.criteria)):
            text = alternative.values[crit_index] if crit_index < len(alternative.values) else None
            position = f"Alternative {alt_index + 1}, Criterion {crit_index + 1}"
            if is_blank(text):
                raise ValidationError(f"Empty value at {position}", alt_index, crit_index)
            value = parse_cell(text)
            if value is None:
                raise ValidationError(f"Invalid number at {position}", alt_index, crit_index)
            row.append(value)
        matrix.append(row)
    return matrix


def build_payload(grid: DecisionGrid, config: RunConfig) -> Payload:
    return Payload(
        decision_matrix=build_decision_matrix(grid),
        criteria_types=[criterion.direction for criterion in grid.criteria],
        method=config.method,
        use_automatic_weights=config.use_automatic_weights,
    )
