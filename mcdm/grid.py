from __future__ import annotations

from typing import List, Tuple

from models import DIRECTIONS, Alternative, Criterion


def next_default_name(prefix: str, taken: List[str]) -> str:
    number = len(taken) + 1
    while f"{prefix} {number}" in taken:
        number += 1
    return f"{prefix} {number}"


class DecisionGrid:
    """Criteria x alternatives table edited by the user.

    Every alternative holds exactly one cell per criterion, aligned by
    position. All structural edits go through the methods below so that
    adding or removing a criterion touches every alternative at once.
    Cells keep the raw text typed by the user; parsing happens when the
    payload is built.
    """

    def __init__(self, criteria: List[Criterion], alternatives: List[Alternative]) -> None:
        if not criteria or not alternatives:
            raise ValueError("A decision grid needs at least one criterion and one alternative.")
        for alternative in alternatives:
            if len(alternative.values) != len(criteria):
                raise ValueError(
                    f"Alternative {alternative.name!r} has {len(alternative.values)} values "
                    f"for {len(criteria)} criteria."
                )
        self.criteria = criteria
        self.alternatives = alternatives

    @classmethod
    def default(cls) -> "DecisionGrid":
        return cls(
            criteria=[
                Criterion(name="Ra (Surface Roughness)", direction="min"),
                Criterion(name="MRS (Material Removal Speed)", direction="max"),
            ],
            alternatives=[
                Alternative(name="Alt 1", values=["2.0410", "0.7306"]),
                Alternative(name="Alt 2", values=["2.9280", "1.3441"]),
                Alternative(name="Alt 3", values=["7.7040", "3.8894"]),
            ],
        )

    @property
    def shape(self) -> Tuple[int, int]:
        return len(self.alternatives), len(self.criteria)

    def is_rectangular(self) -> bool:
        return all(len(alternative.values) == len(self.criteria) for alternative in self.alternatives)

    def add_criterion(self) -> Criterion:
        name = next_default_name("Criterion", [criterion.name for criterion in self.criteria])
        criterion = Criterion(name=name, direction="max")
        self.criteria.append(criterion)
        for alternative in self.alternatives:
            alternative.values.append("")
        return criterion

    def remove_criterion(self, index: int) -> bool:
        self._check_index(index, len(self.criteria), "criterion")
        if len(self.criteria) <= 1:
            return False
        self.criteria.pop(index)
        for alternative in self.alternatives:
            alternative.values.pop(index)
        return True

    def add_alternative(self) -> Alternative:
        name = next_default_name("Alt", [alternative.name for alternative in self.alternatives])
        alternative = Alternative(name=name, values=[""] * len(self.criteria))
        self.alternatives.append(alternative)
        return alternative

    def remove_alternative(self, index: int) -> bool:
        self._check_index(index, len(self.alternatives), "alternative")
        if len(self.alternatives) <= 1:
            return False
        self.alternatives.pop(index)
        return True

    def set_cell_value(self, alt_index: int, crit_index: int, text: str) -> None:
        self._check_index(alt_index, len(self.alternatives), "alternative")
        self._check_index(crit_index, len(self.criteria), "criterion")
        self.alternatives[alt_index].values[crit_index] = text

    def rename_alternative(self, index: int, text: str) -> None:
        self._check_index(index, len(self.alternatives), "alternative")
        self.alternatives[index].name = text

    def rename_criterion(self, index: int, text: str) -> None:
        self._check_index(index, len(self.criteria), "criterion")
        self.criteria[index].name = text

    def set_criterion_direction(self, index: int, direction: str) -> None:
        self._check_index(index, len(self.criteria), "criterion")
        if direction not in DIRECTIONS:
            raise ValueError(f"Unknown criterion direction: {direction!r}")
        self.criteria[index].direction = direction

    @staticmethod
    def _check_index(index: int, size: int, kind: str) -> None:
        # negative indices count as out of range
        if not 0 <= index < size:
            raise IndexError(f"{kind} index {index} out of range (size {size})")
