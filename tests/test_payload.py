import unittest

from mcdm.core import ValidationError
from mcdm.grid import DecisionGrid
from mcdm.payload import build_payload, parse_cell
from models import RunConfig


class TestParseCell(unittest.TestCase):
    def test_accepts_decimal_forms(self) -> None:
        self.assertEqual(parse_cell("2.0410"), 2.041)
        self.assertEqual(parse_cell("-3"), -3.0)
        self.assertEqual(parse_cell("1e-2"), 0.01)
        self.assertEqual(parse_cell(" 4.5 "), 4.5)

    def test_rejects_empty_and_text(self) -> None:
        self.assertIsNone(parse_cell(""))
        self.assertIsNone(parse_cell("   "))
        self.assertIsNone(parse_cell(None))
        self.assertIsNone(parse_cell("abc"))
        self.assertIsNone(parse_cell("1,5"))
        self.assertIsNone(parse_cell("1_5"))
        self.assertIsNone(parse_cell("２"))
        self.assertIsNone(parse_cell("0x10"))

    def test_accepts_leading_and_trailing_dot(self) -> None:
        self.assertEqual(parse_cell(".5"), 0.5)
        self.assertEqual(parse_cell("+3."), 3.0)
        self.assertEqual(parse_cell("2E3"), 2000.0)

    def test_rejects_non_finite(self) -> None:
        self.assertIsNone(parse_cell("inf"))
        self.assertIsNone(parse_cell("-Infinity"))
        self.assertIsNone(parse_cell("nan"))
        self.assertIsNone(parse_cell("1e999"))


class TestBuildPayload(unittest.TestCase):
    def test_worked_example_payload(self) -> None:
        grid = DecisionGrid.default()
        payload = build_payload(grid, RunConfig(method="all", use_automatic_weights=True))

        self.assertEqual(
            payload.to_dict(),
            {
                "decision_matrix": [[2.041, 0.7306], [2.928, 1.3441], [7.704, 3.8894]],
                "criteria_types": ["min", "max"],
                "method": "all",
                "use_merec_weights": True,
            },
        )

    def test_config_copied_verbatim(self) -> None:
        payload = build_payload(DecisionGrid.default(), RunConfig(method="mairca", use_automatic_weights=False))
        self.assertEqual(payload.method, "mairca")
        self.assertFalse(payload.to_dict()["use_merec_weights"])

    def test_empty_cell_reported_with_one_based_position(self) -> None:
        grid = DecisionGrid.default()
        grid.set_cell_value(1, 0, "")

        with self.assertRaises(ValidationError) as ctx:
            build_payload(grid, RunConfig())
        self.assertEqual(str(ctx.exception), "Empty value at Alternative 2, Criterion 1")
        self.assertEqual((ctx.exception.alternative, ctx.exception.criterion), (1, 0))

    def test_first_invalid_cell_wins(self) -> None:
        grid = DecisionGrid.default()
        grid.set_cell_value(1, 0, "abc")
        grid.set_cell_value(1, 1, "")
        grid.set_cell_value(2, 0, "xyz")

        with self.assertRaises(ValidationError) as ctx:
            build_payload(grid, RunConfig())
        self.assertEqual(str(ctx.exception), "Invalid number at Alternative 2, Criterion 1")

    def test_scan_is_alternative_major(self) -> None:
        grid = DecisionGrid.default()
        grid.set_cell_value(0, 1, "bad")
        grid.set_cell_value(1, 0, "bad")

        with self.assertRaises(ValidationError) as ctx:
            build_payload(grid, RunConfig())
        self.assertEqual(str(ctx.exception), "Invalid number at Alternative 1, Criterion 2")

    def test_validation_does_not_touch_cells(self) -> None:
        grid = DecisionGrid.default()
        grid.set_cell_value(0, 0, " 2.50 ")
        build_payload(grid, RunConfig())
        self.assertEqual(grid.alternatives[0].values[0], " 2.50 ")

    def test_new_criterion_must_be_filled(self) -> None:
        grid = DecisionGrid.default()
        grid.add_criterion()

        with self.assertRaises(ValidationError) as ctx:
            build_payload(grid, RunConfig())
        self.assertEqual(str(ctx.exception), "Empty value at Alternative 1, Criterion 3")

    def test_digit_separator_typo_is_reported(self) -> None:
        grid = DecisionGrid.default()
        grid.set_cell_value(0, 0, "2_0410")

        with self.assertRaises(ValidationError) as ctx:
            build_payload(grid, RunConfig())
        self.assertEqual(str(ctx.exception), "Invalid number at Alternative 1, Criterion 1")

    def test_whitespace_only_cell_is_empty(self) -> None:
        grid = DecisionGrid.default()
        grid.set_cell_value(0, 0, "   ")

        with self.assertRaises(ValidationError) as ctx:
            build_payload(grid, RunConfig())
        self.assertEqual(str(ctx.exception), "Empty value at Alternative 1, Criterion 1")
