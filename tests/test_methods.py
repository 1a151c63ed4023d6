import unittest

from mcdm import METHODS, get_method, list_methods


class TestMethodRegistry(unittest.TestCase):
    def test_lists_all_service_methods(self) -> None:
        self.assertEqual(list(list_methods()), ["topsis", "mairca", "all"])

    def test_unknown_method_falls_back_to_all(self) -> None:
        self.assertEqual(get_method("mairca"), "mairca")
        self.assertEqual(get_method("promethee"), "all")

    def test_list_is_a_copy(self) -> None:
        methods = list_methods()
        methods.pop("topsis")
        self.assertIn("topsis", METHODS)
