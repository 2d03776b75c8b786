import unittest

from tests.run_tests import build_suite, iter_test_ids


class TestRunner(unittest.TestCase):
    def test_discovers_unit_tests(self):
        ids = list(iter_test_ids(build_suite()))
        modules = {test_id.rsplit(".", 2)[0] for test_id in ids}

        # Discovery failures show up as unittest.loader._FailedTest
        self.assertFalse([i for i in ids if "_FailedTest" in i])
        for module in [
            "tests.test_cli",
            "tests.unit.test_categories",
            "tests.unit.test_scanner",
            "tests.unit.test_planner",
            "tests.unit.test_executor",
        ]:
            self.assertIn(module, modules)

    def test_unit_tests_are_the_bulk_of_the_suite(self):
        ids = list(iter_test_ids(build_suite()))
        unit_ids = [i for i in ids if i.startswith("tests.unit.")]
        self.assertGreater(len(unit_ids), len(ids) - len(unit_ids))


if __name__ == "__main__":
    unittest.main()
