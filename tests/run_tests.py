#!/usr/bin/env python3
"""Run the whole test suite (tests/ and tests/unit/) with unittest."""
import os
import sys
import unittest

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
TESTS_DIR = os.path.join(PROJECT_ROOT, 'tests')


def build_suite() -> unittest.TestSuite:
    """Discover every test module as part of the 'tests' package."""
    if PROJECT_ROOT not in sys.path:
        sys.path.insert(0, PROJECT_ROOT)

    loader = unittest.TestLoader()
    return loader.discover(TESTS_DIR, pattern='test_*.py', top_level_dir=PROJECT_ROOT)


def iter_test_ids(suite):
    for test in suite:
        if isinstance(test, unittest.TestSuite):
            yield from iter_test_ids(test)
        else:
            yield test.id()


def run_tests() -> int:
    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(build_suite())
    return 0 if result.wasSuccessful() else 1


if __name__ == "__main__":
    sys.exit(run_tests())
