"""
Command-line tests for prefixer.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from click.testing import CliRunner

from prefixer import __version__
from prefixer.cli import main


class TestCli(unittest.TestCase):
    """Test cases for the prefixer command."""

    def setUp(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def _invoke(self, *args, **kwargs):
        return self.runner.invoke(main, list(args), **kwargs)

    def test_arguments(self):
        result = self._invoke("1 + 2 * 3", "(-1+2) * 3")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.splitlines(), ["(+ 1 (* 2 3))", "(* (+ (- 1) 2) 3)"])

    def test_stdin(self):
        result = self._invoke(input="1 - 2 - 3\n\n-x\n")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.splitlines(), ["(- (- 1 2) 3)", "(- x)"])

    def test_tokens(self):
        result = self._invoke("--tokens", "a*(b)")
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(result.stdout.strip(),
                         "Symbol('a') Operator('*') Operator('(') Symbol('b') Operator(')')")

    def test_tree(self):
        result = self._invoke("--tree", "1 + 2")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("binary", result.stdout)

    def test_failure_reports_and_continues(self):
        result = self._invoke("(1 + 2", "3 * 4")
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(result.stdout.splitlines(), ["(* 3 4)"])
        self.assertIn("P012", result.stderr)
        self.assertIn("<arg1>:1:1", result.stderr)

    def test_version(self):
        result = self._invoke("--version")
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.stdout)


if __name__ == '__main__':
    unittest.main()
