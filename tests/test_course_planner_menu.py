"""
tests/test_course_planner_menu.py

Unit tests for execution/shell/course_planner_menu.py.

Drives run_menu() with scripted input and collects every output line.

Covers:
    T1: Options 2 and 3 ask for a load first
    T2: Load, list, describe, exit on the bundled course file
    T3: Load diagnostics are printed with the offending line
    T4: A failed load leaves the menu in the not-loaded state
    T5: Invalid choices and empty inputs are reported; EOF exits cleanly
    T6: File names are passed to the loader exactly as typed
    T7: main() reads the log level from the environment and falls back to
        WARNING for names logging does not know
"""

import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

# ---------------------------------------------------------------------------
# PYTHONPATH bootstrap
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.course.course_tree import CourseTree         # noqa: E402
from execution.course.load_courses import DEFAULT_COURSE_FILE  # noqa: E402
from execution.shell.course_planner_menu import (           # noqa: E402
    GOODBYE_MESSAGE,
    INVALID_CHOICE_MESSAGE,
    LOAD_FIRST_MESSAGE,
    LOG_LEVEL_ENV_VAR,
    main,
    resolve_log_level,
    run_menu,
)


def _run(answers: list[str], tree: CourseTree | None = None) -> list[str]:
    """Run the menu against *answers*; return everything it printed."""
    pending = list(answers)
    output: list[str] = []

    def fake_input(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    run_menu(tree=tree, input_fn=fake_input, output_fn=output.append)
    return output


class TestCoursePlannerMenu(unittest.TestCase):

    def test_list_and_describe_require_load(self):
        """T1"""
        output = _run(["2", "3", "9"])
        self.assertEqual(output.count(LOAD_FIRST_MESSAGE), 2)
        self.assertEqual(output[-1], GOODBYE_MESSAGE)

    def test_load_list_describe_exit(self):
        """T2"""
        tree = CourseTree()
        output = _run(["1", str(DEFAULT_COURSE_FILE), "2", "3", "csci300", "9"], tree)

        self.assertIn(
            f"Courses successfully loaded from file: {DEFAULT_COURSE_FILE}", output
        )
        listing = output[output.index("Here is the list of courses:") + 1]
        self.assertEqual(listing.splitlines()[0], "CSCI100, Introduction to Computer Science")
        self.assertEqual(listing.splitlines()[-1], "MATH201, Discrete Mathematics")
        self.assertIn(
            "CSCI300, Introduction to Algorithms\n"
            "Prerequisites:\n"
            "  CSCI200, Data Structures\n"
            "  MATH201, Discrete Mathematics",
            output,
        )
        self.assertEqual(len(tree), 8)
        self.assertEqual(output[-1], GOODBYE_MESSAGE)

    def test_load_reports_skipped_lines(self):
        """T3"""
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "courses.csv"
            path.write_text("CS101\nCS100,Intro\nCS102,\n", encoding="utf-8")
            output = _run(["1", str(path), "2", "9"])

        self.assertIn("File format error on line 1: fewer than two fields.", output)
        self.assertIn("Offending line: CS101", output)
        self.assertIn(
            "File format warning on line 3: missing course number or title.", output
        )
        self.assertIn("CS100, Intro", output)

    def test_failed_load_keeps_menu_unloaded(self):
        """T4"""
        tree = CourseTree()
        with tempfile.TemporaryDirectory() as td:
            missing = str(Path(td) / "missing.csv")
            output = _run(["1", str(DEFAULT_COURSE_FILE), "1", missing, "2", "9"], tree)

        error_at = output.index(f"Error opening file: {missing}")
        self.assertIn(LOAD_FIRST_MESSAGE, output[error_at:])
        self.assertTrue(tree.is_empty())

    def test_invalid_choice_and_empty_inputs(self):
        """T5"""
        output = _run(["7", "1", "", "1", str(DEFAULT_COURSE_FILE), "3", "", "3", "XX1", "9"])
        self.assertIn(INVALID_CHOICE_MESSAGE, output)
        self.assertIn("File name cannot be empty.", output)
        self.assertIn("Course number cannot be empty.", output)
        self.assertIn("Course XX1 not found.", output)

    def test_end_of_input_exits(self):
        """T5: EOF at the menu prompt or mid-action ends the loop."""
        self.assertEqual(_run([])[-1], GOODBYE_MESSAGE)
        self.assertEqual(_run(["1"])[-1], GOODBYE_MESSAGE)

    def test_file_name_with_surrounding_spaces_is_kept(self):
        """T6: a path whose name really starts and ends with spaces loads."""
        tree = CourseTree()
        with tempfile.TemporaryDirectory() as td:
            spaced = Path(td) / " courses.csv "
            spaced.write_text("CSCI100,Intro\n", encoding="utf-8")
            output = _run(["1", str(spaced), "9"], tree)

        self.assertIn(f"Courses successfully loaded from file: {spaced}", output)
        self.assertEqual(len(tree), 1)

    def test_whitespace_only_file_name_is_empty(self):
        """T6"""
        output = _run(["1", "   ", "9"])
        self.assertIn("File name cannot be empty.", output)


class TestLogLevelConfig(unittest.TestCase):

    def test_resolve_log_level_known_names(self):
        """T7"""
        self.assertEqual(resolve_log_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_log_level(" INFO "), logging.INFO)
        self.assertEqual(resolve_log_level("error"), logging.ERROR)

    def test_resolve_log_level_unknown_or_blank(self):
        """T7"""
        for name in (None, "", "   ", "verbose", "Level 5"):
            with self.subTest(name=name):
                self.assertIsNone(resolve_log_level(name))

    def _run_main(self, env: dict) -> mock.MagicMock:
        """Call main() with *env* applied; return the basicConfig mock."""
        with mock.patch.dict(os.environ, env, clear=False), \
                mock.patch("logging.basicConfig") as basic_config, \
                mock.patch(
                    "execution.shell.course_planner_menu.run_menu"
                ) as fake_run_menu:
            main()
        fake_run_menu.assert_called_once_with()
        return basic_config

    def test_main_uses_configured_level(self):
        """T7"""
        basic_config = self._run_main({LOG_LEVEL_ENV_VAR: "debug"})
        self.assertEqual(basic_config.call_args.kwargs["level"], logging.DEBUG)

    def test_main_defaults_to_warning_when_unset(self):
        """T7"""
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop(LOG_LEVEL_ENV_VAR, None)
            basic_config = self._run_main({})
        self.assertEqual(basic_config.call_args.kwargs["level"], logging.WARNING)

    def test_main_unknown_level_falls_back_to_warning(self):
        """T7: an unrecognised name still reaches the menu."""
        with self.assertLogs("execution.shell.course_planner_menu", level="WARNING") as logs:
            basic_config = self._run_main({LOG_LEVEL_ENV_VAR: "verbose"})

        self.assertEqual(basic_config.call_args.kwargs["level"], logging.WARNING)
        self.assertIn("verbose", logs.output[0])
        self.assertIn(LOG_LEVEL_ENV_VAR, logs.output[0])


if __name__ == "__main__":
    unittest.main()
