"""
execution/shell/course_planner_menu.py

Console menu for the course planner.

    1. Load Data Structure   -> execution.course.load_courses
    2. Print Course List     -> execution.course.list_courses
    3. Print Course          -> execution.course.describe_course
    9. Exit

No parsing or formatting logic lives here; every action is delegated.

Run from the repository root:
    python -m execution.shell.course_planner_menu
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable

from execution.course.course_tree import CourseTree
from execution.course.describe_course import describe_course
from execution.course.list_courses import format_course_list
from execution.course.load_courses import load_courses_from_file

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV_VAR = "COURSE_PLANNER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING

MENU_TEXT = "\n".join([
    "",
    "*******************************",
    "Welcome to the ABCU Course Planner",
    "*******************************",
    "1. Load Data Structure",
    "2. Print Course List",
    "3. Print Course",
    "9. Exit",
])
CHOICE_PROMPT = "Please enter your choice: "
FILE_PROMPT = "Enter course data file name: "
COURSE_PROMPT = "Please enter the course number (for example, CS200): "

LOAD_FIRST_MESSAGE = "Please load the data structure first (option 1)."
INVALID_CHOICE_MESSAGE = "Invalid choice. Please enter 1, 2, 3, or 9."
GOODBYE_MESSAGE = "Thank you for using the ABCU Course Planner. Goodbye!"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. See console for details."


def run_menu(
    tree: CourseTree | None = None,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> None:
    """Run the menu loop until the user picks 9 or input ends.

    Args:
        tree:      Course tree to load into. A fresh one is created if None.
        input_fn:  Prompt-and-read callable; tests inject scripted input.
        output_fn: Line writer; tests inject a collector.
    """
    if tree is None:
        tree = CourseTree()
    data_loaded = False

    while True:
        output_fn(MENU_TEXT)
        try:
            choice = input_fn(CHOICE_PROMPT).strip()
        except EOFError:
            output_fn(GOODBYE_MESSAGE)
            return

        try:
            if choice == "1":
                data_loaded = _handle_load(tree, input_fn, output_fn, data_loaded)
            elif choice == "2":
                if not data_loaded:
                    output_fn(LOAD_FIRST_MESSAGE)
                else:
                    output_fn("")
                    output_fn("Here is the list of courses:")
                    output_fn(format_course_list(tree))
            elif choice == "3":
                if not data_loaded:
                    output_fn(LOAD_FIRST_MESSAGE)
                else:
                    _handle_describe(tree, input_fn, output_fn)
            elif choice == "9":
                output_fn(GOODBYE_MESSAGE)
                return
            else:
                output_fn(INVALID_CHOICE_MESSAGE)
        except EOFError:
            output_fn(GOODBYE_MESSAGE)
            return
        except Exception:
            logging.exception("Unexpected error handling menu choice %r", choice)
            output_fn(UNEXPECTED_ERROR_MESSAGE)


def _handle_load(
    tree: CourseTree,
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
    data_loaded: bool,
) -> bool:
    """Prompt for a file name and load it. Returns the new data_loaded flag."""
    file_name = input_fn(FILE_PROMPT)
    if not file_name.strip():
        output_fn("File name cannot be empty.")
        return data_loaded

    result = load_courses_from_file(file_name, tree)
    for issue in result["issues"]:
        output_fn(issue["message"])
        output_fn(f"Offending line: {issue['line']}")
    output_fn(result["message"])
    return result["ok"]


def _handle_describe(
    tree: CourseTree,
    input_fn: Callable[[str], str],
    output_fn: Callable[[str], None],
) -> None:
    course_number = input_fn(COURSE_PROMPT).strip()
    if not course_number:
        output_fn("Course number cannot be empty.")
        return
    output_fn("")
    output_fn(describe_course(course_number, tree))


def resolve_log_level(name: str | None) -> int | None:
    """Return the numeric logging level for *name*, or None if unknown."""
    if not name or not name.strip():
        return None
    level = logging.getLevelName(name.strip().upper())
    # getLevelName() returns a "Level X" string for names it does not know.
    return level if isinstance(level, int) else None


def main() -> None:
    configured = os.environ.get(LOG_LEVEL_ENV_VAR)
    level = resolve_log_level(configured)
    logging.basicConfig(
        level=level if level is not None else DEFAULT_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if configured and configured.strip() and level is None:
        logger.warning(
            "%s=%r is not a logging level; using WARNING.", LOG_LEVEL_ENV_VAR, configured
        )
    run_menu()


if __name__ == "__main__":
    main()
