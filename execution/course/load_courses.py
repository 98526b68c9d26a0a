"""
execution/course/load_courses.py

Parses comma-delimited course data and loads it into a CourseTree.

File format (one course per line, no header, no quoting):
    <course_number>,<course_title>[,<prereq_number>...]

Malformed lines are reported and skipped; loading always continues with
the next line. Only an unreadable source aborts a load, and even then the
target tree is left empty rather than holding a previous file's data.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from execution.course.course_record import make_course
from execution.course.course_tree import CourseTree

logger = logging.getLogger(__name__)

COURSE_FIELD_DELIMITER: str = ","

# Declared as package data in pyproject.toml.
_COURSE_CONTENT_DIR: Path = Path(__file__).resolve().parent / "course_content"

DEFAULT_COURSE_FILE: Path = _COURSE_CONTENT_DIR / "courses.csv"

# Issue kinds recorded for skipped lines.
FORMAT_ERROR = "format_error"
MISSING_FIELD = "missing_field"

# Value of result["error"] when the source cannot be opened or read.
SOURCE_UNAVAILABLE = "source_unavailable"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_courses(
    source_lines: Iterable[str],
    tree: CourseTree,
    source: str = "<lines>",
) -> dict:
    """Clear *tree* and load every well-formed line of *source_lines* into it.

    Blank lines are ignored. Lines with fewer than two fields, or with an
    empty course number or title, are recorded as issues and skipped.
    A course number seen twice keeps the later line's title and
    prerequisites.

    Args:
        source_lines: Iterable of text lines (an open file works).
        tree:         Target tree. Always cleared before loading.
        source:       Label used in the result message only.

    Returns:
        dict with keys:
            ok             (bool)  Always True here.
            message        (str)   Human-readable outcome.
            source         (str)   Echo of *source*.
            courses_loaded (int)   Distinct courses now in the tree.
            lines_read     (int)   Lines consumed, blank ones included.
            issues         (list)  One dict per skipped line, see
                                   parse_course_line().
            error          (None)  Set only by load_courses_from_file().
    """
    tree.clear()
    issues: list[dict] = []
    lines_read = 0

    for line_number, line in enumerate(source_lines, start=1):
        lines_read = line_number
        course, issue = parse_course_line(line, line_number)
        if issue is not None:
            logger.debug("Skipping line %d of %s: %s", line_number, source, issue["message"])
            issues.append(issue)
            continue
        if course is not None:
            tree.insert_or_update(course)

    logger.info(
        "Loaded %d courses from %s (%d lines, %d skipped)",
        len(tree), source, lines_read, len(issues),
    )
    return {
        "ok": True,
        "message": f"Courses successfully loaded from file: {source}",
        "source": source,
        "courses_loaded": len(tree),
        "lines_read": lines_read,
        "issues": issues,
        "error": None,
    }


def load_courses_from_file(path: str | Path, tree: CourseTree) -> dict:
    """Clear *tree* and load the course file at *path* into it.

    The file is opened as UTF-8 inside a with-block, so it is closed on
    every exit path.

    Args:
        path: Course data file.
        tree: Target tree. Always cleared, even when the file is unreadable.

    Returns:
        The load_courses() result dict. When the file cannot be opened or
        read, ok=False, error="source_unavailable", courses_loaded=0 and
        the tree is empty.
    """
    source = str(path)
    tree.clear()

    try:
        with open(path, encoding="utf-8") as fh:
            return load_courses(fh, tree, source=source)
    except (OSError, UnicodeDecodeError) as exc:
        # A read failure part-way through must not leave a partial load.
        tree.clear()
        logger.warning("Course source unavailable: %s (%s)", source, exc)
        return {
            "ok": False,
            "message": f"Error opening file: {source}",
            "source": source,
            "courses_loaded": 0,
            "lines_read": 0,
            "issues": [],
            "error": SOURCE_UNAVAILABLE,
        }


# ---------------------------------------------------------------------------
# Internal helpers (importable for unit tests)
# ---------------------------------------------------------------------------

def parse_course_line(line: str, line_number: int) -> tuple[dict | None, dict | None]:
    """Parse one line of course data.

    Args:
        line:        Raw line, possibly with a trailing newline or "\\r".
        line_number: 1-based position in the source, used in the issue.

    Returns:
        (course, None) for a good line, (None, issue) for a bad one and
        (None, None) for a blank line. An issue is a dict with keys
        line_number, kind ("format_error" | "missing_field"), line (the
        raw content without its line ending) and message.
    """
    raw = line.rstrip("\r\n")
    if not raw.strip():
        return None, None

    fields = [field.strip() for field in raw.split(COURSE_FIELD_DELIMITER)]

    if len(fields) < 2:
        return None, _issue(
            line_number, FORMAT_ERROR, raw,
            f"File format error on line {line_number}: fewer than two fields.",
        )

    course_number, course_title = fields[0], fields[1]
    if not course_number or not course_title:
        return None, _issue(
            line_number, MISSING_FIELD, raw,
            f"File format warning on line {line_number}: "
            f"missing course number or title.",
        )

    return make_course(course_number, course_title, fields[2:]), None


def _issue(line_number: int, kind: str, line: str, message: str) -> dict:
    return {
        "line_number": line_number,
        "kind": kind,
        "line": line,
        "message": message,
    }
