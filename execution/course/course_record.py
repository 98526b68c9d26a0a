"""
execution/course/course_record.py

Canonical shape of a course record and the single course-number
normalization helper.

No file access. Pure constants and helpers only.
"""

from __future__ import annotations

# Every course dict carries exactly these keys.
COURSE_FIELDS: tuple[str, ...] = ("course_number", "course_title", "prerequisites")


def normalize_course_number(course_number: str) -> str:
    """Return the canonical form of a course number.

    Surrounding whitespace is stripped and letters are uppercased, so
    "cs200 " and "CS200" refer to the same course.

    Args:
        course_number: Raw course number as typed or read from a file.

    Returns:
        The normalized course number (may be empty).
    """
    return course_number.strip().upper()


def make_course(
    course_number: str,
    course_title: str,
    prerequisites: list[str] | None = None,
) -> dict:
    """Build a course dict with normalized keys.

    Blank prerequisite entries are dropped; the remaining ones keep their
    original order.

    Args:
        course_number: Unique course identifier (e.g. "CS200").
        course_title:  Display title. Surrounding whitespace is stripped.
        prerequisites: Optional list of prerequisite course numbers.

    Returns:
        dict with keys course_number, course_title, prerequisites.
    """
    prereqs: list[str] = []
    for raw in prerequisites or []:
        prereq_id = normalize_course_number(raw)
        if prereq_id:
            prereqs.append(prereq_id)

    return {
        "course_number": normalize_course_number(course_number),
        "course_title": course_title.strip(),
        "prerequisites": prereqs,
    }
