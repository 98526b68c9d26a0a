"""
execution/course/describe_course.py

Builds the detail view for a single course, resolving each prerequisite
against the same tree. Read-only: never mutates the tree.

A missing course and a prerequisite that is not in the data are both
normal outcomes, reported in the returned view rather than raised.
"""

from __future__ import annotations

from execution.course.course_record import normalize_course_number
from execution.course.course_tree import CourseTree

PREREQ_INDENT = "  "
PREREQ_NOT_FOUND_NOTE = "(course not found in data)"


def get_course_detail(course_number: str, tree: CourseTree) -> dict:
    """Look up a course and resolve its prerequisites.

    Args:
        course_number: Course to describe. Case and surrounding whitespace
                       are ignored.
        tree:          Loaded course tree.

    Returns:
        dict with keys:
            found          (bool)       False when the course is not stored.
            course_number  (str)        Normalized course number.
            course_title   (str|None)   None when not found.
            prerequisites  (list[dict]) One entry per prerequisite, in file
                                        order: course_number, course_title
                                        (None when dangling) and found.
    """
    number = normalize_course_number(course_number)
    course = tree.find(number)
    if course is None:
        return {
            "found": False,
            "course_number": number,
            "course_title": None,
            "prerequisites": [],
        }

    prerequisites = []
    for prereq_id in course["prerequisites"]:
        prereq = tree.find(prereq_id)
        prerequisites.append({
            "course_number": normalize_course_number(prereq_id),
            "course_title": prereq["course_title"] if prereq else None,
            "found": prereq is not None,
        })

    return {
        "found": True,
        "course_number": course["course_number"],
        "course_title": course["course_title"],
        "prerequisites": prerequisites,
    }


def describe_course(course_number: str, tree: CourseTree) -> str:
    """Return the printable detail view for *course_number*.

    Example output:
        CS300, Advanced Programming and Algorithms
        Prerequisites:
          CS200, Data Structures
          CS999 (course not found in data)
    """
    detail = get_course_detail(course_number, tree)
    if not detail["found"]:
        return f"Course {detail['course_number']} not found."

    lines = [f"{detail['course_number']}, {detail['course_title']}"]
    if not detail["prerequisites"]:
        lines.append("Prerequisites: None")
        return "\n".join(lines)

    lines.append("Prerequisites:")
    for prereq in detail["prerequisites"]:
        if prereq["found"]:
            lines.append(
                f"{PREREQ_INDENT}{prereq['course_number']}, {prereq['course_title']}"
            )
        else:
            lines.append(
                f"{PREREQ_INDENT}{prereq['course_number']} {PREREQ_NOT_FOUND_NOTE}"
            )
    return "\n".join(lines)
