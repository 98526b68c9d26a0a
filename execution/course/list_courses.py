"""
execution/course/list_courses.py

Renders the full course list in ascending course-number order.
"""

from __future__ import annotations

from execution.course.course_tree import CourseTree

NO_COURSES_MESSAGE = "No courses loaded."


def list_courses(tree: CourseTree) -> list[str]:
    """Return one "<number>, <title>" line per course, ascending by number."""
    lines: list[str] = []
    tree.for_each_in_order(
        lambda course: lines.append(f"{course['course_number']}, {course['course_title']}")
    )
    return lines


def format_course_list(tree: CourseTree) -> str:
    """Return the course list as one string, or NO_COURSES_MESSAGE if empty."""
    if tree.is_empty():
        return NO_COURSES_MESSAGE
    return "\n".join(list_courses(tree))
