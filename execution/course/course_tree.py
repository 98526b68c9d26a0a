"""
execution/course/course_tree.py

In-memory ordered store of course records keyed by course number.

An unbalanced binary search tree whose nodes live in a flat list (the
arena) and point at their children by index. Insert, lookup and in-order
traversal are all loops, so a pathological insertion order (e.g. an
already-sorted file) grows the tree's depth but never the call stack.

No file access. No I/O.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from execution.course.course_record import normalize_course_number

# Node layout inside the arena: [course, lower_index, higher_index].
_COURSE = 0
_LOWER = 1
_HIGHER = 2


class CourseTree:
    """Course records ordered by course number (plain str comparison)."""

    def __init__(self) -> None:
        self._nodes: list[list] = []
        self._root: int | None = None

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[dict]:
        return self.iter_in_order()

    def is_empty(self) -> bool:
        return self._root is None

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def insert_or_update(self, course: dict) -> None:
        """Insert a course, or overwrite the title and prerequisites of the
        entry that already has the same course number.

        The stored record is a copy; later changes to *course* do not leak
        into the tree.
        """
        key = normalize_course_number(course["course_number"])
        record = {
            "course_number": key,
            "course_title": course["course_title"],
            "prerequisites": list(course.get("prerequisites") or []),
        }

        if self._root is None:
            self._root = self._new_node(record)
            return

        index = self._root
        while True:
            node = self._nodes[index]
            current_key = node[_COURSE]["course_number"]

            if key == current_key:
                node[_COURSE]["course_title"] = record["course_title"]
                node[_COURSE]["prerequisites"] = record["prerequisites"]
                return

            side = _LOWER if key < current_key else _HIGHER
            if node[side] is None:
                node[side] = self._new_node(record)
                return
            index = node[side]

    def clear(self) -> None:
        """Drop every entry. The tree is empty and reusable afterwards."""
        self._nodes = []
        self._root = None

    # -----------------------------------------------------------------------
    # Queries
    # -----------------------------------------------------------------------

    def find(self, course_number: str) -> dict | None:
        """Return the stored course for *course_number*, or None on a miss."""
        key = normalize_course_number(course_number)
        index = self._root
        while index is not None:
            node = self._nodes[index]
            current_key = node[_COURSE]["course_number"]
            if key == current_key:
                return node[_COURSE]
            index = node[_LOWER] if key < current_key else node[_HIGHER]
        return None

    def iter_in_order(self) -> Iterator[dict]:
        """Yield stored courses in ascending course-number order."""
        stack: list[int] = []
        index = self._root
        while stack or index is not None:
            # Walk as far down the lower side as possible first.
            while index is not None:
                stack.append(index)
                index = self._nodes[index][_LOWER]
            index = stack.pop()
            node = self._nodes[index]
            yield node[_COURSE]
            index = node[_HIGHER]

    def for_each_in_order(self, visit: Callable[[dict], None]) -> None:
        """Call *visit* once per stored course, in ascending order."""
        for course in self.iter_in_order():
            visit(course)

    # -----------------------------------------------------------------------
    # Internal helpers
    # -----------------------------------------------------------------------

    def _new_node(self, record: dict) -> int:
        self._nodes.append([record, None, None])
        return len(self._nodes) - 1
