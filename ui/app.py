"""
ui/app.py

Course Planner Viewer

Loads a course data file, lists every course in course-number order and
shows one course's prerequisites. No parsing or formatting logic lives
here; all work is delegated to execution/course/*.

Run from the repository root:
    streamlit run ui/app.py
"""

import logging
import sys
from pathlib import Path

import streamlit as st

# ---------------------------------------------------------------------------
# Ensure repo root is on sys.path so execution.* imports work regardless of
# where Streamlit is launched from.
# ---------------------------------------------------------------------------
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from execution.course.course_tree import CourseTree                 # noqa: E402
from execution.course.describe_course import (                      # noqa: E402
    describe_course,
    get_course_detail,
)
from execution.course.list_courses import NO_COURSES_MESSAGE        # noqa: E402
from execution.course.load_courses import (                         # noqa: E402
    DEFAULT_COURSE_FILE,
    load_courses_from_file,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Course Planner", layout="centered")
st.title("Course Planner")

# The tree survives Streamlit reruns for the life of the browser session.
if "course_tree" not in st.session_state:
    st.session_state["course_tree"] = CourseTree()
    st.session_state["data_loaded"] = False

tree: CourseTree = st.session_state["course_tree"]

# ===========================================================================
# SECTION 1: Load
# ===========================================================================
st.header("Load Course Data")
file_name = st.text_input("Course data file", value=str(DEFAULT_COURSE_FILE))

if st.button("Load"):
    if not file_name or not file_name.strip():
        st.error("File name cannot be empty.")
    else:
        try:
            result = load_courses_from_file(file_name, tree)
            st.session_state["data_loaded"] = result["ok"]
            if result["ok"]:
                st.success(f"{result['message']} ({result['courses_loaded']} courses)")
            else:
                st.error(result["message"])
            for issue in result["issues"]:
                st.warning(f"{issue['message']}  \nOffending line: `{issue['line']}`")
        except Exception:
            logging.exception("Unexpected error loading %s", file_name)
            st.error("An unexpected error occurred. See console for details.")

# ===========================================================================
# SECTION 2: Course list
# ===========================================================================
st.divider()
st.header("Course List")

if not st.session_state["data_loaded"]:
    st.info("Please load the course data first.")
elif tree.is_empty():
    st.info(NO_COURSES_MESSAGE)
else:
    st.dataframe(
        [
            {"Course": course["course_number"], "Title": course["course_title"]}
            for course in tree
        ],
        hide_index=True,
    )

# ===========================================================================
# SECTION 3: Course detail
# ===========================================================================
st.divider()
st.header("Course Detail")

course_number = st.text_input("Course number", placeholder="e.g. CSCI200")

if st.button("Show Course"):
    if not st.session_state["data_loaded"]:
        st.warning("Please load the course data first.")
    elif not course_number or not course_number.strip():
        st.error("Course number cannot be empty.")
    else:
        try:
            detail = get_course_detail(course_number, tree)
            if not detail["found"]:
                st.warning(describe_course(course_number, tree))
            else:
                st.code(describe_course(course_number, tree), language=None)
                missing = [p["course_number"] for p in detail["prerequisites"] if not p["found"]]
                if missing:
                    st.caption(
                        "Prerequisites not in the loaded data: " + ", ".join(missing)
                    )
        except Exception:
            logging.exception("Unexpected error describing %s", course_number)
            st.error("An unexpected error occurred. See console for details.")
