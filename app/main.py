# app/main.py
"""
GJSTEP Viewer - Gauss-Jordan steps in the browser

Type the augmented matrix in the sidebar (decimals or fractions like 1/3),
solve, then page through every row operation.

Run with:
    streamlit run app/main.py
"""

import streamlit as st
import sys
from pathlib import Path
import pandas as pd

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config import CONFIG
from state import get_result, set_result, clear_result, get_trace_top, set_trace_top
from gjstep.config import DEFAULT_CONFIG
from gjstep.kernel import format_value
from gjstep.pager import LogPager
from gjstep.parse import InvalidNumberError, parse_number
from gjstep.session import SolveSession

# Page configuration - must be first Streamlit command
st.set_page_config(
    page_title=CONFIG.app_name,
    page_icon="🧮",
    layout="wide",
    initial_sidebar_state="expanded",
)


def read_cells(rows: int, cols: int):
    """Parse the sidebar text inputs. Returns (matrix, errors)."""
    A = []
    errors = []
    for i in range(rows):
        row = []
        for j in range(cols):
            text = st.session_state.get(f"cell_{rows}_{i}_{j}", "")
            try:
                row.append(parse_number(text))
            except InvalidNumberError as e:
                label = f"b[{i + 1}]" if j == cols - 1 else f"A[{i + 1},{j + 1}]"
                errors.append(f"{label}: {e}")
                row.append(0.0)
        A.append(row)
    return A, errors


# =============================================================================
# SIDEBAR - Matrix Entry
# =============================================================================

with st.sidebar:
    st.title(f"🧮 {CONFIG.app_name}")
    st.caption(CONFIG.app_subtitle)

    st.divider()

    labels = [label for label, _, _ in CONFIG.shapes]
    choice = st.radio("System size", options=labels, index=0, key="shape",
                      on_change=clear_result)
    _, rows, cols = CONFIG.shapes[labels.index(choice)]

    defaults = CONFIG.default_cells(rows)
    header = st.columns(cols)
    for j in range(cols):
        header[j].markdown("**b**" if j == cols - 1 else f"**x{j + 1}**")
    for i in range(rows):
        columns = st.columns(cols)
        for j in range(cols):
            columns[j].text_input(
                f"r{i + 1}c{j + 1}",
                value=defaults[i][j],
                key=f"cell_{rows}_{i}_{j}",
                label_visibility="collapsed",
            )

    page_size = st.slider("Lines per page", *CONFIG.page_size_range,
                          CONFIG.page_size, key="page_size")

    solve_clicked = st.button("▶ Solve", type="primary", use_container_width=True)

    st.divider()
    st.caption(f"v{CONFIG.version}")


# =============================================================================
# MAIN - Solve and Trace Viewer
# =============================================================================

if solve_clicked:
    A, errors = read_cells(rows, cols)
    if errors:
        for msg in errors:
            st.error(msg)
    else:
        set_result(SolveSession(DEFAULT_CONFIG).solve(A))

result = get_result()

if result is None:
    st.info("Enter the augmented matrix and press Solve.")
    st.stop()

if result.ok:
    solution = ", ".join(f"x{i + 1} = {format_value(v)}" for i, v in enumerate(result.solution))
    st.success(f"Unique solution: {solution}")
else:
    st.error("Singular or underdetermined system: no unique solution.")

if result.dropped:
    st.warning(f"Trace truncated: {result.dropped} lines did not fit.")

col_trace, col_matrix = st.columns([3, 2])

with col_trace:
    st.subheader("Steps")

    pager = LogPager(total=len(result.lines), page_size=page_size, top=get_trace_top())

    nav = st.columns(4)
    if nav[0].button("⏫ Page up", use_container_width=True):
        pager.page_up()
    if nav[1].button("🔼 Up", use_container_width=True):
        pager.line_up()
    if nav[2].button("🔽 Down", use_container_width=True):
        pager.line_down()
    if nav[3].button("⏬ Page down", use_container_width=True):
        pager.page_down()
    set_trace_top(pager.top)

    st.code("\n".join(pager.visible(result.lines)) or " ", language=None)
    st.caption(pager.footer())

    st.download_button(
        "Download steps (.txt)",
        data="\n".join(result.lines) + "\n",
        file_name="gauss_jordan_steps.txt",
        mime="text/plain",
    )

with col_matrix:
    st.subheader("Final matrix")
    n = result.rows
    df = pd.DataFrame(
        [[format_value(v) for v in row] for row in result.matrix],
        columns=[f"x{j + 1}" for j in range(n)] + ["b"],
        index=[f"R{i + 1}" for i in range(n)],
    )
    st.dataframe(df, use_container_width=True)
