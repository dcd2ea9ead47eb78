"""Streamlit UI for theater seating with a seat map preview."""
from __future__ import annotations

# Add src to sys.path so theater_seating can be found
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st

from theater_seating.engine import Theater
from theater_seating.loader import load_reservations
from theater_seating.models import TheaterConfig
from theater_seating.output import format_report, seat_map
from theater_seating.runner import process_reservations

# -----------------------------
# Helpers
# -----------------------------

def uploadedfile_to_text(uploaded_file) -> io.StringIO | None:
    """Read a Streamlit UploadedFile into a text buffer positioned at start."""
    if uploaded_file is None:
        return None
    uploaded_file.seek(0)
    return io.StringIO(uploaded_file.read().decode("utf-8"))

def highlight_taken(value: str) -> str:
    return "background-color: #f4c27a" if value else ""

# -----------------------------
# Sidebar options
# -----------------------------

defaults = TheaterConfig()
st.sidebar.header("Theater")
rows = st.sidebar.number_input("Rows", min_value=1, max_value=52, value=defaults.rows)
columns = st.sidebar.number_input("Seats per row", min_value=1, max_value=100, value=defaults.columns)
buffer = st.sidebar.number_input(
    "Buffer seats",
    min_value=0,
    max_value=20,
    value=defaults.buffer,
    help="Empty seats kept between two groups in the same row.",
)

# -----------------------------
# Main UI
# -----------------------------

st.title("Theater Seating")

_reservations_file = st.file_uploader("Reservations file", type=["txt"])

run_clicked = st.button("Assign seats", disabled=_reservations_file is None)

if run_clicked and _reservations_file is not None:
    try:
        reservations = load_reservations(uploadedfile_to_text(_reservations_file))
        config = TheaterConfig(rows=int(rows), columns=int(columns), buffer=int(buffer))
        theater = Theater(config)
        result = process_reservations(theater, reservations)
    except ValueError as e:
        st.error(f"Input validation error: {e}")
        st.stop()

    st.caption(format_report(result, theater))

    st.subheader("Assignments")
    st.code("\n".join(result.lines) or "(no reservations seated)")

    if result.rejected:
        st.subheader("Not enough seats")
        st.dataframe(pd.DataFrame({"reservation": result.rejected}), use_container_width=True)

    st.subheader("Seat map")
    grid = seat_map(config, result.assignments)
    st.dataframe(grid.style.map(highlight_taken), use_container_width=True)

    st.download_button(
        "Download output.txt",
        "".join(line + "\n" for line in result.lines).encode("utf-8"),
        file_name="output.txt",
    )
