# screens/semesters.py
import streamlit as st
from core.settings import load_settings
from core.report_requests import validate_batch_year
from core.semester_labels import semester_schedule
from core.forms import show_errors

PAGE_KEY = "Semesters"

def _settings():
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()
    return st.session_state["settings"]

def render():
    settings = _settings()
    st.title("📅 Semester Calendar")
    st.caption("Season-coded semester headers for every semester of a batch. "
               "The backend matches these headers verbatim against spreadsheet columns.")

    batch_text = st.text_input("Batch Start Year", value="", placeholder="e.g., 2022", key="sem_batch_year")
    if not batch_text.strip():
        st.info("Enter a batch start year to see its semester calendar.")
        return

    batch_year, errors = validate_batch_year(batch_text, settings)
    if show_errors(errors):
        return

    df = semester_schedule(batch_year)
    st.dataframe(
        df.rename(columns={
            "semester": "Semester",
            "year_type": "Year Type",
            "year_label": "Academic Year",
            "position": "Term in Year",
            "season_code": "Code",
            "header": "Column Header",
        }),
        use_container_width=True,
        hide_index=True,
    )

render()
