# screens/api_report.py
import streamlit as st
from core.settings import load_settings
from core.year_types import DEFAULT_CATALOG, YearType
from core.report_requests import ApiReportRequest, validate_batch_year
from core.forms import show_errors, success

PAGE_KEY = "API Report"

def _settings():
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()
    return st.session_state["settings"]

def _year_type_options():
    return [spec.year_type.value for spec in DEFAULT_CATALOG]

def _year_type_label(code: str) -> str:
    spec = DEFAULT_CATALOG.lookup(code)
    return f"{spec.display_name} ({spec.year_type.value})"

def render():
    settings = _settings()
    st.title("📊 Academic Performance Index (API)")
    st.caption("Generate API calculation reports for accreditation.")

    options = _year_type_options()
    default_yt = settings.calendar.default_year_type
    col1, col2 = st.columns(2)
    with col1:
        year_type = st.selectbox(
            "Academic Year",
            options=options,
            index=options.index(default_yt) if default_yt in options else 0,
            format_func=_year_type_label,
            key="api_year_type",
        )
    with col2:
        batch_text = st.text_input("Batch Start Year *", value="", placeholder="e.g., 2022", key="api_batch_year")

    max_marks = None
    override = st.checkbox("Override max marks", value=settings.reports.default_max_marks is not None)
    if override:
        max_marks = st.number_input(
            "Max Marks",
            min_value=1.0,
            value=float(settings.reports.default_max_marks or 100),
            step=1.0,
        )

    st.markdown("### Upload Result Data")
    student_file = st.file_uploader("Student List (Excel)", type=["xlsx", "xls"], key="api_student_file")
    result_file = st.file_uploader("Result Ledger (Excel/CSV)", type=["xlsx", "xls", "csv"], key="api_result_file")

    batch_year = None
    if batch_text.strip():
        batch_year, errors = validate_batch_year(batch_text, settings)
        if show_errors(errors):
            return

    if batch_year is not None:
        request = ApiReportRequest.for_batch(batch_year, YearType(year_type), max_marks)
        st.markdown("#### Labels")
        st.write(f"Year label: **{request.year_label}**")
        st.write(f"Semester headers: **{request.sem1_header}** · **{request.sem2_header}**")
    else:
        request = None

    if st.button("Generate API Report", type="primary", disabled=request is None):
        problems = [] if (student_file and result_file) else ["Please upload the student list and result file."]
        problems.extend(request.validate())
        if show_errors(problems):
            return
        st.markdown("#### Request")
        st.code(f"POST {settings.backend.base_url.rstrip('/')}{request.ENDPOINT}")
        st.json(request.form_fields())
        success(f"Request ready. The report downloads as {request.download_filename}.")

render()
