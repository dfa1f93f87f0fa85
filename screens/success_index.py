# screens/success_index.py
import streamlit as st
from core.settings import load_settings
from core.report_requests import BatchType, SuccessIndexRequest, semester_options
from core.forms import show_errors, success

PAGE_KEY = "Success Index"

def _settings():
    if "settings" not in st.session_state:
        st.session_state["settings"] = load_settings()
    return st.session_state["settings"]

def render():
    settings = _settings()
    st.title("📈 Success Index")
    st.caption("Upload student enrollment data and semester results to calculate success metrics")

    st.markdown("### Batch Configuration")
    batch_type = st.radio(
        "Batch Type *",
        options=[BatchType.NEW.value, BatchType.OLD.value],
        format_func=lambda v: "New Batch (First Year)" if v == BatchType.NEW.value else "Old Batch (Updating / Adding DSY)",
        horizontal=True,
        key="si_batch_type",
    )

    c1, c2 = st.columns(2)
    with c1:
        success_index_name = st.text_input("Success Index Name", placeholder="e.g., BCA Success Index 2022-25")
    with c2:
        batch_name = st.text_input("Batch Name", placeholder="e.g., FYME (2022-23) & LATERAL ENTRY DSYME (2023-24)")

    batch_year = None
    if batch_type == BatchType.NEW.value:
        batch_year = st.text_input(
            "Batch Start Year *", placeholder="e.g., 2022",
            help="Year when the batch started (e.g., 2022 for FY 2022-23)",
        )

    options = semester_options()
    labels = dict(options)
    semester = st.selectbox(
        "Current Semester *",
        options=[None] + [n for n, _ in options],
        format_func=lambda n: "Select Semester" if n is None else labels[n],
        key="si_semester",
    )

    request_preview = SuccessIndexRequest(
        batch_type=BatchType(batch_type),
        semester_number=semester,
        batch_year=batch_year,
    )
    code = request_preview.semester_code() if batch_year else None
    if code:
        st.info(f"Processing: **Semester {semester}** ({code}) for batch starting {batch_year}")

    st.markdown("### Upload Files")
    student_hint = " (Optional - for DSY/New Students)" if batch_type == BatchType.OLD.value else ""
    student_file = st.file_uploader(f"Student Enrollment Data{student_hint}", type=["xlsx", "xls"])
    result_file = st.file_uploader("Semester Results *", type=["xlsx", "xls"])
    previous_index = None
    if batch_type == BatchType.OLD.value:
        previous_index = st.file_uploader("Previous Success Index *", type=["xlsx", "xls"])

    if st.button("Generate Success Index", type="primary"):
        request = SuccessIndexRequest(
            batch_type=BatchType(batch_type),
            semester_number=semester,
            batch_year=batch_year,
            success_index_name=success_index_name.strip(),
            batch_name=batch_name.strip(),
            has_result_file=result_file is not None,
            has_student_list=student_file is not None,
            has_previous_index=previous_index is not None,
            max_marks=settings.reports.default_max_marks,
        )
        if show_errors(request.validate(settings)):
            return
        st.code(f"POST {settings.backend.base_url.rstrip('/')}{request.ENDPOINT}")
        st.json(request.form_fields())
        success(f"Request ready. The success index downloads as {request.download_filename}.")

    if batch_type == BatchType.NEW.value:
        st.caption("Processing new batch - requires student list")
    else:
        st.caption("Updates existing batch. Upload student list to add DSY/new students.")

render()
