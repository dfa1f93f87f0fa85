# app.py
from __future__ import annotations
import logging
import os
from pathlib import Path
import streamlit as st
from core.settings import load_settings
from core.logging_config import configure_logging

APP_FILE = Path(__file__).resolve()
APP_DIR  = APP_FILE.parent
SCREENS_DIR = APP_DIR / "screens"

log = logging.getLogger(__name__)

def _ensure_settings():
    if "settings" not in st.session_state:
        settings = load_settings()
        configure_logging(settings)
        st.session_state["settings"] = settings
    return st.session_state["settings"]

def _add_page_if(route_stem: str, title: str, pages_out: list, missing_out: list, default: bool = False):
    page_path = SCREENS_DIR / f"{route_stem}.py"
    if not page_path.exists():
        missing_out.append((route_stem, "Not found"))
        return
    relative_path_str = str(page_path.relative_to(APP_DIR)).replace(os.path.sep, '/')
    pages_out.append(st.Page(
        relative_path_str,
        title=title,
        default=default,
        url_path=route_stem,
    ))

def _build_flat_pages():
    pages, missing = [], []
    _add_page_if("api_report", "📊 API Report", pages, missing, default=True)
    _add_page_if("success_index", "📈 Success Index", pages, missing)
    _add_page_if("semesters", "📅 Semester Calendar", pages, missing)

    if missing:
        log.warning("Missing pages: %s", [m[0] for m in missing])
        st.sidebar.warning(f"Missing pages: {[m[0] for m in missing]}")
    return pages, missing

def main():
    settings = _ensure_settings()
    st.set_page_config(page_title=settings.app.name, layout="wide")

    pages, _ = _build_flat_pages()
    if not pages:
        st.error("No pages available.")
        return

    nav = st.navigation(pages, position="sidebar")
    nav.run()
    st.caption(f"{settings.app.name} · {settings.app.environment}")

if __name__ == "__main__":
    main()
