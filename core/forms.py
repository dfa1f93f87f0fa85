from __future__ import annotations
from typing import Iterable
import streamlit as st

def success(msg: str): st.success(msg)

def show_errors(errors: Iterable[str]) -> bool:
    """Render each error; True when there was at least one."""
    shown = False
    for msg in errors:
        st.error(msg)
        shown = True
    return shown
