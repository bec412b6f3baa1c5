from __future__ import annotations

import html

import streamlit as st


def render_header(title: str, right_pill: str) -> None:
    st.markdown(
        f"""
<div class="records-header">
  <div class="records-title">{html.escape(title)}</div>
  <div class="pill">{html.escape(right_pill)}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
