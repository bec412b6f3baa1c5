from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Student Records"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🎓",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    # Centralized theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --bg-primary: __BG_PRIMARY__;
  --card-bg: __CARD_BG__;
  --table-head-bg: __TABLE_HEAD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --text-muted: __TEXT_MUTED__;
  --danger: __DANGER__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

/* Hide default Streamlit chrome */
#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  font-family: ui-sans-serif, system-ui, -apple-system, Segoe UI, Roboto, Arial, sans-serif !important;
  color: var(--text-primary) !important;
}

/* Centered content column (max-w-6xl) */
.block-container{
  max-width: 72rem !important;
  padding-top: 2rem !important;
  padding-bottom: 2rem !important;
}

/* Header */
.records-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  gap: 12px;
  margin: 0 0 24px 0;
}
.records-title{
  font-size: 30px;
  font-weight: 700;
  color: var(--text-primary);
  line-height: 1.2;
}
.pill{
  display:inline-flex;
  align-items:center;
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 4px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--text-secondary);
}

/* Status lines */
.status-loading{ font-size: 14px; color: var(--text-muted); }
.status-error{ font-weight: 500; color: var(--danger); }
.status-empty{ color: var(--text-secondary); }

/* Records table */
.records-table-wrap{
  overflow-x: auto;
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
}
table.records-table{
  width: 100%;
  border-collapse: collapse;
  font-size: 14px;
  text-align: left;
}
table.records-table thead{
  background: var(--table-head-bg);
  border-bottom: 1px solid var(--card-border);
}
table.records-table th{
  padding: 12px 16px;
  font-weight: 600;
  color: var(--text-muted);
}
table.records-table td{
  padding: 12px 16px;
  color: var(--text-secondary);
  border-bottom: 1px solid var(--card-border);
}
table.records-table tbody tr:hover{ background: var(--bg-primary); }
table.records-table td.col-name{ color: var(--text-primary); font-weight: 500; }
table.records-table td.col-created{ color: var(--text-muted); }
</style>
"""

    tokens = {
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__TABLE_HEAD_BG__": str(THEME["bg_table_head"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__TEXT_MUTED__": str(THEME["text_muted"]),
        "__DANGER__": str(THEME["danger"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
