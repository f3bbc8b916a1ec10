"""
Shared UI blocks for the preview page: metrics table, warnings, downloads.
"""

from __future__ import annotations

import pandas as pd
import streamlit as st


def metrics_rows(arc_data: dict) -> list[dict[str, str]]:
    """Flatten arc.json result into Metric/Value rows. All values as string for Arrow compatibility."""
    rows: list[dict[str, str]] = []
    for k, v in (arc_data.get("result") or {}).items():
        if isinstance(v, dict):
            v = ", ".join(f"{kk}={vv:.3f}" if isinstance(vv, float) else f"{kk}={vv}" for kk, vv in v.items())
        elif isinstance(v, float):
            v = f"{v:.4f}"
        rows.append({"Metric": str(k), "Value": "" if v is None else str(v)})
    return rows


def render_metrics(arc_data: dict) -> None:
    """DataFrame of the arc result."""
    rows = metrics_rows(arc_data)
    if not rows:
        return
    df = pd.DataFrame(rows).astype(str)
    st.dataframe(df, width="stretch", hide_index=True)


def render_warnings(warnings: list[str]) -> None:
    """One st.warning per warning."""
    for w in warnings:
        st.warning(w)


def centered_download(label: str, data: bytes, file_name: str, mime: str, key: str) -> None:
    """Render a download button centered in a 3-column layout."""
    _c1, _c2, _c3 = st.columns([1, 1, 1])
    with _c2:
        st.download_button(label, data=data, file_name=file_name, mime=mime, key=key)
