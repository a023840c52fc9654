"""Trend charts for agitator speed and tank temperature."""

from __future__ import annotations

from typing import Sequence

import pandas as pd
import streamlit as st

from chemview.history.buffers import Sample
from chemview.models.constants import LIMITS


def _series_frame(samples: Sequence[Sample], column: str) -> pd.DataFrame:
    df = pd.DataFrame(
        {"Time": [s.timestamp_label for s in samples], column: [s.value for s in samples]}
    )
    return df.set_index("Time")


def render_trends(speed: Sequence[Sample], temperature: Sequence[Sample]) -> None:
    """Render trend charts from the bounded trend buffers."""

    if len(speed) < 2:
        st.info("Trend charts will appear after 2+ ticks.")
        return

    c1, c2 = st.columns(2)

    with c1:
        st.markdown("**Temperature (C)**")
        t_df = _series_frame(temperature, "Temperature")
        t_df["Alarm"] = LIMITS.temperature_alert
        st.line_chart(t_df, height=200)

    with c2:
        st.markdown("**Mixer Speed (RPM)**")
        st.line_chart(_series_frame(speed, "Speed"), height=200)
