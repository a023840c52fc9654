"""Live readings and console status line."""

from __future__ import annotations

from typing import Dict

import streamlit as st

from chemview.models.constants import LIMITS
from chemview.models.plant_state import CommandState, PlantState


def render_dashboard(state: PlantState, commands: CommandState) -> None:
    """Render the top KPI bar with the four tank readings."""

    st.markdown("### Tank Readings")

    c1, c2, c3, c4 = st.columns(4)

    with c1:
        target = commands.target_speed_rpm if commands.manual_mode else None
        st.metric(
            "Mixer Speed",
            f"{state.speed_rpm:.0f} RPM",
            delta=f"{state.speed_rpm - target:+.0f}" if target is not None else None,
            delta_color="off",
        )

    with c2:
        st.metric(
            "Temperature",
            f"{state.temperature_c:.1f} C",
            delta=f"{state.temperature_c - LIMITS.temperature_alert:+.1f} to alarm",
            delta_color="inverse",
        )

    with c3:
        st.metric("Acidity", f"{state.acidity:.2f} pH")

    with c4:
        st.metric("Discharge Valve", "OPEN" if state.valve_open else "CLOSED")


def render_status_line(status: Dict[str, str], stats: Dict[str, float], operator: str) -> None:
    """Footer with system state, interlock and gateway diagnostics."""
    st.caption(
        f"STATE: {status['state']} | INTERLOCK: {status['interlock']} | "
        f"HEATER: {status['heater']} | LOCK: {status['lock']}"
    )
    st.caption(
        f"PACKETS: {stats['packet_count']:,} | LATENCY: {stats['latency_ms']:.1f}ms | "
        f"BUFFER: {stats['buffer_used']}/{stats['buffer_capacity']} | OPERATOR: {operator}"
    )
