"""Operator control panel: run, mode, heater, valve, setpoints, E-stop."""

from __future__ import annotations

import streamlit as st

from chemview.models.constants import SETPOINT_RANGES
from chemview.session import MixerSession


def _report(decision, title: str) -> None:
    if not decision.allowed:
        st.toast(f"{title}: {decision.reason}", icon="⛔")


def render_controls(session: MixerSession) -> None:
    """Render controls and forward every operator intent to the session."""

    st.markdown("### Operator Controls")

    cmd = session.commands
    plant = session.plant

    b1, b2, b3, b4 = st.columns(4)

    with b1:
        label = "Stop Mixer" if cmd.running else "Start Mixer"
        if st.button(label, type="primary", use_container_width=True):
            _report(session.toggle_running(), "Interlock Active")
    with b2:
        label = "Switch to AUTO" if cmd.manual_mode else "Switch to MANUAL"
        if st.button(label, use_container_width=True):
            session.toggle_mode()
    with b3:
        label = "Heater OFF" if cmd.heater_on else "Heater ON"
        if st.button(label, use_container_width=True):
            session.toggle_heater()
    with b4:
        label = "Close Valve" if plant.valve_open else "Open Valve"
        if st.button(label, use_container_width=True):
            _report(session.toggle_valve(), "Action Denied")

    if cmd.manual_mode:
        s_lo, s_hi = SETPOINT_RANGES["target_speed_rpm"]
        t_lo, t_hi = SETPOINT_RANGES["target_temperature_c"]
        c1, c2 = st.columns(2)
        with c1:
            rpm = st.slider(
                "Speed Setpoint (RPM)",
                min_value=s_lo,
                max_value=s_hi,
                value=float(cmd.target_speed_rpm),
                step=10.0,
                key="slider_speed",
            )
        with c2:
            temp = st.slider(
                "Temperature Setpoint (C)",
                min_value=t_lo,
                max_value=t_hi,
                value=float(cmd.target_temperature_c),
                step=0.5,
                key="slider_temperature",
            )
        if rpm != cmd.target_speed_rpm:
            session.set_target_speed(rpm)
        if temp != cmd.target_temperature_c:
            session.set_target_temperature(temp)

    if st.button("EMERGENCY STOP", type="primary", use_container_width=True):
        session.emergency_stop()
        st.toast("Emergency stop triggered", icon="🛑")
