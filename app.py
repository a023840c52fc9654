"""ChemView Mixing Tank Operator Console.

A live Streamlit console for a simulated chemical mixing tank. Features a
tick-driven process model, hard interlocks between the agitator and the
discharge valve, threshold alerting with duplicate suppression, and a
synthetic Modbus traffic monitor.
"""

from __future__ import annotations

import time

import streamlit as st
from streamlit_autorefresh import st_autorefresh

from chemview.config import SimulationConfig
from chemview.export import export_filename, trend_csv
from chemview.session import MixerSession
from chemview.ui.controls import render_controls
from chemview.ui.dashboard import render_dashboard, render_status_line
from chemview.ui.event_log import render_alerts, render_audit_log, render_traffic
from chemview.ui.trends import render_trends


# ---------------------------------------------------------------------------
# Session state initialization
# ---------------------------------------------------------------------------

def _init_session() -> None:
    """Set up session state on first load."""
    if "session" not in st.session_state:
        st.session_state.session = MixerSession(SimulationConfig.from_env())
    if "last_tick" not in st.session_state:
        st.session_state.last_tick = time.monotonic()
    if "last_alert" not in st.session_state:
        st.session_state.last_alert = time.monotonic()


def _pump_clock(session: MixerSession) -> None:
    """Run whichever periodic work is due since the previous rerun.

    Reruns come from the page refresh and from button clicks alike, so the
    plant and alert cadences are kept against the monotonic clock rather
    than against the rerun count.
    """
    now = time.monotonic()
    cfg = session.config

    if now - st.session_state.last_tick >= cfg.tick_interval_s:
        session.plant_tick()
        st.session_state.last_tick = now

    if now - st.session_state.last_alert >= cfg.alert_interval_s:
        session.evaluate_alerts()
        st.session_state.last_alert = now


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(
        page_title="ChemView HMI",
        page_icon="🧪",
        layout="wide",
    )

    _init_session()
    session: MixerSession = st.session_state.session

    st_autorefresh(interval=int(session.config.tick_interval_s * 1000), key="ui_refresh_plant")
    _pump_clock(session)

    # Title
    st.markdown(
        "# CHEMVIEW HMI 1.0\n"
        "*Mixing tank digital twin with interlocks and predictive alerting*"
    )

    if st.sidebar.button("Reset Console", type="secondary", use_container_width=True):
        for key in list(st.session_state.keys()):
            del st.session_state[key]
        st.rerun()

    # Control panel
    render_controls(session)

    st.divider()

    # Readings reflect any command applied above
    render_dashboard(session.plant, session.commands)

    st.divider()

    col_left, col_right = st.columns([3, 2])

    with col_left:
        render_trends(session.speed_trend, session.temperature_trend)
        render_traffic(session.traffic)

    with col_right:
        render_alerts(session.alerts)
        render_audit_log(session.audit)

    st.download_button(
        "Export CSV",
        data=trend_csv(session.speed_trend, session.temperature_trend),
        file_name=export_filename(),
        mime="text/csv",
    )

    render_status_line(session.status(), session.gateway_stats(), session.config.operator)


if __name__ == "__main__":
    main()
