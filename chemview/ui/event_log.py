"""Alert panel, audit trail and protocol traffic lists."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from chemview.history.buffers import AlertRecord, AuditRecord, Direction, Severity, TrafficRecord


def _tag(severity: Severity) -> str:
    if severity == Severity.HIGH:
        return ":red[**HIGH**]"
    if severity == Severity.MEDIUM:
        return ":orange[**MEDIUM**]"
    return ":green[**LOW**]"


def render_alerts(alerts: Sequence[AlertRecord]) -> None:
    st.markdown("### Intelligent Alerts")
    if not alerts:
        st.caption("Awaiting first analysis...")
        return
    for alert in alerts:
        st.markdown(f"` {alert.timestamp_label} ` {_tag(alert.severity)} {alert.message}")


def render_audit_log(log: Sequence[AuditRecord], max_display: int = 20) -> None:
    """Render the audit trail, newest entry first."""

    st.markdown("### Audit Log")

    if not log:
        st.caption("No events recorded yet.")
        return

    for entry in list(log)[:max_display]:
        st.markdown(f"` {entry.timestamp_label} ` {_tag(entry.severity)} {entry.message}")


def render_traffic(logs: Sequence[TrafficRecord], max_display: int = 12) -> None:
    st.markdown("### Live Protocol Traffic (Modbus TCP/IP)")
    if not logs:
        st.caption("Waiting for bus activity...")
        return
    lines = []
    for rec in list(logs)[-max_display:]:
        arrow = "SEND >" if rec.direction == Direction.TX else "RECV <"
        lines.append(f"[{rec.timestamp_label}] {arrow} {rec.frame_text}")
    st.code("\n".join(lines), language=None)
