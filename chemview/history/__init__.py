from chemview.history.buffers import (
    Severity,
    Direction,
    Sample,
    TrafficRecord,
    AuditRecord,
    AlertRecord,
    TrendSeries,
    TrafficLog,
    AuditLog,
    AlertList,
)

__all__ = [
    "Severity",
    "Direction",
    "Sample",
    "TrafficRecord",
    "AuditRecord",
    "AlertRecord",
    "TrendSeries",
    "TrafficLog",
    "AuditLog",
    "AlertList",
]
