"""CSV export of the trend history."""

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import pandas as pd

from chemview.history.buffers import Sample

COLUMNS = ["Timestamp", "RPM", "Temperature (C)"]


def trend_frame(speed: Sequence[Sample], temperature: Sequence[Sample]) -> pd.DataFrame:
    """Align the speed and temperature series row by row.

    Rows follow the speed series; a missing temperature sample reads 0.
    """
    rows = []
    for idx, sample in enumerate(speed):
        temp = temperature[idx].value if idx < len(temperature) else 0.0
        rows.append([sample.timestamp_label, round(sample.value, 2), round(temp, 2)])
    return pd.DataFrame(rows, columns=COLUMNS)


def trend_csv(speed: Sequence[Sample], temperature: Sequence[Sample]) -> str:
    return trend_frame(speed, temperature).to_csv(index=False, float_format="%.2f")


def export_filename(day: Optional[date] = None) -> str:
    day = day or date.today()
    return f"reactor_logs_{day.isoformat()}.csv"
