# schemas.py
"""Data validation schemas for the water status dashboard."""

import pandera as pa
from pandera.typing import Series

from config import TWS_LABEL


class TwsChartSchema(pa.DataFrameModel):
    """Schema for the per-district frame plotted by the chart view."""
    year: Series[str] = pa.Field(nullable=False)
    tws: Series[float] = pa.Field(nullable=True, alias=TWS_LABEL)

    class Config:
        coerce = True
        strict = True
