"""
Field encoding types for the chart IR.

Command syntax:

    X_FIELD created_at TYPE TEMPORAL TIME_UNIT MONTH
    Y_FIELD amount AGGREGATE SUM
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from .bins import BinSpec


class FieldKind(StrEnum):
    """Measurement type of an encoded field."""

    QUANTITATIVE = "quantitative"
    NOMINAL = "nominal"
    ORDINAL = "ordinal"
    TEMPORAL = "temporal"


class AggregateOp(StrEnum):
    """Aggregation applied to an encoded field."""

    COUNT = "count"
    VALID = "valid"
    MISSING = "missing"
    DISTINCT = "distinct"
    SUM = "sum"
    PRODUCT = "product"
    MEAN = "mean"
    AVERAGE = "average"
    VARIANCE = "variance"
    VARIANCEP = "variancep"
    STDEV = "stdev"
    STDEVP = "stdevp"
    STDERR = "stderr"
    MEDIAN = "median"
    Q1 = "q1"
    Q3 = "q3"
    CI0 = "ci0"
    CI1 = "ci1"
    MIN = "min"
    MAX = "max"
    ARGMIN = "argmin"
    ARGMAX = "argmax"


class TimeUnit(StrEnum):
    """Time unit used to discretise a temporal field."""

    YEAR = "year"
    QUARTER = "quarter"
    MONTH = "month"
    DAY = "day"
    DATE = "date"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"


class FieldEncoding(BaseModel):
    """
    Encoding of one data field on a positional channel.

    Attributes:
        field: Name of the data column
        type: Measurement type
        aggregate: Optional aggregation
        time_unit: Optional time unit for temporal fields
        bin: True/False toggle or detailed binning parameters
    """

    field: str = ""
    type: FieldKind = FieldKind.QUANTITATIVE
    aggregate: AggregateOp | None = None
    time_unit: TimeUnit | None = None
    bin: bool | BinSpec | None = None

    model_config = ConfigDict(extra="forbid")
