"""
Binning configuration for chart field encodings.

Command syntax:

    X_FIELD price BIN MAXBINS 20 NICE TRUE

Every attribute is optional; an absent attribute is left for the renderer
to default.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BinSpec(BaseModel):
    """
    Binning parameters for a quantitative field.

    Attributes:
        anchor: Value to align bin boundaries to
        base: Number base used for automatic bin steps
        binned: Data is already binned upstream
        maxbins: Maximum number of bins
        minstep: Minimum allowable step size
        nice: Round bin boundaries to human-friendly values
        step: Exact step size between bins
    """

    anchor: float | None = None
    base: float | None = None
    binned: bool | None = None
    maxbins: float | None = None
    minstep: float | None = None
    nice: bool | None = None
    step: float | None = None

    model_config = ConfigDict(extra="forbid")
