"""Industry summary endpoint."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ...summary import get_industry, summarize, summary_rows
from ..schemas import SummaryRequest, SummaryResponse, SummaryRow

router = APIRouter(prefix="/api/summary", tags=["summary"])


@router.post("/{industry}", response_model=SummaryResponse)
def summary(industry: str, payload: SummaryRequest) -> SummaryResponse:
    """Summary table of one industry from its category totals (tCO2e)."""

    try:
        config = get_industry(industry)
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Industry not found") from exc

    totals = summarize(payload.values, config)
    rows = [SummaryRow(**row) for row in summary_rows(payload.values, config)]
    return SummaryResponse(
        industry=config.key,
        name=config.name,
        base_total=totals.base_total,
        grand_total=totals.grand_total,
        rows=rows,
    )


__all__ = ["router"]
