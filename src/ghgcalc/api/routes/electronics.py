"""Electronics manufacturing endpoint: feed-gas leakage and by-products."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ...common.monthly import month_values
from ...electronics import FeedGas
from ...electronics.process import BYPRODUCT_INDICATORS, FEED_GAS_INDICATORS
from ..schemas import FeedGasMonth, FeedGasRequest, FeedGasResponse

router = APIRouter(prefix="/api/electronics", tags=["electronics"])


def _build(payload: FeedGasRequest) -> FeedGas:
    gas = FeedGas.create(payload.gas, payload.gwp)
    for name in FEED_GAS_INDICATORS:
        value = getattr(payload, name)
        if value is not None:
            gas.values[name] = month_values(value)
    for item in payload.byproducts:
        byproduct = gas.new_byproduct(item.gas, item.gwp)
        for name in BYPRODUCT_INDICATORS:
            value = getattr(item, name)
            if value is not None:
                byproduct.values[name] = month_values(value)
        gas.byproducts.append(byproduct)
    return gas


@router.post("/feed-gas", response_model=FeedGasResponse)
def feed_gas(payload: FeedGasRequest) -> FeedGasResponse:
    """Monthly leakage and by-product emissions of one feed gas."""

    try:
        gas = _build(payload)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    frame = gas.frame()
    months = [
        FeedGasMonth(
            month=int(month),
            leakage_t=float(row["leakage_t"]),
            byproduct_t=float(row["byproduct_t"]),
            emission_t=float(row["emission_t"]),
        )
        for month, row in frame.iterrows()
    ]
    return FeedGasResponse(
        gas=gas.gas,
        gwp=gas.gwp,
        months=months,
        emission_t=float(frame["emission_t"].sum()),
    )


__all__ = ["router"]
