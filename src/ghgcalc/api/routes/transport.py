"""Land transportation endpoints: combination table and tail-gas purification."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ...transport import (
    CombinationTable,
    InvalidEdit,
    default_transport_config,
    monthly_tail_gas_emissions,
    tail_gas_emission,
)
from ..schemas import (
    MonthlyEmission,
    TailGasRequest,
    TailGasResponse,
    TransportComputeRequest,
    TransportComputeResponse,
    TransportRowResult,
)

router = APIRouter(prefix="/api/transport", tags=["transport"])


def _table() -> CombinationTable:
    config = default_transport_config()
    return CombinationTable(config.factors, config.labels)


def _results(table: CombinationTable) -> list[TransportRowResult]:
    results = []
    for item in table.annotated():
        payload = item.row.as_dict()
        payload["vehicle_group_size"] = item.span.vehicle_group_size
        payload["fuel_group_size"] = item.span.fuel_group_size
        results.append(TransportRowResult(**payload))
    return results


@router.get("/rows", response_model=TransportComputeResponse)
def list_rows() -> TransportComputeResponse:
    """Return the empty combination table with its row spans."""

    table = _table()
    return TransportComputeResponse(rows=_results(table), total_co2e_t=table.total_co2e_t)


@router.post("/compute", response_model=TransportComputeResponse)
def compute_rows(payload: TransportComputeRequest) -> TransportComputeResponse:
    """Apply vehicle counts and distances, then return every row and the total."""

    table = _table()
    for edit in payload.rows:
        try:
            if edit.vehicle_count is not None:
                table.edit(edit.key, "vehicle_count", edit.vehicle_count)
            if edit.distance is not None:
                table.edit(edit.key, "distance", edit.distance)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=f"Unknown row '{edit.key}'") from exc
        except InvalidEdit as exc:
            raise HTTPException(
                status_code=422,
                detail={"row": exc.row_key, "field": exc.field, "message": exc.message},
            ) from exc
    return TransportComputeResponse(rows=_results(table), total_co2e_t=table.total_co2e_t)


@router.post("/tail-gas", response_model=TailGasResponse)
def tail_gas(payload: TailGasRequest) -> TailGasResponse:
    """CO2 from urea-based tail-gas purification.

    A list or month mapping of urea amounts gives a monthly breakdown; a single
    amount gives only the total.
    """

    if not isinstance(payload.urea_mass_kg, (list, dict)):
        emission = tail_gas_emission(payload.urea_mass_kg, payload.purity_percent)
        return TailGasResponse(months=[], emission_t=emission)

    frame = monthly_tail_gas_emissions(payload.urea_mass_kg, payload.purity_percent)
    months = [
        MonthlyEmission(month=int(month), emission_t=float(value))
        for month, value in frame["emission_t"].items()
    ]
    return TailGasResponse(months=months, emission_t=float(frame["emission_t"].sum()))


__all__ = ["router"]
