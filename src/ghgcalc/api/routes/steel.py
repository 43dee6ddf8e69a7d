"""Steel endpoint: electricity consumed by production processes."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ...steel import SteelElectricity
from ..schemas import SteelElectricityRequest, SteelElectricityResponse, SteelLineResult

router = APIRouter(prefix="/api/steel", tags=["steel"])


@router.post("/electricity", response_model=SteelElectricityResponse)
def electricity(payload: SteelElectricityRequest) -> SteelElectricityResponse:
    """Per-process electricity consumption and emission for the year."""

    sheet = SteelElectricity(payload.method, payload.grid_factor)
    results = []
    for item in payload.lines:
        line = sheet.add_line(item.process_type, item.name)
        try:
            for indicator, values in item.values.items():
                sheet.fill(line.id, indicator, values)
        except ValueError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        frame = sheet.line_frame(line)
        results.append(
            SteelLineResult(
                process_type=line.process_type,
                name=line.name,
                consumed_mwh=float(frame["consumed_mwh"].sum()),
                emission_t=float(frame["emission_t"].sum()),
            )
        )
    return SteelElectricityResponse(
        method=sheet.method,
        grid_factor=sheet.grid_factor,
        lines=results,
        emission_t=sheet.total_emission,
    )


__all__ = ["router"]
