"""Electric grid endpoints: SF6 equipment and transmission losses."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from ...electric import (
    SF6Device,
    TransmissionInputs,
    sf6_emission,
    validate_inputs,
)
from ...electric.sf6 import released_mass
from ...utils.numbers import safe_float
from ..schemas import (
    SF6DeviceInput,
    SF6Request,
    SF6Response,
    TransmissionRequest,
    TransmissionResponse,
)

router = APIRouter(prefix="/api/electric", tags=["electric"])


def _devices(items: list[SF6DeviceInput]) -> list[SF6Device]:
    return [SF6Device(capacity_kg=item.capacity_kg, recovered_kg=item.recovered_kg) for item in items]


@router.post("/sf6", response_model=SF6Response)
def sf6(payload: SF6Request) -> SF6Response:
    """SF6 released by repaired and retired equipment."""

    repaired = _devices(payload.repaired)
    retired = _devices(payload.retired)
    return SF6Response(
        released_kg=released_mass(repaired) + released_mass(retired),
        emission_t=sf6_emission(repaired, retired),
    )


@router.post("/transmission", response_model=TransmissionResponse)
def transmission(payload: TransmissionRequest) -> TransmissionResponse:
    """Emission of transmission and distribution losses; bad fields give 422."""

    values = payload.model_dump()
    errors = validate_inputs(values)
    if errors:
        raise HTTPException(status_code=422, detail=errors)
    inputs = TransmissionInputs(**{name: safe_float(value) for name, value in values.items()})
    return TransmissionResponse(
        transmission_distribution_mwh=inputs.loss_mwh,
        emission_t=inputs.emission,
    )


__all__ = ["router"]
