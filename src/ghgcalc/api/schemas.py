"""Request and response models for the calculator endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Form values arrive as numbers, numeric strings or blanks.
Number = float | str | None
MonthlyNumber = list[Number] | dict[int, Number] | Number


class TransportRowEdit(BaseModel):
    """Vehicle count and annual distance entered for one combination row."""

    model_config = ConfigDict(extra="ignore")

    key: str = Field(description="Row key: '<factor key>-<emission standard>'")
    vehicle_count: Number = Field(default=None, description="Number of vehicles")
    distance: Number = Field(default=None, description="Distance per vehicle, km")


class TransportComputeRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    rows: list[TransportRowEdit] = Field(default_factory=list)


class TransportRowResult(BaseModel):
    key: str
    vehicle_type: str
    vehicle_type_name: str
    fuel_type: str
    fuel_type_name: str
    standard: str
    n2o_factor: float
    ch4_factor: float
    vehicle_count: int
    distance: float
    n2o_emission_mg: float
    ch4_emission_mg: float
    n2o_co2e_mg: float
    ch4_co2e_mg: float
    total_co2e_t: float
    vehicle_group_size: int
    fuel_group_size: int


class TransportComputeResponse(BaseModel):
    rows: list[TransportRowResult]
    total_co2e_t: float


class TailGasRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    urea_mass_kg: MonthlyNumber = Field(description="Urea additive consumed, kg (single or monthly)")
    purity_percent: MonthlyNumber = Field(default=None, description="Urea purity, % (99.6 if blank)")


class MonthlyEmission(BaseModel):
    month: int
    emission_t: float


class TailGasResponse(BaseModel):
    months: list[MonthlyEmission]
    emission_t: float


class SF6DeviceInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    capacity_kg: Number = None
    recovered_kg: Number = None


class SF6Request(BaseModel):
    model_config = ConfigDict(extra="ignore")

    repaired: list[SF6DeviceInput] = Field(default_factory=list)
    retired: list[SF6DeviceInput] = Field(default_factory=list)


class SF6Response(BaseModel):
    released_kg: float
    emission_t: float


class TransmissionRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    power_plant_grid_mwh: Number = None
    imported_mwh: Number = None
    exported_mwh: Number = None
    sold_mwh: Number = None


class TransmissionResponse(BaseModel):
    transmission_distribution_mwh: float
    emission_t: float


class ByproductInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    gas: str
    gwp: float | None = None
    conversion_factor: MonthlyNumber = None
    collection_percent: MonthlyNumber = None
    removal_percent: MonthlyNumber = None


class FeedGasRequest(BaseModel):
    """One feed gas; omitted rates keep the published defaults.

    Monthly fields accept a list in month order, a month mapping or a single
    value applied to every month.
    """

    model_config = ConfigDict(extra="ignore")

    gas: str
    gwp: float | None = Field(default=None, description="Required for gases without a published GWP")
    usage_t: MonthlyNumber = None
    residual_percent: MonthlyNumber = None
    utilization_percent: MonthlyNumber = None
    collection_percent: MonthlyNumber = None
    removal_percent: MonthlyNumber = None
    byproducts: list[ByproductInput] = Field(default_factory=list)


class FeedGasMonth(BaseModel):
    month: int
    leakage_t: float
    byproduct_t: float
    emission_t: float


class FeedGasResponse(BaseModel):
    gas: str
    gwp: float
    months: list[FeedGasMonth]
    emission_t: float


class SteelLineInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    process_type: str
    name: str = ""
    values: dict[str, MonthlyNumber] = Field(default_factory=dict)


class SteelElectricityRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    method: Literal[1, 2] = 1
    grid_factor: float | None = None
    lines: list[SteelLineInput] = Field(default_factory=list)


class SteelLineResult(BaseModel):
    process_type: str
    name: str
    consumed_mwh: float
    emission_t: float


class SteelElectricityResponse(BaseModel):
    method: int
    grid_factor: float
    lines: list[SteelLineResult]
    emission_t: float


class SummaryRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    values: dict[str, Number] = Field(default_factory=dict)


class SummaryRow(BaseModel):
    key: str
    label: str
    value: float
    kind: str | None = None
    share_percent: float | None = None
    is_total: bool = False


class SummaryResponse(BaseModel):
    industry: str
    name: str
    base_total: float
    grand_total: float
    rows: list[SummaryRow]


__all__ = [
    "ByproductInput",
    "FeedGasMonth",
    "FeedGasRequest",
    "FeedGasResponse",
    "MonthlyEmission",
    "SF6DeviceInput",
    "SF6Request",
    "SF6Response",
    "SteelElectricityRequest",
    "SteelElectricityResponse",
    "SteelLineInput",
    "SteelLineResult",
    "SummaryRequest",
    "SummaryResponse",
    "SummaryRow",
    "TailGasRequest",
    "TailGasResponse",
    "TransmissionRequest",
    "TransmissionResponse",
    "TransportComputeRequest",
    "TransportComputeResponse",
    "TransportRowEdit",
    "TransportRowResult",
]
