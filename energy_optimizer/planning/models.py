from __future__ import annotations

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, confloat, conint

from ..resources import Device, EnergySource, sources_from_capacities


class _RequestModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class SolverSettings(_RequestModel):
    convergence_eps: confloat(gt=0) = Field(
        1e-6, alias="convergenceEps", description="Bracket width (hours) at which the bisection stops."
    )
    feasibility_slack: confloat(ge=0) = Field(
        1e-12, alias="feasibilitySlack", description="Absolute slack in the solver's feasibility test."
    )
    priority_tolerance_kwh: confloat(ge=0) = Field(
        1e-9,
        alias="priorityToleranceKWh",
        description="Shortfall (kWh) below which the priority minimum still counts as met.",
    )
    gain_decimals: conint(ge=0, le=12) = Field(
        2, alias="gainDecimals", description="Decimal places kept in the reported efficiency gain."
    )


class DeviceSpec(_RequestModel):
    id: str = Field(..., min_length=1, description="Device identifier, unique within the request.")
    name: str = Field("", description="Display name.")
    power_draw_kw: confloat(ge=0, allow_inf_nan=False) = Field(
        ..., alias="powerDrawKW", description="Steady-state draw (kW)."
    )
    is_active: bool = Field(True, alias="isActive", description="Only active devices are allocated.")
    activation_order: Optional[int] = Field(
        None, alias="activationOrder", description="Caller bookkeeping; ignored by the allocators."
    )

    def to_device(self) -> Device:
        return Device(
            id=self.id,
            name=self.name,
            power_draw_kw=float(self.power_draw_kw),
            is_active=self.is_active,
            activation_order=self.activation_order,
        )


class _BaseRequest(_RequestModel):
    devices: List[DeviceSpec] = Field(default_factory=list, description="Device fleet, active or not.")
    settings: SolverSettings = Field(default_factory=SolverSettings)

    def to_devices(self) -> List[Device]:
        return [d.to_device() for d in self.devices]


class SimpleRequest(_BaseRequest):
    """One undifferentiated battery bank."""
    mode: Literal["simple"] = "simple"
    battery_capacity_kwh: confloat(allow_inf_nan=False) = Field(
        0.0, alias="batteryCapacityKWh", description="Total bank capacity (kWh)."
    )


class AdvancedRequest(_BaseRequest):
    """Independent batteries; baseline only, or baseline plus pooled optimum."""
    mode: Literal["advanced"] = "advanced"
    batteries: List[confloat(allow_inf_nan=False)] = Field(
        default_factory=list, description="Capacity of each battery (kWh)."
    )
    optimized_mode: bool = Field(
        False, alias="optimizedMode", description="Also run the pooled allocator and report the gain."
    )

    def to_sources(self) -> List[EnergySource]:
        return sources_from_capacities(self.batteries)


class PriorityRequest(_BaseRequest):
    """Guaranteed minimum runtime with the surplus weighted by priority."""
    mode: Literal["priority"] = "priority"
    min_desired_runtime_hours: confloat(allow_inf_nan=False) = Field(
        0.0, alias="minDesiredRuntimeHours", description="Runtime (h) every device should reach."
    )
    priority_order: Optional[List[str]] = Field(
        None, alias="priorityOrder", description="Device ids, highest priority first."
    )
    batteries: List[confloat(allow_inf_nan=False)] = Field(
        default_factory=list, description="Capacity of each battery (kWh); wins over batteryCapacityKWh."
    )
    battery_capacity_kwh: confloat(allow_inf_nan=False) = Field(
        0.0, alias="batteryCapacityKWh", description="Total bank capacity (kWh) when no batteries are listed."
    )

    @property
    def total_energy_kwh(self) -> float:
        if self.batteries:
            return float(sum(s.capacity_kwh for s in sources_from_capacities(self.batteries)))
        return max(0.0, float(self.battery_capacity_kwh))


AllocationRequest = Annotated[
    Union[SimpleRequest, AdvancedRequest, PriorityRequest],
    Field(discriminator="mode"),
]

_REQUEST_ADAPTER: TypeAdapter = TypeAdapter(AllocationRequest)


def parse_request(raw: Dict[str, Any]) -> Union[SimpleRequest, AdvancedRequest, PriorityRequest]:
    """Validate a raw request body; raises ``pydantic.ValidationError`` when malformed."""
    return _REQUEST_ADAPTER.validate_python(raw)
