from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

KJ_DAY_PER_KW = 24 * 3.6


# ---------------------------- ENTRADAS ---------------------------- #


@dataclass(frozen=True)
class RoomGeometry:
    length: float
    width: float
    height: float
    door_width: float = 0.0
    door_height: float = 0.0
    insulation_type: str = "PUF"
    wall_thickness: float = 100.0  # mm
    ceiling_thickness: float = 100.0
    floor_thickness: float = 100.0
    internal_floor_thickness: float = 100.0
    door_openings: float = 0.0
    door_clear_opening: float = 0.0
    number_of_doors: float = 1.0
    number_of_floors: float = 1.0

    @property
    def wall_area(self) -> float:
        return 2 * (self.length * self.height) + 2 * (self.width * self.height)

    @property
    def ceiling_area(self) -> float:
        return self.length * self.width

    @property
    def floor_area(self) -> float:
        return self.length * self.width

    @property
    def door_area(self) -> float:
        return self.door_width * self.door_height

    @property
    def volume(self) -> float:
        return self.length * self.width * self.height


@dataclass(frozen=True)
class OperatingConditions:
    external_temp: float
    internal_temp: float
    operating_hours: float = 24.0
    pull_down_hours: float = 24.0  # horas de pull-down o de lote
    humidity: Optional[float] = None
    steam_load: float = 0.0  # kW humidificador

    @property
    def temperature_difference(self) -> float:
        return self.external_temp - self.internal_temp


@dataclass(frozen=True)
class ProductProfile:
    name: str
    specific_heat_above: float  # kJ/kg·K
    specific_heat_below: float
    latent_heat: float  # kJ/kg
    freezing_point: float  # °C
    density: float = 1000.0
    storage_efficiency: float = 1.0


@dataclass(frozen=True)
class HeaterSpec:
    quantity: float = 0.0
    capacity_kw: float = 0.0

    @property
    def rated_kw(self) -> float:
        return self.quantity * self.capacity_kw


@dataclass(frozen=True)
class ProductLoadInput:
    product_type: str
    mass: float  # kg por día o por lote
    incoming_temp: float
    outgoing_temp: float
    storage_type: Optional[str] = None
    storage_density: float = 0.0  # kg/m³
    specific_heat_above: Optional[float] = None  # override del perfil
    specific_heat_below: Optional[float] = None
    latent_heat: Optional[float] = None
    number_of_people: float = 0.0
    working_hours: float = 0.0
    lighting_kw: float = 0.0
    equipment_kw: float = 0.0
    peripheral_heaters: HeaterSpec = field(default_factory=HeaterSpec)
    door_heaters: HeaterSpec = field(default_factory=HeaterSpec)
    tray_heaters: HeaterSpec = field(default_factory=HeaterSpec)
    drain_heaters: HeaterSpec = field(default_factory=HeaterSpec)
    fan_motor_rating: float = 0.0  # kW
    number_of_fans: float = 0.0
    fan_operating_hours: float = 0.0
    air_flow_per_fan: float = 0.0  # CFM


@dataclass(frozen=True)
class ValidationIssue:
    level: str  # warning | error
    message: str


# ---------------------------- DESGLOSE ---------------------------- #


@dataclass(frozen=True)
class TransmissionLoad:
    walls: float = 0.0
    ceiling: float = 0.0
    floor: float = 0.0

    @property
    def total(self) -> float:
        return self.walls + self.ceiling + self.floor


@dataclass(frozen=True)
class ProductLoad:
    sensible_above: float = 0.0
    latent: float = 0.0
    sensible_below: float = 0.0

    @property
    def sensible(self) -> float:
        return self.sensible_above + self.sensible_below

    @property
    def total(self) -> float:
        return self.sensible_above + self.latent + self.sensible_below


@dataclass(frozen=True)
class MiscellaneousLoad:
    occupancy: float = 0.0
    lighting: float = 0.0
    equipment: float = 0.0

    @property
    def total(self) -> float:
        return self.occupancy + self.lighting + self.equipment


@dataclass(frozen=True)
class HeaterLoad:
    peripheral: float = 0.0
    door: float = 0.0
    tray: float = 0.0
    drain: float = 0.0
    steam: float = 0.0

    @property
    def electric(self) -> float:
        return self.peripheral + self.door + self.tray + self.drain

    @property
    def total(self) -> float:
        return self.peripheral + self.door + self.tray + self.drain + self.steam


@dataclass(frozen=True)
class LoadBreakdown:
    transmission: TransmissionLoad = field(default_factory=TransmissionLoad)
    product: ProductLoad = field(default_factory=ProductLoad)
    respiration: float = 0.0
    air_change: float = 0.0
    miscellaneous: MiscellaneousLoad = field(default_factory=MiscellaneousLoad)
    heaters: HeaterLoad = field(default_factory=HeaterLoad)
    fan_motor: float = 0.0

    def category_totals(self) -> Dict[str, float]:
        return {
            "transmission": self.transmission.total,
            "product": self.product.total,
            "respiration": self.respiration,
            "air_change": self.air_change,
            "miscellaneous": self.miscellaneous.total,
            "heaters": self.heaters.total,
            "fan_motor": self.fan_motor,
        }

    @property
    def total(self) -> float:
        return sum(self.category_totals().values())

    @property
    def latent_total(self) -> float:
        return self.product.latent + self.heaters.steam

    @property
    def sensible_total(self) -> float:
        # todo excepto calor latente del producto y vapor
        return (
            self.transmission.total
            + self.product.sensible
            + self.respiration
            + self.air_change
            + self.miscellaneous.total
            + self.heaters.electric
            + self.fan_motor
        )

    def kj_per_day(self) -> Dict[str, float]:
        return {k: v * KJ_DAY_PER_KW for k, v in self.category_totals().items()}

    def as_percentages(self) -> Dict[str, float]:
        tot = self.total or 1.0
        return {f"{k}_pct": v / tot for k, v in self.category_totals().items()}


# ---------------------------- RESULTADO ---------------------------- #


@dataclass(frozen=True)
class StorageInfo:
    max_storage_kg: float
    current_load_kg: float
    utilization_pct: float
    storage_density: float
    storage_factor: Optional[float] = None
    storage_type: Optional[str] = None

    @property
    def available_capacity_kg(self) -> float:
        return self.max_storage_kg - self.current_load_kg


@dataclass(frozen=True)
class AirFlowInfo:
    cfm_per_fan: float
    number_of_fans: float
    recommended_cfm: float

    @property
    def total_cfm(self) -> float:
        return self.cfm_per_fan * self.number_of_fans


@dataclass(frozen=True)
class EquipmentSummary:
    fan_load_kw: float
    heater_load_kw: float
    lighting_kw: float
    people_kw: float
    total_air_flow_cfm: float


@dataclass(frozen=True)
class LoadResult:
    facility: str
    geometry: RoomGeometry
    conditions: OperatingConditions
    product_input: ProductLoadInput
    product: ProductProfile
    breakdown: LoadBreakdown
    total_before_safety: float
    safety_factor: float
    safety_factor_load: float
    final_load: float
    total_tr: float
    total_btu: float
    daily_kj: float
    daily_energy_kwh: float
    sensible_load: float
    latent_load: float
    shr: float
    required_cfm: float
    sensible_heat_kj_day: float
    latent_heat_kj_day: float
    storage: StorageInfo
    air_flow: AirFlowInfo
    equipment: EquipmentSummary
    u_factors: Tuple[float, float, float] = (0.0, 0.0, 0.0)  # paredes, techo, piso
    load_kj_per_batch: Optional[float] = None
    defaults_applied: Tuple[str, ...] = ()

    @property
    def percentages(self) -> Dict[str, float]:
        return self.breakdown.as_percentages()

    @property
    def safety_percentage(self) -> float:
        return (self.safety_factor - 1.0) * 100.0
