"""
Cuarto frío: almacenamiento sobre el punto de congelación.

Producto en una sola etapa, respiración fija de 50 W/t y calentadores de
puerta/periféricos con la misma capacidad unitaria.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from . import engine
from .models import HeaterSpec, LoadResult, OperatingConditions, ProductLoadInput, RoomGeometry
from .parsing import FieldReader
from .profiles import COLD_ROOM, FacilityProfile, default_profile
from .tables import ReferenceTables, default_tables


def parse_inputs(
    room: Optional[Mapping[str, Any]],
    conditions: Optional[Mapping[str, Any]],
    product: Optional[Mapping[str, Any]],
    profile: FacilityProfile,
) -> Tuple[RoomGeometry, OperatingConditions, ProductLoadInput, Tuple[str, ...]]:
    d = profile.defaults
    r = FieldReader("room", room, d["room"], positive=("insulation_thickness",))
    c = FieldReader("conditions", conditions, d["conditions"], positive=("pull_down_time",))
    p = FieldReader("product", product, d["product"])

    thickness = r.number("insulation_thickness")
    geometry = RoomGeometry(
        length=r.number("length"),
        width=r.number("width"),
        height=r.number("height"),
        door_width=r.number("door_width"),
        door_height=r.number("door_height"),
        insulation_type=r.text("insulation_type"),
        wall_thickness=thickness,
        ceiling_thickness=thickness,
        floor_thickness=thickness,
        internal_floor_thickness=r.number("internal_floor_thickness"),
        door_openings=r.number("door_openings"),
        door_clear_opening=r.number("door_clear_opening"),
        number_of_doors=r.number("number_of_doors"),
    )
    cond = OperatingConditions(
        external_temp=c.number("external_temp"),
        internal_temp=c.number("internal_temp"),
        operating_hours=c.number("operating_hours"),
        pull_down_hours=c.number("pull_down_time"),
    )
    heater_kw = float(d["product"]["heater_capacity"])
    inp = ProductLoadInput(
        product_type=p.text("product_type"),
        storage_type=p.text("storage_type"),
        mass=p.number("daily_load"),
        incoming_temp=p.number("incoming_temp"),
        outgoing_temp=p.number("outgoing_temp"),
        specific_heat_above=p.number("specific_heat_above"),
        storage_density=r.number("storage_density"),
        number_of_people=p.number("number_of_people"),
        working_hours=p.number("working_hours"),
        lighting_kw=p.number("lighting_wattage") / 1000,
        equipment_kw=p.number("equipment_load") / 1000,
        peripheral_heaters=HeaterSpec(r.number("number_of_heaters"), heater_kw),
        door_heaters=HeaterSpec(geometry.number_of_doors, heater_kw),
        number_of_fans=1.0,
        air_flow_per_fan=r.number("air_flow_per_fan"),
    )
    return geometry, cond, inp, tuple(r.defaulted + c.defaulted + p.defaulted)


def compute(
    room: Optional[Mapping[str, Any]] = None,
    conditions: Optional[Mapping[str, Any]] = None,
    product: Optional[Mapping[str, Any]] = None,
    tables: ReferenceTables | None = None,
    profile: FacilityProfile | None = None,
) -> LoadResult:
    profile = profile or default_profile(COLD_ROOM)
    geometry, cond, inp, defaulted = parse_inputs(room, conditions, product, profile)
    return engine.compute(profile, tables or default_tables(), geometry, cond, inp, defaulted)
