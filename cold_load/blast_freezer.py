"""
Túnel de congelación (blast freezer): congelación por lotes.

La carga de producto se reparte en las horas de lote; el U de cada
superficie sale del material y espesor de aislamiento.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Mapping, Optional, Tuple

from . import engine
from .models import HeaterSpec, LoadResult, OperatingConditions, ProductLoadInput, RoomGeometry
from .parsing import FieldReader
from .profiles import BLAST_FREEZER, FacilityProfile, default_profile
from .tables import ReferenceTables, default_tables


def parse_inputs(
    room: Optional[Mapping[str, Any]],
    conditions: Optional[Mapping[str, Any]],
    product: Optional[Mapping[str, Any]],
    profile: FacilityProfile,
) -> Tuple[RoomGeometry, OperatingConditions, ProductLoadInput, Tuple[str, ...]]:
    d = profile.defaults
    r = FieldReader(
        "room", room, d["room"], positive=("wall_thickness", "ceiling_thickness", "floor_thickness")
    )
    c = FieldReader("conditions", conditions, d["conditions"], positive=("batch_hours",))
    p = FieldReader("product", product, d["product"])

    door_w = r.number("door_width")
    door_h = r.number("door_height")
    geometry = RoomGeometry(
        length=r.number("length"),
        width=r.number("breadth"),
        height=r.number("height"),
        door_width=door_w,
        door_height=door_h,
        door_clear_opening=door_w * door_h,
        insulation_type=r.text("insulation_type"),
        wall_thickness=r.number("wall_thickness"),
        ceiling_thickness=r.number("ceiling_thickness"),
        floor_thickness=r.number("floor_thickness"),
        internal_floor_thickness=r.number("internal_floor_thickness"),
    )
    cond = OperatingConditions(
        external_temp=c.number("ambient_temp"),
        internal_temp=c.number("room_temp"),
        operating_hours=c.number("operating_hours"),
        pull_down_hours=c.number("batch_hours"),
    )

    def heater(name: str) -> HeaterSpec:
        return HeaterSpec(p.number(f"{name}_heaters_qty"), p.number(f"{name}_heaters_capacity"))

    fan_kw = p.number("fan_motor_rating")
    inp = ProductLoadInput(
        product_type=p.text("product_type"),
        mass=p.number("capacity_required"),
        incoming_temp=p.number("incoming_temp"),
        outgoing_temp=p.number("outgoing_temp"),
        storage_density=p.number("storage_capacity"),
        number_of_people=p.number("number_of_people"),
        working_hours=p.number("working_hours"),
        lighting_kw=p.number("light_load"),
        # el motor del ventilador se contabiliza como equipo
        equipment_kw=fan_kw,
        peripheral_heaters=heater("peripheral"),
        door_heaters=heater("door"),
        tray_heaters=heater("tray"),
        drain_heaters=heater("drain"),
        fan_motor_rating=fan_kw,
        number_of_fans=p.number("number_of_fans"),
        air_flow_per_fan=p.number("air_flow_per_fan"),
    )
    return geometry, cond, inp, tuple(r.defaulted + c.defaulted + p.defaulted)


def compute(
    room: Optional[Mapping[str, Any]] = None,
    conditions: Optional[Mapping[str, Any]] = None,
    product: Optional[Mapping[str, Any]] = None,
    tables: ReferenceTables | None = None,
    profile: FacilityProfile | None = None,
) -> LoadResult:
    profile = profile or default_profile(BLAST_FREEZER)
    geometry, cond, inp, defaulted = parse_inputs(room, conditions, product, profile)
    res = engine.compute(profile, tables or default_tables(), geometry, cond, inp, defaulted)
    return replace(res, load_kj_per_batch=res.total_before_safety * cond.pull_down_hours * 3.6)
