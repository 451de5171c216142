"""
Congelador: almacenamiento bajo el punto de congelación con producto en
tres etapas, motores de ventilador y humidificador de vapor.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from . import engine
from .models import HeaterSpec, LoadResult, OperatingConditions, ProductLoadInput, RoomGeometry
from .parsing import FieldReader
from .profiles import FREEZER, FacilityProfile, default_profile
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
        number_of_floors=r.number("number_of_floors"),
    )
    cond = OperatingConditions(
        external_temp=c.number("external_temp"),
        internal_temp=c.number("internal_temp"),
        operating_hours=c.number("operating_hours"),
        pull_down_hours=c.number("pull_down_time"),
        humidity=c.number("room_humidity"),
        steam_load=c.number("steam_humidifier_load"),
    )
    # un calentador de puerta y uno de bandeja; la cifra del formulario es la capacidad
    inp = ProductLoadInput(
        product_type=p.text("product_type"),
        storage_type=p.text("storage_type"),
        mass=p.number("daily_load"),
        incoming_temp=p.number("incoming_temp"),
        outgoing_temp=p.number("outgoing_temp"),
        specific_heat_above=p.optional_number("custom_cp_above"),
        specific_heat_below=p.optional_number("custom_cp_below"),
        latent_heat=p.optional_number("custom_latent_heat"),
        storage_density=r.number("storage_density"),
        number_of_people=p.number("number_of_people"),
        working_hours=p.number("working_hours"),
        lighting_kw=p.number("lighting_wattage") / 1000,
        equipment_kw=p.number("equipment_load") / 1000,
        peripheral_heaters=HeaterSpec(1.0, p.number("peripheral_heaters_load")),
        door_heaters=HeaterSpec(1.0, p.number("door_heaters_load")),
        tray_heaters=HeaterSpec(1.0, p.number("tray_heaters_load")),
        fan_motor_rating=p.number("fan_motor_rating"),
        number_of_fans=p.number("number_of_fans"),
        fan_operating_hours=p.number("fan_operating_hours"),
        air_flow_per_fan=p.number("fan_air_flow_rate"),
    )
    return geometry, cond, inp, tuple(r.defaulted + c.defaulted + p.defaulted)


def compute(
    room: Optional[Mapping[str, Any]] = None,
    conditions: Optional[Mapping[str, Any]] = None,
    product: Optional[Mapping[str, Any]] = None,
    tables: ReferenceTables | None = None,
    profile: FacilityProfile | None = None,
) -> LoadResult:
    profile = profile or default_profile(FREEZER)
    geometry, cond, inp, defaulted = parse_inputs(room, conditions, product, profile)
    return engine.compute(profile, tables or default_tables(), geometry, cond, inp, defaulted)
