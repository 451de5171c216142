from __future__ import annotations

import logging
from typing import Sequence

from . import loads
from .loads import ieee_div
from .models import (
    KJ_DAY_PER_KW,
    AirFlowInfo,
    EquipmentSummary,
    LoadBreakdown,
    LoadResult,
    OperatingConditions,
    ProductLoad,
    ProductLoadInput,
    ProductProfile,
    RoomGeometry,
    StorageInfo,
)
from .profiles import FacilityProfile
from .tables import ReferenceTables

logger = logging.getLogger(__name__)

KW_PER_TR = 3.517
BTU_PER_KW = 3412.0
AIR_DENSITY = 1.2  # kg/m³
AIR_CP = 1005.0  # J/kg·K
FT3_PER_M3 = 35.31


def sensible_heat_ratio(sensible: float, latent: float) -> float:
    total = sensible + latent
    if total == 0:
        return 1.0
    return sensible / total


def required_cfm(final_load_kw: float, delta_t: float) -> float:
    return ieee_div(final_load_kw * 3517, AIR_DENSITY * AIR_CP * delta_t)


def resolve_u_factors(profile: FacilityProfile, tables: ReferenceTables, geometry: RoomGeometry):
    if profile.u_factor is not None:
        return (profile.u_factor, profile.u_factor, profile.u_factor)
    mat = geometry.insulation_type
    return (
        tables.u_factor(mat, geometry.wall_thickness),
        tables.u_factor(mat, geometry.ceiling_thickness),
        tables.u_factor(mat, geometry.floor_thickness),
    )


def _product_load(profile: FacilityProfile, product: ProductProfile, inp: ProductLoadInput,
                  cond: OperatingConditions) -> ProductLoad:
    cp_above = inp.specific_heat_above if inp.specific_heat_above is not None else product.specific_heat_above
    if profile.product_stages == 1:
        return loads.product_load_single_stage(
            inp.mass, cp_above, inp.incoming_temp, inp.outgoing_temp, cond.pull_down_hours
        )
    cp_below = inp.specific_heat_below if inp.specific_heat_below is not None else product.specific_heat_below
    latent = inp.latent_heat if inp.latent_heat is not None else product.latent_heat
    return loads.product_load_three_stage(
        inp.mass, cp_above, cp_below, latent, product.freezing_point,
        inp.incoming_temp, inp.outgoing_temp, cond.pull_down_hours,
    )


def build_breakdown(
    profile: FacilityProfile,
    geometry: RoomGeometry,
    cond: OperatingConditions,
    inp: ProductLoadInput,
    product: ProductProfile,
    u_factors: Sequence[float],
) -> LoadBreakdown:
    parts = {}
    hours = cond.operating_hours
    if profile.uses("transmission"):
        parts["transmission"] = loads.transmission_load(
            tuple(u_factors),
            (geometry.wall_area, geometry.ceiling_area, geometry.floor_area),
            cond.temperature_difference,
            hours,
        )
    if profile.uses("product"):
        parts["product"] = _product_load(profile, product, inp, cond)
    if profile.uses("respiration"):
        parts["respiration"] = loads.respiration_load(inp.mass, profile.respiration_w_per_tonne)
    if profile.uses("air_change"):
        if profile.air_change_mode == "volume":
            parts["air_change"] = loads.air_change_volume_load(
                profile.air_change_rate, geometry.volume, profile.enthalpy_diff, hours
            )
        else:
            parts["air_change"] = loads.air_change_flow_load(profile.air_change_rate, profile.enthalpy_diff, hours)
    if profile.uses("miscellaneous"):
        parts["miscellaneous"] = loads.miscellaneous_load(
            inp.number_of_people, profile.person_heat_kw, inp.working_hours,
            inp.lighting_kw, inp.equipment_kw, hours,
        )
    if profile.uses("heaters"):
        parts["heaters"] = loads.heater_load(
            hours,
            peripheral=inp.peripheral_heaters,
            door=inp.door_heaters,
            tray=inp.tray_heaters,
            drain=inp.drain_heaters,
            steam_kw=cond.steam_load,
        )
    if profile.uses("fan_motor"):
        parts["fan_motor"] = loads.fan_motor_load(inp.fan_motor_rating, inp.number_of_fans, inp.fan_operating_hours)
    return LoadBreakdown(**parts)


def _storage(profile: FacilityProfile, tables: ReferenceTables, geometry: RoomGeometry,
             inp: ProductLoadInput, product: ProductProfile) -> StorageInfo:
    max_storage = geometry.volume * inp.storage_density
    if profile.storage_uses_efficiency:
        max_storage *= product.storage_efficiency
    storage_type, factor = None, None
    if profile.storage_fallback is not None:
        storage_type, factor = tables.storage_factor(inp.storage_type, profile.storage_fallback)
    return StorageInfo(
        max_storage_kg=max_storage,
        current_load_kg=inp.mass,
        utilization_pct=ieee_div(inp.mass, max_storage) * 100,
        storage_density=inp.storage_density,
        storage_factor=factor,
        storage_type=storage_type,
    )


def _air_flow(profile: FacilityProfile, geometry: RoomGeometry, inp: ProductLoadInput) -> AirFlowInfo:
    total = inp.air_flow_per_fan * inp.number_of_fans
    recommended = total
    if profile.recommended_ach is not None:
        recommended = max(total, geometry.volume * FT3_PER_M3 * profile.recommended_ach)
    return AirFlowInfo(cfm_per_fan=inp.air_flow_per_fan, number_of_fans=inp.number_of_fans,
                       recommended_cfm=recommended)


def _equipment(profile: FacilityProfile, inp: ProductLoadInput) -> EquipmentSummary:
    # potencias nominales, sin ciclo de trabajo
    heaters = (inp.peripheral_heaters, inp.door_heaters, inp.tray_heaters, inp.drain_heaters)
    return EquipmentSummary(
        fan_load_kw=inp.fan_motor_rating * inp.number_of_fans,
        heater_load_kw=sum(h.rated_kw for h in heaters),
        lighting_kw=inp.lighting_kw,
        people_kw=inp.number_of_people * profile.person_heat_kw,
        total_air_flow_cfm=inp.air_flow_per_fan * inp.number_of_fans,
    )


def compute(
    profile: FacilityProfile,
    tables: ReferenceTables,
    geometry: RoomGeometry,
    cond: OperatingConditions,
    inp: ProductLoadInput,
    defaults_applied: Sequence[str] = (),
) -> LoadResult:
    """
    Calcula el desglose de cargas, el factor de seguridad y las salidas
    derivadas (TR, BTU/h, kJ/día, SHR, CFM, almacenamiento).
    """
    product = tables.product(profile.id, inp.product_type)
    u_factors = resolve_u_factors(profile, tables, geometry)
    breakdown = build_breakdown(profile, geometry, cond, inp, product, u_factors)

    total = breakdown.total
    final = total * profile.safety_factor
    sensible = breakdown.sensible_total
    latent = breakdown.latent_total

    logger.debug(
        "%s: total=%.3f kW final=%.3f kW (FS %.2f)", profile.id, total, final, profile.safety_factor
    )
    return LoadResult(
        facility=profile.id,
        geometry=geometry,
        conditions=cond,
        product_input=inp,
        product=product,
        breakdown=breakdown,
        total_before_safety=total,
        safety_factor=profile.safety_factor,
        safety_factor_load=final - total,
        final_load=final,
        total_tr=final / KW_PER_TR,
        total_btu=final * BTU_PER_KW,
        daily_kj=final * KJ_DAY_PER_KW,
        daily_energy_kwh=final * 24,
        sensible_load=sensible,
        latent_load=latent,
        shr=sensible_heat_ratio(sensible, latent),
        required_cfm=required_cfm(final, cond.temperature_difference),
        sensible_heat_kj_day=breakdown.product.sensible * KJ_DAY_PER_KW,
        latent_heat_kj_day=breakdown.product.latent * KJ_DAY_PER_KW,
        storage=_storage(profile, tables, geometry, inp, product),
        air_flow=_air_flow(profile, geometry, inp),
        equipment=_equipment(profile, inp),
        u_factors=tuple(u_factors),
        defaults_applied=tuple(defaults_applied),
    )
