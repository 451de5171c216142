"""
Cargas parciales en kW. Funciones puras sobre números ya parseados.
"""

from __future__ import annotations

import math
from typing import Tuple

from .models import HeaterLoad, HeaterSpec, MiscellaneousLoad, ProductLoad, TransmissionLoad


def ieee_div(num: float, den: float) -> float:
    """División sin excepción: ±inf o nan cuando el divisor es cero."""
    if den == 0:
        if num == 0 or math.isnan(num):
            return math.nan
        return math.copysign(math.inf, num) * math.copysign(1.0, den)
    return num / den


def duty_cycle(rated_kw: float, hours: float) -> float:
    return rated_kw * (hours / 24.0)


def surface_load(u_factor: float, area: float, delta_t: float, hours: float) -> float:
    # Q = U × A × ΔT × h / 24 / 1000; sin recorte de ΔT negativo
    return (u_factor * area * delta_t * hours) / 24 / 1000


def transmission_load(
    u_factors: Tuple[float, float, float],
    areas: Tuple[float, float, float],
    delta_t: float,
    hours: float,
) -> TransmissionLoad:
    u_wall, u_ceiling, u_floor = u_factors
    a_wall, a_ceiling, a_floor = areas
    return TransmissionLoad(
        walls=surface_load(u_wall, a_wall, delta_t, hours),
        ceiling=surface_load(u_ceiling, a_ceiling, delta_t, hours),
        floor=surface_load(u_floor, a_floor, delta_t, hours),
    )


def product_load_single_stage(mass: float, cp: float, t_in: float, t_out: float, hours: float) -> ProductLoad:
    """Enfriamiento sin cambio de fase (cuarto frío). Con 0 h el resultado no es finito."""
    return ProductLoad(sensible_above=ieee_div(mass * cp * (t_in - t_out), hours * 3.6))


def product_load_three_stage(
    mass: float,
    cp_above: float,
    cp_below: float,
    latent_heat: float,
    freezing_point: float,
    t_in: float,
    t_out: float,
    hours: float,
) -> ProductLoad:
    """
    Enfriamiento hasta el punto de congelación, congelación y
    subenfriamiento. Las tres etapas no se solapan en temperatura.

    El subenfriamiento siempre parte del punto de congelación, también
    cuando el producto ya entra congelado.
    """
    sensible_above = 0.0
    latent = 0.0
    sensible_below = 0.0
    divisor = hours * 3.6

    if t_in > freezing_point:
        sensible_above = ieee_div(mass * cp_above * (t_in - freezing_point), divisor)
        if t_out < freezing_point:
            latent = ieee_div(mass * latent_heat, divisor)
    if t_out < freezing_point:
        sensible_below = ieee_div(mass * cp_below * (freezing_point - t_out), divisor)

    return ProductLoad(sensible_above=sensible_above, latent=latent, sensible_below=sensible_below)


def respiration_load(mass_kg: float, rate_w_per_tonne: float) -> float:
    return (mass_kg / 1000.0) * rate_w_per_tonne / 1000.0


def air_change_flow_load(flow_rate: float, enthalpy_diff: float, hours: float) -> float:
    return (flow_rate * enthalpy_diff * hours) / 24 / 1000


def air_change_volume_load(changes_per_hour: float, volume: float, enthalpy_diff: float, hours: float) -> float:
    return (changes_per_hour * volume * enthalpy_diff * hours) / 1000


def miscellaneous_load(
    people: float,
    person_kw: float,
    working_hours: float,
    lighting_kw: float,
    equipment_kw: float,
    operating_hours: float,
) -> MiscellaneousLoad:
    return MiscellaneousLoad(
        occupancy=duty_cycle(people * person_kw, working_hours),
        lighting=duty_cycle(lighting_kw, operating_hours),
        equipment=duty_cycle(equipment_kw, operating_hours),
    )


def heater_load(
    hours: float,
    peripheral: HeaterSpec = HeaterSpec(),
    door: HeaterSpec = HeaterSpec(),
    tray: HeaterSpec = HeaterSpec(),
    drain: HeaterSpec = HeaterSpec(),
    steam_kw: float = 0.0,
) -> HeaterLoad:
    return HeaterLoad(
        peripheral=duty_cycle(peripheral.rated_kw, hours),
        door=duty_cycle(door.rated_kw, hours),
        tray=duty_cycle(tray.rated_kw, hours),
        drain=duty_cycle(drain.rated_kw, hours),
        steam=duty_cycle(steam_kw, hours),
    )


def fan_motor_load(rating_kw: float, number_of_fans: float, hours: float) -> float:
    return duty_cycle(rating_kw * number_of_fans, hours)
