import math
from dataclasses import replace

import pytest

from cold_load import blast_freezer, cold_room, engine, freezer
from cold_load.profiles import COLD_ROOM, default_profile
from cold_load.tables import default_tables

CASES = [
    (cold_room.compute, {}, {}, {}),
    (cold_room.compute, {"length": "12", "width": "9"}, {"internal_temp": "8"}, {"daily_load": "900"}),
    (freezer.compute, {}, {}, {}),
    (freezer.compute, {}, {"steam_humidifier_load": "1.5"}, {"product_type": "fish", "incoming_temp": "-10"}),
    (blast_freezer.compute, {}, {}, {}),
    (blast_freezer.compute, {"insulation_type": "PIR"}, {"batch_hours": "4"}, {"incoming_temp": "20"}),
]


@pytest.mark.parametrize("fn,room,cond,prod", CASES)
def test_totales_son_suma_de_componentes(fn, room, cond, prod):
    res = fn(room, cond, prod)
    b = res.breakdown
    assert b.transmission.total == b.transmission.walls + b.transmission.ceiling + b.transmission.floor
    assert b.product.total == b.product.sensible_above + b.product.latent + b.product.sensible_below
    m = b.miscellaneous
    assert m.total == m.occupancy + m.lighting + m.equipment
    h = b.heaters
    assert h.total == h.peripheral + h.door + h.tray + h.drain + h.steam
    assert res.total_before_safety == sum(b.category_totals().values())


@pytest.mark.parametrize("fn,room,cond,prod", CASES)
def test_factor_de_seguridad_y_conversiones(fn, room, cond, prod):
    res = fn(room, cond, prod)
    assert math.isclose(res.final_load, res.total_before_safety * res.safety_factor, rel_tol=1e-9)
    assert math.isclose(res.safety_factor_load, res.total_before_safety * (res.safety_factor - 1), rel_tol=1e-9)
    assert math.isclose(res.total_tr * 3.517, res.final_load, rel_tol=1e-9)
    assert math.isclose(res.total_btu / 3412, res.final_load, rel_tol=1e-9)
    assert math.isclose(res.daily_kj, res.final_load * 86.4, rel_tol=1e-9)
    assert math.isclose(sum(res.percentages.values()), 1.0)


def test_demo_reproducible():
    a = freezer.compute({}, {}, {})
    b = freezer.compute(None, None, None)
    assert a == b
    assert "room.length" in a.defaults_applied


def test_shr_sin_carga():
    assert engine.sensible_heat_ratio(0.0, 0.0) == 1.0
    assert engine.sensible_heat_ratio(3.0, 1.0) == 0.75


def test_cfm_con_dt_cero_no_es_finito():
    assert engine.required_cfm(10.0, 0.0) == math.inf
    assert engine.required_cfm(-10.0, 0.0) == -math.inf
    assert math.isnan(engine.required_cfm(0.0, 0.0))
    assert engine.required_cfm(10.0, -5.0) < 0


def test_dt_cero_en_calculo_completo():
    res = freezer.compute(conditions={"external_temp": "-35"})
    assert res.conditions.temperature_difference == 0
    assert res.breakdown.transmission.total == 0.0
    assert res.required_cfm == math.inf


def test_ieee_div():
    assert engine.ieee_div(6.0, 3.0) == 2.0
    assert engine.ieee_div(1.0, 0.0) == math.inf
    assert math.isnan(engine.ieee_div(0.0, 0.0))


def test_utilizacion_sin_volumen():
    res = cold_room.compute(room={"length": "0"})
    assert res.geometry.volume == 0.0
    assert res.storage.max_storage_kg == 0.0
    assert res.storage.utilization_pct == math.inf


def test_horas_de_enfriamiento_nulas_en_registros():
    geometry, cond, inp, _ = cold_room.parse_inputs({}, {}, {}, default_profile(COLD_ROOM))
    cond = replace(cond, pull_down_hours=0.0)
    res = engine.compute(default_profile(COLD_ROOM), default_tables(), geometry, cond, inp)
    assert res.breakdown.product.total == math.inf
    assert res.final_load == math.inf
    assert not math.isfinite(res.required_cfm)
