import math

from cold_load import freezer


def test_congelador_valores_por_defecto():
    res = freezer.compute()
    assert math.isclose(res.geometry.volume, 98.0)
    assert res.conditions.temperature_difference == 80

    b = res.breakdown
    assert math.isclose(b.transmission.walls, 1.8172)
    assert math.isclose(b.transmission.total, 3.1388)
    assert math.isclose(b.product.sensible_above, 3000 * 3.74 * 25.8 / 36)
    assert math.isclose(b.product.latent, 3000 * 233 / 36)
    assert math.isclose(b.product.sensible_below, 3000 * 1.96 * 14.2 / 36)
    assert b.respiration == 0.0
    assert math.isclose(b.air_change, 9.4 * 0.1203 * 24 / 24 / 1000)
    assert math.isclose(b.miscellaneous.occupancy, 2 * 0.407 * 16 / 24)
    assert math.isclose(b.miscellaneous.lighting, 0.15)
    assert math.isclose(b.miscellaneous.equipment, 0.3)
    assert math.isclose(b.heaters.door, 0.243)
    assert math.isclose(b.heaters.tray, 2.0)
    assert b.heaters.peripheral == 0.0
    assert math.isclose(b.heaters.total, 2.243)
    assert math.isclose(b.fan_motor, 2.22)

    assert math.isclose(res.final_load, res.total_before_safety * 1.10)
    assert math.isclose(res.total_tr, res.final_load / 3.517)


def test_congelador_shr_y_cfm():
    res = freezer.compute()
    b = res.breakdown
    assert res.latent_load == b.product.latent
    assert math.isclose(res.sensible_load + res.latent_load, res.total_before_safety)
    assert math.isclose(res.shr, res.sensible_load / res.total_before_safety)
    assert 0 < res.shr < 1
    assert math.isclose(res.required_cfm, res.final_load * 3517 / (1.2 * 1005 * 80))
    assert math.isclose(res.sensible_heat_kj_day, b.product.sensible * 86.4)
    assert math.isclose(res.latent_heat_kj_day, b.product.latent * 86.4)


def test_congelador_almacenamiento_y_equipos():
    res = freezer.compute()
    assert math.isclose(res.storage.max_storage_kg, 980.0)
    assert res.storage.storage_type == "Boxed"
    assert res.equipment.total_air_flow_cfm == 12000
    assert math.isclose(res.equipment.fan_load_kw, 2.22)
    assert math.isclose(res.equipment.heater_load_kw, 2.243)


def test_congelador_vapor_es_latente():
    res = freezer.compute(conditions={"steam_humidifier_load": "2", "operating_hours": "12"})
    assert math.isclose(res.breakdown.heaters.steam, 1.0)
    assert math.isclose(res.latent_load, res.breakdown.product.latent + 1.0)


def test_congelador_propiedades_personalizadas():
    res = freezer.compute(product={"custom_cp_above": "4.0", "custom_cp_below": "2.0", "custom_latent_heat": "300"})
    b = res.breakdown
    assert math.isclose(b.product.sensible_above, 3000 * 4.0 * 25.8 / 36)
    assert math.isclose(b.product.latent, 3000 * 300 / 36)
    assert math.isclose(b.product.sensible_below, 3000 * 2.0 * 14.2 / 36)


def test_congelador_otro_producto():
    res = freezer.compute(product={"product_type": "chicken", "incoming_temp": "4", "outgoing_temp": "-18"})
    b = res.breakdown
    assert res.product.freezing_point == -2.8
    assert math.isclose(b.product.sensible_above, 3000 * 3.32 * 6.8 / 36)
    assert math.isclose(b.product.sensible_below, 3000 * 1.77 * 15.2 / 36)


def test_congelador_tiempo_de_pulldown_cero_usa_default():
    res = freezer.compute(conditions={"pull_down_time": "0"})
    assert res.conditions.pull_down_hours == 10
    assert "conditions.pull_down_time" in res.defaults_applied
