import math

import pytest

from cold_load.tables import ReferenceTables, lookup


@pytest.fixture(scope="module")
def tables():
    return ReferenceTables()


def test_lookup_exacto_insensible_y_fallback():
    tbl = {"Boxed": 1, "Bulk": 2}
    assert lookup(tbl, "Bulk", "Boxed") == ("Bulk", 2)
    assert lookup(tbl, "bulk", "Boxed") == ("Bulk", 2)
    assert lookup(tbl, "Hanging", "Boxed") == ("Boxed", 1)
    assert lookup(tbl, None, "Boxed") == ("Boxed", 1)


def test_producto_congelador(tables):
    p = tables.product("freezer", "FRUIT PULP")
    assert p.name == "fruit pulp"
    assert p.specific_heat_above == 3.74
    assert p.specific_heat_below == 1.96
    assert p.latent_heat == 233
    assert p.freezing_point == -0.8


def test_producto_desconocido_usa_fallback(tables):
    assert tables.product("cold_room", "DRAGON FRUIT").name == "BANANA"
    assert tables.product("blast_freezer", "").name == "General Food Items"


def test_cuarto_frio_solo_guarda_punto_de_congelacion(tables):
    p = tables.product("cold_room", "cheese")
    assert p.name == "CHEESE"
    assert p.freezing_point == -8.3
    assert p.specific_heat_above == 0.0


def test_tabla_de_productos_inexistente(tables):
    with pytest.raises(ValueError):
        tables.product("ice_rink", "fish")


def test_factor_de_almacenamiento(tables):
    assert tables.storage_factor("Boxed") == ("Boxed", 0.85)
    assert tables.storage_factor("Shelved") == ("Palletized", 0.75)
    assert tables.storage_factor(None, "Boxed") == ("Boxed", 0.85)


def test_u_factor(tables):
    assert math.isclose(tables.u_factor("PUF", 150), 0.023 / 0.150)
    assert math.isclose(tables.u_factor("eps", 100), 0.037 / 0.100)
    # material desconocido => PUF; espesor no positivo => espesor por defecto
    assert math.isclose(tables.u_factor("CORK", 100), 0.23)
    assert math.isclose(tables.u_factor("PUF", 0), tables.u_factor("PUF", 150))


def test_u_factor_decrece_con_espesor(tables):
    assert tables.u_factor("PIR", 200) < tables.u_factor("PIR", 100) < tables.u_factor("PIR", 50)


def test_tabla_u_factor(tables):
    df = tables.u_factor_table()
    assert df.index.name == "thickness_mm"
    assert list(df.columns) == ["PUF", "PIR", "EPS", "XPS", "MINERAL WOOL"]
    assert len(df) == 10
    assert math.isclose(df.loc[100, "PUF"], 0.23)
    custom = tables.u_factor_table([80])
    assert math.isclose(custom.loc[80, "XPS"], 0.030 / 0.080)
