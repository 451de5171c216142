import math

from cold_load.parsing import FieldReader, parse_number, parse_text


def test_parse_number_valores_validos():
    assert parse_number("3.5", 1.0) == 3.5
    assert parse_number("3,5", 1.0) == 3.5
    assert parse_number(" 7 ", 1.0) == 7.0
    assert parse_number(12, 1.0) == 12.0
    assert parse_number(-35, 1.0) == -35.0


def test_parse_number_cero_finito_no_se_reemplaza():
    assert parse_number("0", 3.05) == 0.0
    assert parse_number(0, 3.05) == 0.0


def test_parse_number_usa_default():
    for raw in (None, "", "   ", "abc", "nan", "inf", "-inf", float("nan"), True, [1], 10 ** 400):
        assert parse_number(raw, 3.05) == 3.05, raw


def test_parse_text():
    assert parse_text(None, "PUF") == "PUF"
    assert parse_text("  ", "PUF") == "PUF"
    assert parse_text(" EPS ", "PUF") == "EPS"


def test_field_reader_marca_defaults():
    r = FieldReader("room", {"length": "4", "height": ""}, {"length": 3.05, "height": 3.0, "width": 4.5})
    assert r.number("length") == 4.0
    assert r.number("height") == 3.0
    assert r.number("width") == 4.5
    assert r.defaulted == ["room.height", "room.width"]


def test_field_reader_valor_igual_al_default_no_se_marca():
    r = FieldReader("conditions", {"external_temp": "45"}, {"external_temp": 45})
    assert r.number("external_temp") == 45.0
    assert r.defaulted == []


def test_field_reader_campos_positivos():
    r = FieldReader("conditions", {"pull_down_time": "0", "operating_hours": "0"},
                    {"pull_down_time": 24, "operating_hours": 20}, positive=("pull_down_time",))
    assert r.number("pull_down_time") == 24.0
    assert r.number("operating_hours") == 0.0
    assert r.defaulted == ["conditions.pull_down_time"]


def test_field_reader_opcional_y_texto():
    r = FieldReader("product", {"custom_cp_above": "4,2", "product_type": ""}, {"product_type": "fruit pulp"})
    assert math.isclose(r.optional_number("custom_cp_above"), 4.2)
    assert r.optional_number("custom_cp_below") is None
    assert r.text("product_type") == "fruit pulp"
    assert r.defaulted == ["product.product_type"]
