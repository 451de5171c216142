from __future__ import annotations

import math
from pathlib import Path
from typing import Dict, List

from .models import LoadResult, ValidationIssue
from .profiles import COLD_ROOM
from .tables import DATA_DIR, _load_json

RULES_FILE = "validation_rules.json"


def load_rules(data_dir: str | Path | None = None) -> Dict:
    base = Path(data_dir) if data_dir else DATA_DIR
    if (base / RULES_FILE).exists():
        return _load_json(RULES_FILE, base)
    return {}


def validate_result(result: LoadResult, rules: Dict) -> List[ValidationIssue]:
    """Avisos sobre entradas dudosas; no modifica el resultado."""
    issues: List[ValidationIssue] = []
    limits = rules.get("limits", {})

    def add(msg, level="warning"):
        issues.append(ValidationIssue(level=level, message=msg))

    geo = result.geometry
    max_dim = limits.get("max_dim_m")
    min_dim = limits.get("min_dim_m")
    for key in ("length", "width", "height"):
        val = getattr(geo, key)
        if max_dim and val > max_dim:
            add(f"{key.upper()} supera {max_dim} m")
        if min_dim is not None and val < min_dim:
            add(f"{key.upper()} es menor a {min_dim} m")

    cond = result.conditions
    if cond.temperature_difference <= 0:
        add("La temperatura externa no supera la interna; la transmisión no es una carga de enfriamiento")

    lo = limits.get("min_hours", 0.0)
    hi = limits.get("max_hours", 24.0)
    inp = result.product_input
    hours = {
        "operating_hours": cond.operating_hours,
        "working_hours": inp.working_hours,
        "fan_operating_hours": inp.fan_operating_hours,
    }
    for key, val in hours.items():
        if not lo <= val <= hi:
            add(f"{key} fuera de rango {lo:g}-{hi:g} h: {val:g}")

    if inp.outgoing_temp > inp.incoming_temp:
        add("La temperatura de salida del producto es mayor que la de entrada")

    if result.facility == COLD_ROOM and inp.outgoing_temp < result.product.freezing_point:
        add(
            f"La temperatura de salida ({inp.outgoing_temp:g} °C) está bajo el punto de congelación "
            f"de {result.product.name} ({result.product.freezing_point:g} °C)"
        )

    max_util = limits.get("max_utilization_pct")
    util = result.storage.utilization_pct
    if not math.isfinite(util):
        add("Capacidad de almacenamiento nula; utilización no disponible")
    elif max_util is not None and util > max_util:
        add(f"Utilización de almacenamiento {util:.1f}% supera {max_util:g}%")

    if not math.isfinite(result.required_cfm):
        add("Caudal de aire requerido no disponible", level="error")
    if not math.isfinite(result.final_load):
        add("Carga final no disponible (tiempo de enfriamiento nulo)", level="error")
    return issues
