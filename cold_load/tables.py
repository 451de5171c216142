from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

import pandas as pd

from .models import ProductProfile

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


def _load_json(name: str, data_dir: Path | None = None) -> Dict[str, Any]:
    path = (data_dir or DATA_DIR) / name
    if not path.exists():
        raise FileNotFoundError(f"No se encontró el archivo de datos: {path}")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def lookup(table: Mapping[str, Any], key: Optional[str], fallback: str) -> Tuple[str, Any]:
    """
    Busca ``key`` en la tabla: exacto, luego sin distinguir mayúsculas y
    por último la entrada ``fallback``. Devuelve (clave usada, valor).
    """
    if key and key in table:
        return key, table[key]
    target = (key or "").strip().lower()
    if target:
        for name, val in table.items():
            if name.lower() == target:
                return name, val
    logger.debug("Clave %r no encontrada; se usa %r", key, fallback)
    return fallback, table[fallback]


class ReferenceTables:
    """Tablas de referencia de solo lectura (productos, almacenamiento, aislamiento)."""

    def __init__(self, data_dir: str | Path | None = None):
        base = Path(data_dir) if data_dir else DATA_DIR
        self.data_dir = base
        self.products = _load_json("products.json", base)["tables"]
        self.storage = _load_json("storage_factors.json", base)
        self.insulation = _load_json("insulation.json", base)

    # ---------------- productos ----------------
    def product(self, facility: str, name: Optional[str]) -> ProductProfile:
        tbl = self.products.get(facility)
        if tbl is None:
            raise ValueError(f"No hay tabla de productos para '{facility}'")
        key, row = lookup(tbl["by_name"], name, tbl["fallback"])
        # el cuarto frío solo guarda el punto de congelación; el cp viene del formulario
        return ProductProfile(
            name=key,
            specific_heat_above=float(row.get("specific_heat_above", 0.0)),
            specific_heat_below=float(row.get("specific_heat_below", 0.0)),
            latent_heat=float(row.get("latent_heat", 0.0)),
            freezing_point=float(row["freezing_point"]),
            density=float(row.get("density", 1000.0)),
            storage_efficiency=float(row.get("storage_efficiency", 1.0)),
        )

    def product_names(self, facility: str) -> list[str]:
        return list(self.products.get(facility, {}).get("by_name", {}))

    # ---------------- almacenamiento ----------------
    def storage_factor(self, storage_type: Optional[str], fallback: Optional[str] = None) -> Tuple[str, float]:
        key, val = lookup(self.storage["factors"], storage_type, fallback or self.storage["fallback"])
        return key, float(val)

    # ---------------- aislamiento ----------------
    def conductivity(self, material: Optional[str]) -> float:
        _, k = lookup(self.insulation["conductivity_w_mk"], material, self.insulation["fallback"])
        return float(k)

    def u_factor(self, material: Optional[str], thickness_mm: float) -> float:
        """U (W/m²K) = k / espesor; espesor no positivo usa el espesor por defecto."""
        if thickness_mm <= 0:
            thickness_mm = float(self.insulation["default_thickness_mm"])
        return self.conductivity(material) / (thickness_mm / 1000.0)

    def u_factor_table(self, thicknesses: Iterable[float] | None = None) -> pd.DataFrame:
        rows = list(thicknesses) if thicknesses is not None else self.insulation["standard_thicknesses_mm"]
        materials = list(self.insulation["conductivity_w_mk"])
        df = pd.DataFrame(
            [[self.u_factor(m, t) for m in materials] for t in rows],
            index=[int(t) if float(t).is_integer() else float(t) for t in rows],
            columns=materials,
        )
        df.index.name = "thickness_mm"
        return df


_DEFAULT_TABLES: ReferenceTables | None = None


def default_tables() -> ReferenceTables:
    global _DEFAULT_TABLES
    if _DEFAULT_TABLES is None:
        _DEFAULT_TABLES = ReferenceTables()
    return _DEFAULT_TABLES
