from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from .tables import _load_json

COLD_ROOM = "cold_room"
FREEZER = "freezer"
BLAST_FREEZER = "blast_freezer"

COMPONENTS = ("transmission", "product", "respiration", "air_change", "miscellaneous", "heaters", "fan_motor")


@dataclass(frozen=True)
class FacilityProfile:
    """
    Constantes de fórmula y componentes de carga activos de un tipo de
    instalación. Un único agregador calcula las tres instalaciones.
    """

    id: str
    label: str
    safety_factor: float
    u_factor: Optional[float]  # None => U por superficie según material/espesor
    air_change_mode: str  # flow | volume
    air_change_rate: float
    enthalpy_diff: float
    person_heat_kw: float
    respiration_w_per_tonne: float
    product_stages: int
    components: Tuple[str, ...]
    product_fallback: str
    storage_fallback: Optional[str]
    storage_uses_efficiency: bool
    recommended_ach: Optional[float]
    defaults: Dict[str, Dict[str, Any]]

    def uses(self, component: str) -> bool:
        return component in self.components

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "FacilityProfile":
        comps = tuple(d["components"])
        unknown = [c for c in comps if c not in COMPONENTS]
        if unknown:
            raise ValueError(f"Componentes desconocidos en perfil '{d['id']}': {unknown}")
        air = d["air_change"]
        if air["mode"] not in ("flow", "volume"):
            raise ValueError(f"Modo de renovación de aire inválido: {air['mode']}")
        return cls(
            id=d["id"],
            label=d.get("label", d["id"]),
            safety_factor=float(d["safety_factor"]),
            u_factor=None if d.get("u_factor") is None else float(d["u_factor"]),
            air_change_mode=air["mode"],
            air_change_rate=float(air["rate"]),
            enthalpy_diff=float(air["enthalpy_diff"]),
            person_heat_kw=float(d["person_heat_kw"]),
            respiration_w_per_tonne=float(d.get("respiration_w_per_tonne", 0.0)),
            product_stages=int(d["product_stages"]),
            components=comps,
            product_fallback=d["product_fallback"],
            storage_fallback=d.get("storage_fallback"),
            storage_uses_efficiency=bool(d.get("storage_uses_efficiency", False)),
            recommended_ach=d.get("recommended_ach"),
            defaults=d["defaults"],
        )


def load_profiles(data_dir: str | Path | None = None) -> Dict[str, FacilityProfile]:
    blob = _load_json("facility_profiles.json", Path(data_dir) if data_dir else None)
    return {p["id"]: FacilityProfile.from_dict(p) for p in blob["profiles"]}


_DEFAULT_PROFILES: Dict[str, FacilityProfile] | None = None


def default_profile(facility: str) -> FacilityProfile:
    global _DEFAULT_PROFILES
    if _DEFAULT_PROFILES is None:
        _DEFAULT_PROFILES = load_profiles()
    try:
        return _DEFAULT_PROFILES[facility]
    except KeyError:
        raise ValueError(f"Tipo de instalación desconocido: '{facility}'") from None
