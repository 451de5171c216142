from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from . import blast_freezer, cold_room, freezer
from .models import LoadResult, ValidationIssue
from .profiles import BLAST_FREEZER, COLD_ROOM, FREEZER, FacilityProfile, load_profiles
from .tables import ReferenceTables
from .validation import load_rules, validate_result

Record = Optional[Mapping[str, Any]]

_COMPUTERS: Dict[str, Callable[..., LoadResult]] = {
    COLD_ROOM: cold_room.compute,
    FREEZER: freezer.compute,
    BLAST_FREEZER: blast_freezer.compute,
}


# ---------------------------- CALCULADORA ---------------------------- #


class RefrigerationLoadCalculator:
    """
    Punto de entrada para la app: carga las tablas una vez y calcula
    cualquier tipo de instalación a partir de los registros del formulario.
    """

    def __init__(self, data_dir: str | Path | None = None):
        self.tables = ReferenceTables(data_dir)
        self.profiles: Dict[str, FacilityProfile] = load_profiles(data_dir)
        self.rules = load_rules(data_dir)

    @property
    def facilities(self) -> List[str]:
        return list(self.profiles)

    def profile(self, facility: str) -> FacilityProfile:
        prof = self.profiles.get(facility)
        if prof is None or facility not in _COMPUTERS:
            raise ValueError(f"Tipo de instalación desconocido: '{facility}'")
        return prof

    def compute(self, facility: str, room: Record = None, conditions: Record = None,
                product: Record = None) -> LoadResult:
        prof = self.profile(facility)
        return _COMPUTERS[facility](room, conditions, product, tables=self.tables, profile=prof)

    def check(self, result: LoadResult) -> List[ValidationIssue]:
        return validate_result(result, self.rules)

    # ---------------- DEMO ---------------- #
    def run_demo(self, facility: str) -> LoadResult:
        """Formulario vacío: todo sale de los valores por defecto documentados."""
        return self.compute(facility, {}, {}, {})
