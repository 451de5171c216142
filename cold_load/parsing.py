from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)


def parse_number(val: Any, default: float) -> float:
    """
    Convierte un valor del formulario a float.

    Si el valor falta, está vacío o no da un número finito se devuelve
    ``default``. Un cero finito es válido.
    """
    if val is None or isinstance(val, bool):
        return float(default)
    try:
        if isinstance(val, str):
            val = val.strip().replace(",", ".")
            if not val:
                return float(default)
        num = float(val)
    except (TypeError, ValueError, OverflowError):
        return float(default)
    if not math.isfinite(num):
        return float(default)
    return num


def parse_text(val: Any, default: Optional[str]) -> Optional[str]:
    if val is None:
        return default
    txt = str(val).strip()
    return txt or default


class FieldReader:
    """
    Lee un registro crudo (dict del formulario) aplicando los defaults
    documentados del perfil y recuerda qué campos se sustituyeron.
    """

    def __init__(
        self,
        section: str,
        raw: Optional[Mapping[str, Any]],
        defaults: Dict[str, Any],
        positive: Iterable[str] = (),
    ):
        self.section = section
        self.raw = raw or {}
        self.defaults = defaults
        self.positive = set(positive)
        self.defaulted: List[str] = []

    def _mark(self, key: str):
        self.defaulted.append(f"{self.section}.{key}")
        logger.debug("%s.%s sin valor válido; se usa %r", self.section, key, self.defaults.get(key))

    def number(self, key: str) -> float:
        default = float(self.defaults[key])
        val = parse_number(self.raw.get(key), default)
        if key in self.positive and val <= 0:
            val = default
        if val == default and not _same_number(self.raw.get(key), default):
            self._mark(key)
        return val

    def optional_number(self, key: str) -> Optional[float]:
        raw = self.raw.get(key)
        val = parse_number(raw, math.nan)
        return None if math.isnan(val) else val

    def text(self, key: str) -> Optional[str]:
        default = self.defaults.get(key)
        val = parse_text(self.raw.get(key), default)
        if parse_text(self.raw.get(key), None) is None:
            self._mark(key)
        return val


def _same_number(raw: Any, default: float) -> bool:
    # True cuando el usuario escribió explícitamente el mismo valor del default
    return parse_number(raw, math.nan) == default
