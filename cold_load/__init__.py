"""
Motor de cálculo de carga de refrigeración para cuartos fríos,
congeladores y túneles de congelación.

Cada instalación se calcula con :class:`RefrigerationLoadCalculator` o con
las funciones ``compute`` de cada módulo; las tablas de referencia viven
en ``cold_load/data``.
"""

from .calculator import RefrigerationLoadCalculator
from .models import (
    LoadBreakdown,
    LoadResult,
    OperatingConditions,
    ProductLoadInput,
    ProductProfile,
    RoomGeometry,
    ValidationIssue,
)
from .profiles import BLAST_FREEZER, COLD_ROOM, FREEZER, FacilityProfile
