from __future__ import annotations

import math
from pathlib import Path
from typing import List, Tuple

import pandas as pd
from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from .models import KJ_DAY_PER_KW, LoadResult

COLUMNS = ["category", "component", "kW", "kJ_day"]


def breakdown_frame(result: LoadResult) -> pd.DataFrame:
    """Desglose en filas (categoría, componente, kW, kJ/día), totales incluidos."""
    b = result.breakdown
    rows: List[Tuple[str, str, float]] = [
        ("transmission", "walls", b.transmission.walls),
        ("transmission", "ceiling", b.transmission.ceiling),
        ("transmission", "floor", b.transmission.floor),
        ("transmission", "total", b.transmission.total),
        ("product", "sensible_above", b.product.sensible_above),
        ("product", "latent", b.product.latent),
        ("product", "sensible_below", b.product.sensible_below),
        ("product", "total", b.product.total),
        ("respiration", "total", b.respiration),
        ("air_change", "total", b.air_change),
        ("miscellaneous", "occupancy", b.miscellaneous.occupancy),
        ("miscellaneous", "lighting", b.miscellaneous.lighting),
        ("miscellaneous", "equipment", b.miscellaneous.equipment),
        ("miscellaneous", "total", b.miscellaneous.total),
        ("heaters", "peripheral", b.heaters.peripheral),
        ("heaters", "door", b.heaters.door),
        ("heaters", "tray", b.heaters.tray),
        ("heaters", "drain", b.heaters.drain),
        ("heaters", "steam", b.heaters.steam),
        ("heaters", "total", b.heaters.total),
        ("fan_motor", "total", b.fan_motor),
        ("summary", "total_before_safety", result.total_before_safety),
        ("summary", "safety_factor_load", result.safety_factor_load),
        ("summary", "final_load", result.final_load),
    ]
    df = pd.DataFrame(rows, columns=COLUMNS[:3])
    df["kJ_day"] = df["kW"] * KJ_DAY_PER_KW
    return df


def summary_items(result: LoadResult) -> List[Tuple[str, object]]:
    return [
        ("Instalación", result.facility),
        ("Producto", result.product.name),
        ("Volumen (m³)", result.geometry.volume),
        ("ΔT (°C)", result.conditions.temperature_difference),
        ("Carga final (kW)", result.final_load),
        ("TR", result.total_tr),
        ("BTU/h", result.total_btu),
        ("kJ/día", result.daily_kj),
        ("SHR", result.shr),
        ("CFM requerido", result.required_cfm),
        ("Almacenamiento máx. (kg)", result.storage.max_storage_kg),
        ("Utilización (%)", result.storage.utilization_pct),
    ]


# ----------------------------- helpers de estilo -----------------------------
_THIN = Side(style="thin", color="000000")
_BORDER = Border(left=_THIN, right=_THIN, top=_THIN, bottom=_THIN)
F_GREY = PatternFill("solid", fgColor="F2F4F7")
FONT_HEADER = Font(name="Calibri", bold=True, size=11, color="000000")


def _autosize(ws) -> None:
    for col in ws.columns:
        max_len = max(len("" if c.value is None else str(c.value)) for c in col)
        ws.column_dimensions[get_column_letter(col[0].column)].width = max(10, min(60, max_len + 2))


def _header(ws, row: int, values) -> None:
    for i, v in enumerate(values, start=1):
        c = ws.cell(row=row, column=i, value=v)
        c.font = FONT_HEADER
        c.fill = F_GREY
        c.border = _BORDER
        c.alignment = Alignment(horizontal="center")


def _cell_value(value):
    # openpyxl no admite inf/nan
    if isinstance(value, float) and not math.isfinite(value):
        return "N/D"
    return value


def export_xlsx(result: LoadResult, path: str | Path) -> Path:
    """Exporta resumen y desglose a un libro con hojas RESUMEN y DESGLOSE."""
    path = Path(path)
    wb = Workbook()
    ws = wb.active
    ws.title = "RESUMEN"
    _header(ws, 1, ["Concepto", "Valor"])
    for r, (label, value) in enumerate(summary_items(result), start=2):
        ws.cell(row=r, column=1, value=label).border = _BORDER
        ws.cell(row=r, column=2, value=_cell_value(value)).border = _BORDER
    _autosize(ws)

    ws2 = wb.create_sheet("DESGLOSE")
    df = breakdown_frame(result)
    _header(ws2, 1, COLUMNS)
    for r, row in enumerate(df.itertuples(index=False), start=2):
        for c, v in enumerate(row, start=1):
            ws2.cell(row=r, column=c, value=v if isinstance(v, str) else _cell_value(float(v))).border = _BORDER
    _autosize(ws2)

    wb.save(path)
    return path
