# compscore/apps/registration/services/importer.py
"""
Importación de nómina desde planilla (.xlsx con openpyxl o .csv).

Columnas por heurística sobre la primera fila (cabecera):
  código / nombre / grupo  (coincidencia parcial, sin mayúsculas)
Sin cabecera reconocible: código = columna 0, nombre = columna 1.
"""
from __future__ import annotations

import csv
import io
import logging
import zipfile
from xml.etree import ElementTree
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence

from django.db import DatabaseError, transaction
from openpyxl import Workbook, load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from compscore.apps.scoring.constants import JUNIOR, SENIOR
from compscore.apps.scoring.exceptions import RemoteIOError
from compscore.apps.scoring.records import RosterRecord
from ..models import RosterItem

logger = logging.getLogger(__name__)

ID_SYNONYMS = ("编号", "id", "code", "código", "codigo")
NAME_SYNONYMS = ("姓名", "name", "nombre")
GROUP_SYNONYMS = ("组别", "组", "group", "grupo")
SENIOR_MARKERS = ("senior", "高")

TEMPLATE_HEADERS = ["Código", "Nombre", "Grupo (Junior/Senior)"]


class RosterParseError(ValueError):
    """Archivo de nómina ilegible; la importación se aborta sin escribir nada."""


@dataclass(frozen=True)
class ColumnMap:
    id_index: int
    name_index: int
    group_index: Optional[int]


# ---------- Utilidades de celdas ----------

def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _find_column(headers: Sequence[str], synonyms: Sequence[str]) -> Optional[int]:
    for idx, h in enumerate(headers):
        if any(s in h for s in synonyms):
            return idx
    return None


def detect_columns(header_row: Sequence[Any]) -> ColumnMap:
    headers = [_cell_text(h).lower() for h in header_row]
    id_idx = _find_column(headers, ID_SYNONYMS)
    name_idx = _find_column(headers, NAME_SYNONYMS)
    group_idx = _find_column(headers, GROUP_SYNONYMS)
    return ColumnMap(
        id_index=0 if id_idx is None else id_idx,
        name_index=1 if name_idx is None else name_idx,
        group_index=group_idx,
    )


def parse_group(text: Any) -> str:
    t = _cell_text(text).lower()
    if any(m in t for m in SENIOR_MARKERS):
        return SENIOR
    return JUNIOR


def _at(row: Sequence[Any], idx: Optional[int]) -> Any:
    if idx is None or idx >= len(row):
        return None
    return row[idx]


def parse_roster_rows(rows: Sequence[Sequence[Any]]) -> List[RosterRecord]:
    """
    Primera fila = cabecera. Filas sin código se descartan en silencio.
    """
    if not rows:
        return []
    cols = detect_columns(rows[0])
    items: List[RosterRecord] = []
    for row in rows[1:]:
        pid = _cell_text(_at(row, cols.id_index))
        if not pid:
            continue
        group_cell = _at(row, cols.group_index)
        items.append(
            RosterRecord(
                participant_id=pid,
                name=_cell_text(_at(row, cols.name_index)),
                group=parse_group(group_cell) if group_cell not in (None, "") else JUNIOR,
            )
        )
    return items


# ---------- Lectura de archivos ----------

# Un .xlsx dañado puede fallar al abrir o recién al recorrer las filas
XLSX_ERRORS = (
    InvalidFileException,
    zipfile.BadZipFile,
    ElementTree.ParseError,
    SyntaxError,
    OSError,
    KeyError,
    ValueError,
    TypeError,
)


def read_xlsx(fp, sheet: Optional[str] = None) -> List[list]:
    try:
        wb = load_workbook(filename=fp, read_only=True, data_only=True)
    except XLSX_ERRORS as exc:
        raise RosterParseError(f"No se pudo leer el Excel: {exc}") from exc
    try:
        try:
            ws = wb[sheet] if sheet else wb.worksheets[0]
        except (KeyError, IndexError) as exc:
            raise RosterParseError(f"Hoja '{sheet}' no encontrada.") from exc
        try:
            return [list(r) for r in ws.iter_rows(values_only=True)]
        except XLSX_ERRORS as exc:
            raise RosterParseError(f"No se pudo leer la hoja: {exc}") from exc
    finally:
        wb.close()


def read_csv(fp) -> List[list]:
    raw = fp.read()
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise RosterParseError("El CSV debe estar en UTF-8.") from exc
    else:
        raw = raw.lstrip("\ufeff")
    try:
        return [row for row in csv.reader(io.StringIO(raw))]
    except csv.Error as exc:
        raise RosterParseError(f"CSV inválido: {exc}") from exc


def read_table(fp, filename: str, sheet: Optional[str] = None) -> List[list]:
    suffix = Path(filename or "").suffix.lower()
    if suffix == ".csv":
        return read_csv(fp)
    if suffix in (".xlsx", ".xlsm"):
        return read_xlsx(fp, sheet=sheet)
    raise RosterParseError(f"Formato no soportado: '{suffix or filename}'. Use .xlsx o .csv.")


# ---------- Escritura ----------

def upsert_roster(sub_event, rows: Iterable[RosterRecord]) -> int:
    """
    Upsert por (participant_id, prueba); otras pruebas no se tocan.
    Todo o nada.
    """
    sub_event_id = getattr(sub_event, "pk", sub_event)
    count = 0
    try:
        with transaction.atomic():
            for item in rows:
                RosterItem.objects.update_or_create(
                    sub_event_id=sub_event_id,
                    participant_id=item.participant_id,
                    defaults={"name": item.name, "group": item.group},
                )
                count += 1
    except DatabaseError as exc:
        logger.error("Fallo al importar nómina en %s: %s", sub_event_id, exc)
        raise RemoteIOError("No se pudo guardar la nómina.") from exc
    return count


def import_roster_file(sub_event, fp, filename: str, sheet: Optional[str] = None) -> int:
    """
    Lee + parsea todo antes de escribir. Devuelve la cantidad importada
    (0 si no hubo filas válidas). RosterParseError si el archivo es ilegible.
    """
    rows = read_table(fp, filename, sheet=sheet)
    items = parse_roster_rows(rows)
    if not items:
        logger.info("Nómina '%s' sin filas válidas", filename)
        return 0
    count = upsert_roster(sub_event, items)
    logger.info("Nómina '%s': %s participantes importados", filename, count)
    return count


def build_template_workbook(sample_rows: int = 20) -> Workbook:
    """Plantilla de importación con filas de ejemplo."""
    wb = Workbook()
    ws = wb.active
    ws.title = "Nómina"
    ws.append(TEMPLATE_HEADERS)
    for i in range(1, sample_rows + 1):
        ws.append([f"{1000 + i}", f"Participante {i}", "Junior" if i % 2 else "Senior"])
    return wb
