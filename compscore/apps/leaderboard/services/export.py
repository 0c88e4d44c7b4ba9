# compscore/apps/leaderboard/services/export.py
from __future__ import annotations

import csv
import io
from typing import Any, Mapping, Optional, Sequence

from compscore.apps.scoring.constants import GROUP_LABELS, GROUPS
from .awards import AwardConfig, assign_awards, award_label
from .ranking import ParticipantStats

HEADERS = [
    "Posición",
    "Grupo",
    "Código",
    "Nombre",
    "Puntaje final",
    "Tiempo final",
    "Puntaje ronda 1",
    "Tiempo ronda 1",
    "Puntaje ronda 2",
    "Tiempo ronda 2",
    "Premio",
]

BOM = "\ufeff"


def format_number(value: Any, empty: str = "-") -> str:
    """8.0 -> '8', 8.5 -> '8.5', None -> '-'."""
    if value is None:
        return empty
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _row(stat: ParticipantStats, award: Optional[str]) -> list:
    best = stat.best_entry
    r1, r2 = stat.round1, stat.round2
    return [
        stat.rank,
        GROUP_LABELS.get(stat.group, stat.group),
        stat.participant_id,
        stat.participant_name or "",
        format_number(best.score if best else 0),
        format_number(best.time if best else 0),
        format_number(r1.score if r1 else None),
        format_number(r1.time if r1 else None),
        format_number(r2.score if r2 else None),
        format_number(r2.time if r2 else None),
        award_label(award),
    ]


def standings_csv(
    standings_by_group: Mapping[str, Sequence[ParticipantStats]],
    config: Optional[AwardConfig] = None,
    groups: Optional[Sequence[str]] = None,
) -> str:
    """
    CSV (UTF-8 con BOM, para Excel) de la clasificación.
    Los premios se calculan por grupo; sin config la columna queda en '-'.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(HEADERS)
    for group in groups or GROUPS:
        rows = standings_by_group.get(group, [])
        awards = assign_awards(rows, config) if config else [None] * len(rows)
        for stat, award in zip(rows, awards):
            writer.writerow(_row(stat, award))
    return BOM + buf.getvalue()
