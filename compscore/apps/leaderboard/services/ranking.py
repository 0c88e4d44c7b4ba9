# compscore/apps/leaderboard/services/ranking.py
"""
Motor de ranking: marcas + nómina de una prueba -> clasificación por grupo.

Función pura. Acepta filas del ORM (Entry / RosterItem) o registros en memoria
(EntryRecord / RosterRecord) siempre que expongan los mismos atributos.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Iterable, List, Optional

from compscore.apps.scoring.constants import GROUPS, JUNIOR


@dataclass(frozen=True)
class ParticipantStats:
    participant_id: str
    participant_name: str
    group: str
    round1: Optional[Any]
    round2: Optional[Any]
    best_entry: Optional[Any]
    rank: int = 0


def _is_newer(candidate: Any, current: Optional[Any]) -> bool:
    # Reenvío para la misma (participante, ronda): gana el más reciente.
    # Con timestamps iguales gana el último en el orden de entrada.
    if current is None:
        return True
    return candidate.timestamp >= current.timestamp


def pick_best(round1: Optional[Any], round2: Optional[Any]) -> Optional[Any]:
    """
    Mejor ronda del participante:
      - una sola ronda -> esa
      - ambas -> mayor score; empate -> menor tiempo; empate total -> ronda 1
    """
    if round1 is None or round2 is None:
        return round1 or round2
    if round1.score != round2.score:
        return round1 if round1.score > round2.score else round2
    if round2.time < round1.time:
        return round2
    return round1


def _standing_key(stats: ParticipantStats):
    best = stats.best_entry
    return (-best.score, best.time)


def rank_entries(entries: Iterable[Any], roster: Iterable[Any] = ()) -> Dict[str, List[ParticipantStats]]:
    """
    Clasificación por grupo ({"junior": [...], "senior": [...]}), cada lista
    ordenada por score desc y tiempo asc, con rank 1..N dentro del grupo.
    """
    roster_by_id = {r.participant_id: r for r in roster}

    rounds: Dict[str, Dict[int, Any]] = {}
    for entry in entries:
        slots = rounds.setdefault(entry.participant_id, {})
        rnd = int(entry.round)
        if _is_newer(entry, slots.get(rnd)):
            slots[rnd] = entry

    by_group: Dict[str, List[ParticipantStats]] = {g: [] for g in GROUPS}
    for pid, slots in rounds.items():
        round1 = slots.get(1)
        round2 = slots.get(2)
        best = pick_best(round1, round2)
        if best is None:
            continue

        roster_match = roster_by_id.get(pid)
        if roster_match is not None:
            name = roster_match.name or pid
            group = roster_match.group
        else:
            # La identidad sale de la marca más reciente del participante
            latest = max((e for e in (round1, round2) if e is not None), key=lambda e: e.timestamp)
            name = latest.participant_name or pid
            group = latest.group or JUNIOR
        if group not in by_group:
            group = JUNIOR

        by_group[group].append(
            ParticipantStats(
                participant_id=pid,
                participant_name=name,
                group=group,
                round1=round1,
                round2=round2,
                best_entry=best,
            )
        )

    ranked: Dict[str, List[ParticipantStats]] = {}
    for group, rows in by_group.items():
        rows.sort(key=_standing_key)
        ranked[group] = [replace(s, rank=idx) for idx, s in enumerate(rows, start=1)]
    return ranked
