# compscore/apps/leaderboard/services/awards.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from django.core.exceptions import ValidationError

FIRST = "first"
SECOND = "second"
THIRD = "third"

AWARD_LABELS = {
    FIRST: "Primer premio",
    SECOND: "Segundo premio",
    THIRD: "Tercer premio",
}


@dataclass(frozen=True)
class AwardConfig:
    """
    Porcentaje del grupo (0..100) que recibe cada premio.
    No tienen que sumar 100.
    """
    first: int = 15
    second: int = 25
    third: int = 30

    def __post_init__(self):
        errors = {}
        for field in (FIRST, SECOND, THIRD):
            value = getattr(self, field)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 100:
                errors[field] = "Debe ser un entero entre 0 y 100."
        if errors:
            raise ValidationError(errors)

    def as_dict(self) -> dict:
        return {FIRST: self.first, SECOND: self.second, THIRD: self.third}


def _round_half_up(n: int, percent: int) -> int:
    # round(n * percent / 100) con redondeo .5 hacia arriba, en enteros
    return (2 * n * percent + 100) // 200


def cutoffs(n: int, config: AwardConfig) -> Tuple[int, int, int]:
    """Posiciones límite acumuladas (c1, c2, c3) para un grupo de n participantes."""
    c1 = _round_half_up(n, config.first)
    c2 = _round_half_up(n, config.first + config.second)
    c3 = _round_half_up(n, config.first + config.second + config.third)
    return c1, c2, c3


def award_for_rank(rank: int, limits: Tuple[int, int, int]) -> Optional[str]:
    c1, c2, c3 = limits
    if rank <= c1:
        return FIRST
    if rank <= c2:
        return SECOND
    if rank <= c3:
        return THIRD
    return None


def assign_awards(standings: Sequence, config: AwardConfig) -> List[Optional[str]]:
    """
    Premio por fila de una clasificación ya ordenada (un solo grupo).
    El rank es la posición 1-indexada en la lista.
    """
    limits = cutoffs(len(standings), config)
    return [award_for_rank(idx, limits) for idx in range(1, len(standings) + 1)]


def award_label(award: Optional[str], empty: str = "-") -> str:
    if award is None:
        return empty
    return AWARD_LABELS[award]
