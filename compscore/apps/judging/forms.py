# compscore/apps/judging/forms.py
from __future__ import annotations

from django import forms

from compscore.apps.scoring.constants import GROUP_CHOICES, JUNIOR, ROUND_CHOICES
from compscore.apps.scoring.services.entries import validate_entry_fields


class EntryForm(forms.Form):
    """
    Carga / edición de una marca. Puntaje y tiempo se reciben como texto
    (acepta coma decimal) y se validan con las mismas reglas del servicio.
    """
    participant_id = forms.CharField(
        max_length=64,
        required=False,
        label="Código",
        widget=forms.TextInput(attrs={"autofocus": True, "placeholder": "Código del participante"}),
    )
    participant_name = forms.CharField(
        max_length=160,
        required=False,
        label="Nombre",
        widget=forms.TextInput(attrs={"placeholder": "Se completa desde la nómina"}),
    )
    group = forms.ChoiceField(choices=GROUP_CHOICES, initial=JUNIOR, label="Grupo", widget=forms.RadioSelect)
    round = forms.TypedChoiceField(choices=ROUND_CHOICES, coerce=int, initial=1, label="Ronda", widget=forms.RadioSelect)
    score = forms.CharField(
        required=False,
        label="Puntaje",
        widget=forms.TextInput(attrs={"inputmode": "decimal", "placeholder": "0"}),
    )
    time = forms.CharField(
        required=False,
        label="Tiempo (s)",
        widget=forms.TextInput(attrs={"inputmode": "decimal", "placeholder": "segundos"}),
    )

    @classmethod
    def from_entry(cls, entry) -> "EntryForm":
        return cls(initial={
            "participant_id": entry.participant_id,
            "participant_name": entry.participant_name,
            "group": entry.group,
            "round": int(entry.round),
            "score": entry.score,
            "time": entry.time,
        })

    def clean(self):
        cleaned = super().clean()
        pid, score, time, rnd, group = validate_entry_fields(
            cleaned.get("participant_id"),
            cleaned.get("score"),
            cleaned.get("time"),
            cleaned.get("round", 1),
            cleaned.get("group") or JUNIOR,
        )
        cleaned.update(participant_id=pid, score=score, time=time, round=rnd, group=group)
        return cleaned

    def entry_kwargs(self) -> dict:
        cd = self.cleaned_data
        return {
            "participant_id": cd["participant_id"],
            "participant_name": cd.get("participant_name", ""),
            "group": cd["group"],
            "round": cd["round"],
            "score": cd["score"],
            "time": cd["time"],
        }
