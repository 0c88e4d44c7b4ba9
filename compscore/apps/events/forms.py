from __future__ import annotations

from django import forms

from .models import Competition, SubEvent


class CompetitionForm(forms.ModelForm):
    class Meta:
        model = Competition
        fields = ["name", "award_first", "award_second", "award_third"]
        labels = {
            "name": "Nombre de la competencia",
            "award_first": "Primer premio (%)",
            "award_second": "Segundo premio (%)",
            "award_third": "Tercer premio (%)",
        }
        widgets = {
            "award_first": forms.NumberInput(attrs={"min": 0, "max": 100}),
            "award_second": forms.NumberInput(attrs={"min": 0, "max": 100}),
            "award_third": forms.NumberInput(attrs={"min": 0, "max": 100}),
        }


class SubEventForm(forms.Form):
    name = forms.CharField(max_length=160, label="Nombre de la prueba")

    def clean_name(self):
        name = self.cleaned_data["name"].strip()
        if not name:
            raise forms.ValidationError("El nombre no puede estar vacío.")
        return name


class RefereeForm(forms.Form):
    username = forms.CharField(max_length=150, label="Usuario")
    password = forms.CharField(max_length=128, label="Contraseña")
    sub_event = forms.ModelChoiceField(
        queryset=SubEvent.objects.all(),
        empty_label="Selecciona prueba",
        label="Prueba",
    )
