from django import forms


class RosterUploadForm(forms.Form):
    file = forms.FileField(
        label="Planilla de nómina",
        help_text="Excel (.xlsx) o CSV con columnas código, nombre y grupo.",
        widget=forms.ClearableFileInput(attrs={"accept": ".xlsx,.csv"}),
    )
