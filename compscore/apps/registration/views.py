from __future__ import annotations

import io
import uuid

from django.contrib import messages
from django.http import HttpRequest, HttpResponse, HttpResponseForbidden, JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.http import require_GET, require_POST

from compscore.apps.accounts.decorators import scorer_required
from compscore.apps.events.models import SubEvent
from compscore.apps.scoring.exceptions import RemoteIOError
from compscore.apps.scoring.records import RosterRecord
from .forms import RosterUploadForm
from .models import RosterItem
from .services.importer import RosterParseError, build_template_workbook, import_roster_file

XLSX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@scorer_required
@require_POST
def roster_import(request: HttpRequest, sub_event_id) -> HttpResponse:
    sub_event = get_object_or_404(SubEvent, pk=sub_event_id)
    if not request.auth_session.can_score(sub_event):
        return HttpResponseForbidden("No tienes permiso sobre esta prueba.")

    form = RosterUploadForm(request.POST, request.FILES)
    if not form.is_valid():
        messages.error(request, "Seleccione un archivo .xlsx o .csv.")
        return redirect("judging:console")

    upload = form.cleaned_data["file"]
    try:
        count = import_roster_file(sub_event, upload, upload.name)
    except RosterParseError as exc:
        messages.error(request, f"Importados: 0. No se pudo leer el archivo ({exc}).")
    except RemoteIOError as exc:
        messages.error(request, f"Importados: 0. {exc}")
    else:
        if count:
            messages.success(request, f"Se importaron {count} participantes.")
        else:
            messages.warning(request, "No se encontraron filas válidas; verifique que el archivo tenga código y nombre.")
    return redirect("judging:console")


@require_GET
def roster_template(request: HttpRequest) -> HttpResponse:
    wb = build_template_workbook()
    buf = io.BytesIO()
    wb.save(buf)
    response = HttpResponse(buf.getvalue(), content_type=XLSX_CONTENT_TYPE)
    response["Content-Disposition"] = 'attachment; filename="plantilla_nomina.xlsx"'
    return response


@require_GET
def api_roster(request: HttpRequest) -> JsonResponse:
    qs = RosterItem.objects.all().order_by("sub_event", "participant_id")
    sub_event_id = request.GET.get("subEventId")
    if sub_event_id:
        se = SubEvent.objects.filter(pk=sub_event_id).first() if _is_uuid(sub_event_id) else None
        if se is None:
            return JsonResponse({"error": "Prueba inexistente."}, status=404)
        qs = qs.filter(sub_event=se)
    return JsonResponse([RosterRecord.from_model(r).as_json() for r in qs], safe=False)


def _is_uuid(value: str) -> bool:
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True
