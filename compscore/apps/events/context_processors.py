from .models import Competition


def competition(request):
    return {
        "competition": Competition.load(),
        "auth_session": getattr(request, "auth_session", None),
    }
