# compscore/apps/scoring/exceptions.py
"""
Errores del protocolo de marcas.

La validación por campo usa django.core.exceptions.ValidationError
(con error_dict {campo: [mensajes]}), igual que los forms.
"""


class ScoringError(Exception):
    pass


class NotFoundError(ScoringError):
    """Operación sobre una marca (o ítem de nómina) inexistente."""


class RemoteIOError(ScoringError):
    """Fallo del almacén durante una escritura; obliga a recargar el estado."""
