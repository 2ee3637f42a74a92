"""
Valores configurables desde settings, con sus valores por defecto.
"""
from django.conf import settings


def destino_no_publicado():
    return getattr(settings, 'GONE_DESTINO_NO_PUBLICADO', '/system/410')


def parametro_estado():
    return getattr(settings, 'GONE_PARAMETRO_ESTADO', '_exception_statuscode')


def tipos_nodo_410():
    return tuple(getattr(settings, 'GONE_TIPOS_NODO_410', ('empleado',)))
