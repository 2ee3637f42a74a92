"""
Redespacho interno de excepciones hacia una página personalizada.

La página configurada se ejecuta como subpetición sobre una copia de la
petición original: se conserva la URL, el usuario y la sesión, y solo cambia
la información de ruteo. Así la respuesta 410/403/404 se genera para la URL
original y no para la de la página personalizada.
"""
from __future__ import annotations

import copy
import logging
import traceback
from dataclasses import dataclass
from typing import Optional

from django.contrib.auth import REDIRECT_FIELD_NAME
from django.http import HttpRequest, HttpResponse
from django.urls import Resolver404, resolve

from . import conf
from .acceso import aplicar_cacheabilidad, evaluar_acceso, fusionar
from .subpeticion import despachar_subpeticion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContextoExcepcion:
    peticion: HttpRequest
    excepcion: Exception
    estado: int


def decodificar_excepcion(exc):
    """Datos de diagnóstico de una excepción: nivel, tipo, mensaje y origen."""
    frames = traceback.extract_tb(exc.__traceback__)
    origen = frames[-1] if frames else None
    return {
        'nivel': logging.ERROR,
        'tipo': type(exc).__name__,
        'mensaje': str(exc),
        'funcion': origen.name if origen else '?',
        'linea': origen.lineno if origen else '?',
        'archivo': origen.filename if origen else '?',
    }


class RedespachadorExcepciones:

    def __init__(self, resolver=resolve, evaluador=evaluar_acceso,
                 despachador=despachar_subpeticion, log=logger):
        self.resolver = resolver
        self.evaluador = evaluador
        self.despachador = despachador
        self.logger = log

    def manejar(self, contexto: ContextoExcepcion, ruta: str) -> Optional[HttpResponse]:
        """
        Devuelve la respuesta de la página `ruta` para la excepción, o None
        para dejar que Django use su página de error por defecto.
        """
        peticion = contexto.peticion

        try:
            match = self.resolver(ruta)
        except Resolver404:
            # Ruta literal: no se evalúa el acceso
            match = None

        if match is not None:
            resultado = self.evaluador(match, peticion.user)
            # La cacheabilidad de la página personalizada se suma a la de la original
            existente = getattr(peticion, 'resultado_acceso', None)
            peticion.resultado_acceso = resultado if existente is None else fusionar(existente, resultado)
            if not resultado.permitido:
                return None

        try:
            if match is None:
                match = self.resolver(ruta)
            sub_peticion = self._clonar(peticion, match)

            parametros = sub_peticion.GET if sub_peticion.method == 'GET' else sub_peticion.POST
            parametros[REDIRECT_FIELD_NAME] = peticion.get_full_path()
            parametros[conf.parametro_estado()] = str(contexto.estado)

            response = self.despachador(sub_peticion, match)
            # Solo se sobrescriben los 2xx; redirecciones (3xx) y errores (5xx) se conservan
            if 200 <= response.status_code < 300:
                response.status_code = contexto.estado

            for nombre, valor in getattr(contexto.excepcion, 'headers', {}).items():
                response[nombre] = valor

            resultado_acceso = getattr(peticion, 'resultado_acceso', None)
            if resultado_acceso is not None:
                aplicar_cacheabilidad(response, resultado_acceso)
            return response
        except Exception as e:
            # La excepción original sigue su curso normal en Django
            error = decodificar_excepcion(e)
            self.logger.log(
                error['nivel'],
                "%s: %s in %s (line %s of %s).",
                error['tipo'], error['mensaje'], error['funcion'], error['linea'], error['archivo'],
                exc_info=e,
            )
            return None

    def _clonar(self, peticion, match):
        sub_peticion = copy.copy(peticion)
        # Las páginas de error solo aceptan GET y POST; un DELETE, por ejemplo,
        # terminaría en 405
        metodo = 'POST' if peticion.method == 'POST' else 'GET'
        sub_peticion.method = metodo
        sub_peticion.META = {**peticion.META, 'REQUEST_METHOD': metodo}
        sub_peticion.GET = peticion.GET.copy()
        if metodo == 'POST':
            sub_peticion.POST = peticion.POST.copy()
        sub_peticion.resolver_match = match
        return sub_peticion
