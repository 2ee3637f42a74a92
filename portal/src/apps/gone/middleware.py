import logging

from django.core.exceptions import PermissionDenied
from django.http import Http404, HttpResponseRedirect
from django.utils.log import log_response

from apps.contenido.models import Nodo
from apps.sitio.models import ConfiguracionSitio

from . import conf
from .acceso import aplicar_cacheabilidad
from .excepciones import Gone
from .models import ConfiguracionGone
from .redespacho import ContextoExcepcion, RedespachadorExcepciones
from .views import pagina_410

logger = logging.getLogger(__name__)


class PaginaGoneMiddleware:
    """
    Reemplaza la página 410 genérica por la página configurada en
    ConfiguracionGone.pagina_410, si la hay.
    """
    def __init__(self, get_response, redespachador=None, cargar_configuracion=None):
        self.get_response = get_response
        self.redespachador = redespachador or RedespachadorExcepciones()
        self.cargar_configuracion = cargar_configuracion or ConfiguracionGone.cargar

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, Gone):
            return None
        ruta = self.cargar_configuracion().pagina_410
        if not ruta:
            return None
        return self.redespachador.manejar(ContextoExcepcion(request, exception, 410), ruta)


class PaginaErrorPersonalizadaMiddleware:
    """
    Páginas personalizadas para 403 y 404.

    Un 403 sobre un nodo no publicado de los tipos en GONE_TIPOS_NODO_410 se
    responde como 410 con la página de ConfiguracionGone.
    """
    def __init__(self, get_response, redespachador=None):
        self.get_response = get_response
        self.redespachador = redespachador or RedespachadorExcepciones()

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, PermissionDenied):
            nodo = getattr(request, 'nodo', None)
            if isinstance(nodo, Nodo) and nodo.tipo in conf.tipos_nodo_410() and not nodo.publicado:
                ruta, estado = ConfiguracionGone.cargar().pagina_410, 410
            else:
                ruta, estado = ConfiguracionSitio.cargar().pagina_403, 403
        elif isinstance(exception, Http404):
            ruta, estado = ConfiguracionSitio.cargar().pagina_404, 404
        else:
            return None

        if not ruta:
            return None
        return self.redespachador.manejar(ContextoExcepcion(request, exception, estado), ruta)


class GonePredeterminadoMiddleware:
    """
    Página 410 genérica para las excepciones Gone que ningún otro middleware
    atendió. Django no conoce Gone: sin este middleware terminaría en un 500.
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not isinstance(exception, Gone):
            return None
        response = pagina_410(request)
        response.status_code = 410
        for nombre, valor in exception.headers.items():
            response[nombre] = valor
        # Si la página personalizada fue denegada, su cacheabilidad ya está en la petición
        resultado_acceso = getattr(request, 'resultado_acceso', None)
        if resultado_acceso is not None:
            aplicar_cacheabilidad(response, resultado_acceso)
        log_response(
            'Gone: %s', request.path,
            response=response,
            request=request,
            exception=exception,
        )
        return response


class NodoNoPublicadoMiddleware:
    """
    Redirige a los visitantes anónimos que llegan a un nodo no publicado
    hacia la página 410 fija (GONE_DESTINO_NO_PUBLICADO).
    """
    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        # El usuario se consulta solo si hay nodo: leerlo marca la sesión como
        # accedida y SessionMiddleware agregaría "Vary: Cookie" a toda respuesta
        nodo = getattr(request, 'nodo', None)
        if isinstance(nodo, Nodo) and not nodo.publicado:
            user = getattr(request, 'user', None)
            if user is not None and user.is_anonymous:
                logger.info("Nodo %s no publicado, redirigiendo visitante anónimo", nodo.pk)
                return HttpResponseRedirect(conf.destino_no_publicado())

        return response
