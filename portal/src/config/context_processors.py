from apps.sitio.models import ConfiguracionSitio


def sitio(request):
    """
    Inyecta el nombre del sitio en el contexto de plantillas.
    """
    return {
        'SITIO_NOMBRE': ConfiguracionSitio.cargar().nombre,
    }
