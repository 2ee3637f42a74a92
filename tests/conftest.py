import pytest
from django.contrib.auth.models import Permission

from apps.gone.models import ConfiguracionGone
from apps.sitio.models import ConfiguracionSitio

MENSAJE_GONE = "La página solicitada ya no existe."


@pytest.fixture
def pagina_410(db):
    """Configura la página 410 personalizada."""
    def _configurar(ruta):
        configuracion = ConfiguracionGone.cargar()
        configuracion.pagina_410 = ruta
        configuracion.save()
        return configuracion
    return _configurar


@pytest.fixture
def paginas_sitio(db):
    def _configurar(pagina_403="", pagina_404=""):
        configuracion = ConfiguracionSitio.cargar()
        configuracion.pagina_403 = pagina_403
        configuracion.pagina_404 = pagina_404
        configuracion.save()
        return configuracion
    return _configurar


def _dar_permisos(usuario, *codenames):
    for codename in codenames:
        usuario.user_permissions.add(Permission.objects.get(codename=codename))


@pytest.fixture
def usuario(django_user_model):
    return django_user_model.objects.create_user(username="lector", password="clave-lector")


@pytest.fixture
def usuario_con_permiso(django_user_model):
    user = django_user_model.objects.create_user(username="revisor", password="clave-revisor")
    _dar_permisos(user, "ver_no_publicado")
    return django_user_model.objects.get(pk=user.pk)


@pytest.fixture
def editor(django_user_model):
    user = django_user_model.objects.create_user(username="editor", password="clave-editor")
    _dar_permisos(user, "change_configuracionsitio")
    return django_user_model.objects.get(pk=user.pk)
