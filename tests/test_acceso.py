import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.exceptions import PermissionDenied
from django.http import HttpResponse
from django.test import RequestFactory
from django.urls import resolve

from apps.gone.acceso import (
    ResultadoAcceso,
    aplicar_cacheabilidad,
    evaluar_acceso,
    fusionar,
    regla_acceso,
)

pytestmark = pytest.mark.urls('tests.urls')


def test_fusionar_une_contextos_y_etiquetas():
    original = ResultadoAcceso(True, frozenset({'user.roles:authenticated'}), frozenset({'route:a'}), 600)
    nuevo = ResultadoAcceso(False, frozenset({'user.permissions'}), frozenset({'route:b'}), 60)

    resultado = fusionar(original, nuevo)

    assert resultado.permitido is True
    assert resultado.contextos == {'user.roles:authenticated', 'user.permissions'}
    assert resultado.etiquetas == {'route:a', 'route:b'}
    assert resultado.max_edad == 60
    # Los valores originales no cambian
    assert original.contextos == {'user.roles:authenticated'}


def test_fusionar_max_edad_ausente():
    assert fusionar(ResultadoAcceso(True), ResultadoAcceso(True, max_edad=30)).max_edad == 30
    assert fusionar(ResultadoAcceso(True, max_edad=30), ResultadoAcceso(True)).max_edad == 30
    assert fusionar(ResultadoAcceso(True), ResultadoAcceso(True)).max_edad is None


def test_vista_sin_reglas_es_accesible():
    resultado = evaluar_acceso(resolve('/pruebas/publica/'), AnonymousUser())
    assert resultado.permitido
    assert resultado.contextos == frozenset()
    assert resultado.etiquetas == {'route:pruebas_publica'}


def test_vista_con_permiso_para_anonimo():
    resultado = evaluar_acceso(resolve('/pruebas/restringida/'), AnonymousUser())
    assert not resultado.permitido
    assert resultado.depende_del_usuario


@pytest.mark.django_db
def test_vista_con_permiso_para_usuario_con_permiso(usuario_con_permiso):
    resultado = evaluar_acceso(resolve('/pruebas/restringida/'), usuario_con_permiso)
    assert resultado.permitido


@pytest.mark.django_db
def test_vista_solo_usuarios(usuario):
    match = resolve('/pruebas/usuarios/')
    assert evaluar_acceso(match, usuario).permitido
    assert not evaluar_acceso(match, AnonymousUser()).permitido


def test_regla_acceso_deja_resultado_y_deniega():
    @regla_acceso(autenticado=True)
    def vista(request):
        return HttpResponse("ok")

    request = RequestFactory().get('/x/')
    request.user = AnonymousUser()
    with pytest.raises(PermissionDenied):
        vista(request)
    assert request.resultado_acceso.permitido is False
    assert vista.reglas_acceso == {'autenticado': True, 'permiso': None}


def test_aplicar_cacheabilidad_por_usuario():
    response = aplicar_cacheabilidad(HttpResponse(), ResultadoAcceso(True, frozenset({'user.permissions'})))
    assert 'private' in response['Cache-Control']
    assert response['Vary'] == 'Cookie'


def test_aplicar_cacheabilidad_publica():
    response = aplicar_cacheabilidad(HttpResponse(), ResultadoAcceso(True, max_edad=120))
    assert response['Cache-Control'] == 'max-age=120'
    assert not response.has_header('Vary')
