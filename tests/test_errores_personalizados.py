import pytest

pytestmark = [pytest.mark.django_db, pytest.mark.urls('tests.urls')]


def test_403_sin_pagina_configurada(client):
    response = client.get('/pruebas/denegada/')
    assert response.status_code == 403
    assert "Página personalizada" not in response.content.decode()


def test_403_con_pagina_personalizada(client, paginas_sitio):
    paginas_sitio(pagina_403='/pruebas/publica/')
    response = client.get('/pruebas/denegada/')
    assert response.status_code == 403
    assert response.content.decode() == "Página personalizada"


def test_404_con_pagina_personalizada(client, paginas_sitio):
    paginas_sitio(pagina_404='/pruebas/eco/')
    response = client.get('/pruebas/no-existe/')
    assert response.status_code == 404
    assert response.json()['get']['_exception_statuscode'] == '404'


def test_404_de_nodo_inexistente(client, paginas_sitio):
    paginas_sitio(pagina_404='/pruebas/publica/')
    response = client.get('/nodo/999/')
    assert response.status_code == 404
    assert response.content.decode() == "Página personalizada"


def test_404_con_pagina_inaccesible(client, paginas_sitio):
    paginas_sitio(pagina_404='/pruebas/restringida/')
    response = client.get('/pruebas/no-existe/')
    assert response.status_code == 404
    assert "Página restringida" not in response.content.decode()
