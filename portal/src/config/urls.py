from django.contrib import admin
from django.contrib.auth import views as auth_views
from django.urls import path, include

from apps.gone.rutas import alterar_rutas
from . import views

urlpatterns = [
    path('', views.home, name='home'),
    # Antes que admin/: el catch-all del admin captura todo lo que empieza por admin/
    path('', include('apps.sitio.urls')),
    path('', include('apps.contenido.urls')),
    path('', include('apps.gone.urls')),
    path('admin/', admin.site.urls),
    path('login/', auth_views.LoginView.as_view(), name='login'),
    path('logout/', auth_views.LogoutView.as_view(), name='logout'),
]

# El formulario de información del sitio se reemplaza por el que incluye la página 410
urlpatterns = alterar_rutas(urlpatterns)
