from django.urls import path
from . import views

urlpatterns = [
    path('system/410', views.pagina_410, name='pagina_410'),
]
