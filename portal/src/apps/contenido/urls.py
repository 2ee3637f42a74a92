from django.urls import path
from . import views

urlpatterns = [
    path('nodo/<int:pk>/', views.nodo_detalle, name='nodo_detalle'),
]
