from django.urls import path
from . import views

urlpatterns = [
    path('admin/config/system/site-information/', views.informacion_sitio, name='informacion_sitio'),
]
