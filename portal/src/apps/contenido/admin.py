from django.contrib import admin
from .models import Nodo


@admin.register(Nodo)
class NodoAdmin(admin.ModelAdmin):
    list_display = ('titulo', 'tipo', 'publicado', 'retirado', 'fecha')
    list_filter = ('tipo', 'publicado', 'retirado')
    search_fields = ('titulo',)
