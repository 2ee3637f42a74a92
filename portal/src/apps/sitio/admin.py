from django.contrib import admin
from .models import ConfiguracionSitio, AliasRuta


@admin.register(ConfiguracionSitio)
class ConfiguracionSitioAdmin(admin.ModelAdmin):
    list_display = ('nombre', 'correo', 'pagina_403', 'pagina_404')


@admin.register(AliasRuta)
class AliasRutaAdmin(admin.ModelAdmin):
    list_display = ('alias', 'ruta')
    search_fields = ('alias', 'ruta')
