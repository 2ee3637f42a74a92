from django.contrib import admin
from .models import ConfiguracionGone


@admin.register(ConfiguracionGone)
class ConfiguracionGoneAdmin(admin.ModelAdmin):
    list_display = ('pk', 'pagina_410')

    def has_add_permission(self, request):
        # Una sola fila, creada por la migración
        return not ConfiguracionGone.objects.exists()
