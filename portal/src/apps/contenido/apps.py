from django.apps import AppConfig


class ContenidoConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.contenido"
    verbose_name = "Contenido"
