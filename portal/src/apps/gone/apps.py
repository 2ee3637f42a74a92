from django.apps import AppConfig


class GoneConfig(AppConfig):
    """
    Páginas personalizadas para respuestas 410 (Gone), con soporte
    adicional para 403/404.
    """
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.gone"
    verbose_name = "Páginas Gone (410)"
