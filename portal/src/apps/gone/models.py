from django.db import models
from django.utils.translation import gettext_lazy as _


class ConfiguracionGone(models.Model):
    """Ruta de la página 410 personalizada. Existe una sola fila (pk=1)."""
    pagina_410 = models.CharField(
        _("página 410 (gone) por defecto"),
        max_length=255,
        blank=True,
        default="",
        help_text=_(
            "Esta página se muestra cuando el documento solicitado ya no existe "
            "para el usuario actual. Dejar en blanco para mostrar una página genérica."
        ),
    )

    class Meta:
        verbose_name = _("configuración de página 410")
        verbose_name_plural = _("configuración de página 410")

    def __str__(self):
        return self.pagina_410 or "-"

    @classmethod
    def cargar(cls):
        obj, _created = cls.objects.get_or_create(pk=1)
        return obj
