from django.db import models
from django.utils.translation import gettext_lazy as _


class ConfiguracionSitio(models.Model):
    """Información general del sitio. Existe una sola fila (pk=1)."""
    nombre = models.CharField(_("nombre del sitio"), max_length=200, default="Portal")
    correo = models.EmailField(_("correo del sitio"), blank=True, default="")
    pagina_403 = models.CharField(_("página 403 (acceso denegado)"), max_length=255, blank=True, default="")
    pagina_404 = models.CharField(_("página 404 (no encontrada)"), max_length=255, blank=True, default="")

    class Meta:
        verbose_name = _("configuración del sitio")
        verbose_name_plural = _("configuración del sitio")

    def __str__(self):
        return self.nombre

    @classmethod
    def cargar(cls):
        obj, _created = cls.objects.get_or_create(pk=1)
        return obj


class AliasRuta(models.Model):
    alias = models.CharField(max_length=255, unique=True)
    ruta = models.CharField(max_length=255)  # Ruta interna, ej: /nodo/3/

    class Meta:
        verbose_name = _("alias de ruta")
        verbose_name_plural = _("alias de rutas")

    def __str__(self):
        return f"{self.alias} -> {self.ruta}"

    @classmethod
    def ruta_por_alias(cls, valor):
        """Devuelve la ruta interna del alias, o el valor tal cual si no hay alias."""
        alias = cls.objects.filter(alias=valor).first()
        return alias.ruta if alias else valor
