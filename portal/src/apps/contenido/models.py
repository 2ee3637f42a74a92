from django.db import models


class Nodo(models.Model):
    titulo = models.CharField(max_length=200)
    cuerpo = models.TextField(blank=True, default="")
    tipo = models.CharField(max_length=50, default="pagina")  # ej: pagina, empleado
    publicado = models.BooleanField(default=True)
    retirado = models.BooleanField(default=False)  # Eliminado de forma permanente: responde 410
    fecha = models.DateTimeField(auto_now_add=True)

    class Meta:
        permissions = [
            ("ver_no_publicado", "Puede ver contenido no publicado"),
        ]

    def __str__(self):
        return self.titulo
