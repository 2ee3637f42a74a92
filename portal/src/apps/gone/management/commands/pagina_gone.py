from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from apps.gone.forms import PaginaGoneForm
from apps.gone.models import ConfiguracionGone


class Command(BaseCommand):
    help = "Muestra o cambia la página 410 (gone) personalizada"

    def add_arguments(self, parser):
        grupo = parser.add_mutually_exclusive_group()
        grupo.add_argument("--ruta", help="Ruta interna o alias de la página, ej: /nodo/1/")
        grupo.add_argument("--limpiar", action="store_true", help="Volver a la página genérica")

    def handle(self, *args, **options):
        configuracion = ConfiguracionGone.cargar()

        if options["limpiar"]:
            configuracion.pagina_410 = ""
            configuracion.save()
            self.stdout.write(self.style.SUCCESS("Página 410 personalizada eliminada"))
        elif options["ruta"] is not None:
            # Mismas validaciones que el formulario, como superusuario (sin guardar en la BD)
            superusuario = get_user_model()(is_superuser=True, is_active=True)
            form = PaginaGoneForm(
                {"pagina_410": options["ruta"]},
                instance=configuracion,
                usuario=superusuario,
            )
            if not form.is_valid():
                raise CommandError(" ".join(form.errors["pagina_410"]))
            configuracion = form.save()
            self.stdout.write(self.style.SUCCESS(f"Página 410: {configuracion.pagina_410}"))
        else:
            self.stdout.write(f"Página 410: {configuracion.pagina_410 or '(genérica)'}")
