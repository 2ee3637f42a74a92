from django.contrib import messages
from django.contrib.auth.decorators import permission_required
from django.db import transaction
from django.shortcuts import render, redirect
from django.utils.translation import gettext as _

from apps.sitio.forms import InformacionSitioForm
from apps.sitio.models import ConfiguracionSitio
from .forms import PaginaGoneForm
from .models import ConfiguracionGone


def pagina_410(request):
    """Contenido 410 por defecto."""
    return render(request, 'gone/pagina_410.html', {
        'mensaje': _("La página solicitada ya no existe."),
    })


@permission_required('sitio.change_configuracionsitio')
def informacion_sitio_gone(request):
    """
    Formulario de información del sitio con el campo de la página 410.
    Reemplaza a `apps.sitio.views.informacion_sitio` (ver rutas.alterar_rutas).
    """
    sitio = ConfiguracionSitio.cargar()
    gone = ConfiguracionGone.cargar()
    if request.method == 'POST':
        form = InformacionSitioForm(request.POST, instance=sitio)
        form_gone = PaginaGoneForm(request.POST, instance=gone, usuario=request.user)
        if form.is_valid() and form_gone.is_valid():
            with transaction.atomic():
                form.save()
                form_gone.save()
            messages.success(request, _("La configuración ha sido guardada."))
            return redirect('informacion_sitio')
    else:
        form = InformacionSitioForm(instance=sitio)
        form_gone = PaginaGoneForm(instance=gone, usuario=request.user)
    return render(request, 'gone/informacion_sitio.html', {
        'form': form,
        'form_gone': form_gone,
    })
