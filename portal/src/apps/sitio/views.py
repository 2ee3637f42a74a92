from django.contrib import messages
from django.contrib.auth.decorators import permission_required
from django.shortcuts import render, redirect
from django.utils.translation import gettext as _

from .forms import InformacionSitioForm
from .models import ConfiguracionSitio


@permission_required('sitio.change_configuracionsitio')
def informacion_sitio(request):
    configuracion = ConfiguracionSitio.cargar()
    if request.method == 'POST':
        form = InformacionSitioForm(request.POST, instance=configuracion)
        if form.is_valid():
            form.save()
            messages.success(request, _("La configuración ha sido guardada."))
            return redirect('informacion_sitio')
    else:
        form = InformacionSitioForm(instance=configuracion)
    return render(request, 'sitio/informacion_sitio.html', {'form': form})
