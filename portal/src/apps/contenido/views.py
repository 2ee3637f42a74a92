from django.core.exceptions import PermissionDenied
from django.shortcuts import render, get_object_or_404

from apps.gone.excepciones import Gone
from .models import Nodo


def nodo_detalle(request, pk):
    nodo = get_object_or_404(Nodo, pk=pk)
    # Los middleware de apps.gone leen el nodo de la ruta desde aquí
    request.nodo = nodo

    if nodo.retirado:
        raise Gone(f"El nodo {nodo.pk} fue retirado")
    if not nodo.publicado and not request.user.has_perm('contenido.ver_no_publicado'):
        raise PermissionDenied

    return render(request, 'contenido/nodo_detalle.html', {'nodo': nodo})
