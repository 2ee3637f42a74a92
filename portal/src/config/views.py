from django.shortcuts import render

from apps.contenido.models import Nodo


def home(request):
    nodos = Nodo.objects.filter(publicado=True, retirado=False).order_by('-fecha')[:10]
    return render(request, "home.html", {"nodos": nodos})
