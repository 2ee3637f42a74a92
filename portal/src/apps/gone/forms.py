from django import forms
from django.urls import Resolver404, resolve
from django.utils.translation import gettext_lazy as _

from apps.sitio.models import AliasRuta
from .acceso import evaluar_acceso
from .models import ConfiguracionGone


class PaginaGoneForm(forms.ModelForm):
    class Meta:
        model = ConfiguracionGone
        fields = ['pagina_410']

    def __init__(self, *args, usuario=None, **kwargs):
        # Usuario que edita: la ruta debe ser accesible para él
        self.usuario = usuario
        super().__init__(*args, **kwargs)
        self.fields['pagina_410'].widget = forms.TextInput(attrs={'class': 'form-control', 'size': 40})

    def clean_pagina_410(self):
        ruta = (self.cleaned_data.get('pagina_410') or '').strip()
        if not ruta:
            return ''

        ruta = AliasRuta.ruta_por_alias(ruta)
        if not ruta.startswith('/'):
            raise forms.ValidationError(
                _("La ruta '%(ruta)s' debe comenzar con una barra."), params={'ruta': ruta}
            )

        try:
            match = resolve(ruta)
        except Resolver404:
            match = None
        if match is None or self.usuario is None or not evaluar_acceso(match, self.usuario).permitido:
            raise forms.ValidationError(
                _("La ruta '%(ruta)s' no es válida o no tiene acceso a ella."), params={'ruta': ruta}
            )
        return ruta
