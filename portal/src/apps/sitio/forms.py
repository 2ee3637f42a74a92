from django import forms
from .models import ConfiguracionSitio


class InformacionSitioForm(forms.ModelForm):
    class Meta:
        model = ConfiguracionSitio
        fields = ['nombre', 'correo', 'pagina_403', 'pagina_404']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        for field in self.fields.values():
            field.widget.attrs['class'] = 'form-control'

    def _clean_ruta(self, nombre):
        ruta = (self.cleaned_data.get(nombre) or '').strip()
        if ruta and not ruta.startswith('/'):
            raise forms.ValidationError(
                "La ruta '%(ruta)s' debe comenzar con una barra.", params={'ruta': ruta}
            )
        return ruta

    def clean_pagina_403(self):
        return self._clean_ruta('pagina_403')

    def clean_pagina_404(self):
        return self._clean_ruta('pagina_404')
