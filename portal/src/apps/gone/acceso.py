from __future__ import annotations

from dataclasses import dataclass, field
from functools import wraps
from typing import Optional

from django.core.exceptions import PermissionDenied
from django.utils.cache import patch_cache_control, patch_vary_headers

# Contextos de caché que dependen del usuario de la sesión
CONTEXTOS_POR_USUARIO = frozenset({'user', 'user.permissions', 'user.roles:authenticated'})


@dataclass(frozen=True)
class ResultadoAcceso:
    permitido: bool
    contextos: frozenset = field(default_factory=frozenset)
    etiquetas: frozenset = field(default_factory=frozenset)
    max_edad: Optional[int] = None

    @property
    def depende_del_usuario(self) -> bool:
        return bool(self.contextos & CONTEXTOS_POR_USUARIO)


def fusionar(existente: ResultadoAcceso, nuevo: ResultadoAcceso) -> ResultadoAcceso:
    """
    Agrega la cacheabilidad de `nuevo` a `existente`. La decisión de acceso
    de `existente` no cambia.
    """
    if existente.max_edad is None:
        max_edad = nuevo.max_edad
    elif nuevo.max_edad is None:
        max_edad = existente.max_edad
    else:
        max_edad = min(existente.max_edad, nuevo.max_edad)
    return ResultadoAcceso(
        permitido=existente.permitido,
        contextos=existente.contextos | nuevo.contextos,
        etiquetas=existente.etiquetas | nuevo.etiquetas,
        max_edad=max_edad,
    )


def _evaluar_reglas(reglas, usuario, etiqueta) -> ResultadoAcceso:
    permitido = True
    contextos = set()
    if reglas.get('autenticado'):
        contextos.add('user.roles:authenticated')
        permitido = permitido and usuario.is_authenticated
    permiso = reglas.get('permiso')
    if permiso:
        contextos.add('user.permissions')
        permitido = permitido and usuario.has_perm(permiso)
    return ResultadoAcceso(permitido, frozenset(contextos), frozenset({etiqueta}))


def regla_acceso(autenticado=False, permiso=None):
    """
    Declara las reglas de acceso de una vista.

    Las reglas quedan en la vista (`vista.reglas_acceso`) para que
    `evaluar_acceso` pueda consultarlas sin ejecutarla. Al ejecutarse, deja
    el resultado en `request.resultado_acceso` y lanza PermissionDenied si
    el usuario no tiene acceso.
    """
    reglas = {'autenticado': autenticado, 'permiso': permiso}

    def decorator(view_func):
        @wraps(view_func)
        def _wrapped(request, *args, **kwargs):
            match = getattr(request, 'resolver_match', None)
            etiqueta = f"route:{match.view_name}" if match else f"route:{view_func.__name__}"
            resultado = _evaluar_reglas(reglas, request.user, etiqueta)
            request.resultado_acceso = resultado
            if not resultado.permitido:
                raise PermissionDenied
            return view_func(request, *args, **kwargs)

        _wrapped.reglas_acceso = reglas
        return _wrapped

    return decorator


def evaluar_acceso(match, usuario) -> ResultadoAcceso:
    """Evalúa el acceso de `usuario` a la ruta resuelta `match`."""
    etiqueta = f"route:{match.view_name}"
    reglas = getattr(match.func, 'reglas_acceso', None)
    if reglas is None:
        return ResultadoAcceso(True, etiquetas=frozenset({etiqueta}))
    return _evaluar_reglas(reglas, usuario, etiqueta)


def aplicar_cacheabilidad(response, resultado: ResultadoAcceso):
    if resultado.depende_del_usuario:
        patch_vary_headers(response, ('Cookie',))
        patch_cache_control(response, private=True)
    if resultado.max_edad is not None:
        patch_cache_control(response, max_age=resultado.max_edad)
    return response
