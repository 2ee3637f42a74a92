def despachar_subpeticion(request, match):
    """
    Ejecuta la vista de `match` dentro del mismo proceso, como lo hace el
    handler de Django: sin pasar de nuevo por los middleware ni por la red.
    """
    response = match.func(request, *match.args, **match.kwargs)
    if response is None:
        raise ValueError(
            "La vista %s no devolvió un HttpResponse, devolvió None." % match._func_path
        )
    if hasattr(response, 'render') and callable(response.render) and not response.is_rendered:
        response = response.render()
    return response
