class Gone(Exception):
    """
    El recurso existió pero fue eliminado de forma permanente (HTTP 410).

    Igual que Http404, se lanza desde una vista. `headers` se copian a la
    respuesta final (ej: {'Retry-After': '3600'}).
    """

    def __init__(self, mensaje="", headers=None):
        super().__init__(mensaje)
        self.headers = dict(headers or {})
