"""Domain-specific exceptions raised by the lookup client."""


class LookupServiceError(Exception):
    pass


class PokemonNotFound(LookupServiceError):
    pass


class UpstreamServerError(LookupServiceError):
    def __init__(self, status_code: int, detail: str = "") -> None:
        super().__init__(f"Lookup service answered {status_code}: {detail}".rstrip(": "))
        self.status_code = status_code


class LookupTransportError(LookupServiceError):
    pass


class PayloadDecodeError(LookupTransportError):
    pass
