"""Errores tipados del Core.

Por qué una jerarquía propia:
- Los handlers capturan `ApiError` sin conocer httpx ni el formato de cada API.
- El texto de cada excepción es lo que ve el usuario en la región de salida.
"""

from __future__ import annotations


class ApiError(Exception):
    """Base de todos los fallos de una operación."""


class NetworkError(ApiError):
    """El transporte no pudo completar la petición (DNS, conexión, timeout)."""


class RequestFailed(ApiError):
    """La respuesta HTTP llegó con un status fuera del rango 2xx."""

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"Request failed ({status})")


class ParseError(ApiError):
    """El cuerpo no es JSON válido o no tiene la forma esperada."""

    def __init__(self, message: str = "Invalid JSON response") -> None:
        super().__init__(message)


class MissingField(ApiError):
    """Falta (o es falsy) un campo requerido de la respuesta."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Missing required field: {name}")


class MissingRate(ApiError):
    """La respuesta de tipos de cambio no trae alguna de las monedas mostradas."""

    def __init__(self, message: str = "Rates missing in response") -> None:
        super().__init__(message)
