"""Interface TrackingNumberGenerator - Puerto para generación de números de seguimiento."""

from abc import ABC, abstractmethod

from app.domain.constants import TRACKING_NUMBER_LENGTH, TRACKING_NUMBER_PREFIX
from app.domain.value_objects import TrackingNumber


class TrackingNumberGenerator(ABC):
    """
    Puerto para generación de números de seguimiento.

    Permite inyectar implementaciones fake para testing determinista.
    """

    @abstractmethod
    def generate(self) -> str:
        """
        Genera un número de seguimiento.

        Returns:
            String con formato TRK-XXXXXXXX.
        """
        raise NotImplementedError


class RandomTrackingNumberGenerator(TrackingNumberGenerator):
    """Implementación real basada en secrets; no consulta estado externo."""

    def generate(self) -> str:
        return str(TrackingNumber.generate())


class FakeTrackingNumberGenerator(TrackingNumberGenerator):
    """
    Implementación fake para testing.

    Genera valores predecibles para pruebas deterministas.
    """

    def __init__(self, prefix: str = "TEST"):
        if len(prefix) >= TRACKING_NUMBER_LENGTH:
            raise ValueError(f"prefix must be shorter than {TRACKING_NUMBER_LENGTH} characters")
        self._prefix = prefix.upper()
        self._counter = 0
        self._next: str | None = None

    def generate(self) -> str:
        if self._next:
            value, self._next = self._next, None
            return value
        self._counter += 1
        width = TRACKING_NUMBER_LENGTH - len(self._prefix)
        digits = f"{self._counter:0{width}d}"
        if len(digits) > width:
            raise OverflowError(f"fake tracking numbers exhausted after {self._counter - 1}")
        return str(TrackingNumber(f"{TRACKING_NUMBER_PREFIX}{self._prefix}{digits}"))

    def set_next(self, value: str) -> None:
        """Configura el próximo número a retornar."""
        self._next = value
