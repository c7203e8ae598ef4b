"""Value Object TrackingNumber - identificador legible de una reservación."""

import re
import secrets
import string
from dataclasses import dataclass

from app.domain.constants import TRACKING_NUMBER_LENGTH, TRACKING_NUMBER_PREFIX


@dataclass(frozen=True)
class TrackingNumber:
    """
    Value Object inmutable que representa el número de seguimiento.

    Formato: TRK- seguido de 8 caracteres base 36 en mayúsculas (ej: TRK-A1B2C3D4).
    No se verifica unicidad contra la base de datos.
    """

    value: str

    ALLOWED_CHARS = string.ascii_uppercase + string.digits
    PATTERN = re.compile(
        rf"^{re.escape(TRACKING_NUMBER_PREFIX)}[A-Z0-9]{{{TRACKING_NUMBER_LENGTH}}}$"
    )

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise ValueError(f"tracking_number inválido: {self.value!r}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> "TrackingNumber":
        """Genera un número de seguimiento aleatorio."""
        code = "".join(
            secrets.choice(cls.ALLOWED_CHARS) for _ in range(TRACKING_NUMBER_LENGTH)
        )
        return cls(value=f"{TRACKING_NUMBER_PREFIX}{code}")
