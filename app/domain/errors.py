"""Excepciones de dominio para el sistema de reservaciones de propiedades."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None, error: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        self.error = error or message
        super().__init__(self.message)


# === Errores de Configuración ===


class ConfigurationError(DomainError):
    """Faltan credenciales del almacenamiento; fatal hasta corregir la configuración."""

    def __init__(self, missing: list[str]):
        super().__init__(
            message="Server configuration error",
            code="CONFIGURATION_ERROR",
        )
        self.missing = missing


# === Errores de Validación ===


class ValidationError(DomainError):
    """Error de validación de datos de entrada."""

    def __init__(self, field: str, message: str, error: str | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            error=error or f"Invalid {field}",
        )
        self.field = field


class MissingRequiredFieldsError(ValidationError):
    """Faltan campos obligatorios en la solicitud de reservación."""

    def __init__(self, missing: list[str]):
        super().__init__(
            field=", ".join(missing),
            message="Please fill in all required fields to submit your reservation",
            error="Missing required fields",
        )
        self.code = "MISSING_REQUIRED_FIELDS"
        self.missing = missing


class InvalidIncomeError(ValidationError):
    """El ingreso mensual debe ser mayor a cero."""

    def __init__(self):
        super().__init__(
            field="monthly_income",
            message="Monthly income must be greater than zero",
            error="Invalid income",
        )
        self.code = "INVALID_INCOME"


class InvalidYearsEmployedError(ValidationError):
    """Los años de empleo no pueden ser negativos."""

    def __init__(self):
        super().__init__(
            field="years_employed",
            message="Years employed cannot be negative",
            error="Invalid years employed",
        )
        self.code = "INVALID_YEARS_EMPLOYED"


# === Errores de Archivos ===


class UploadPolicyError(DomainError):
    """El archivo no cumple la política de carga."""


class InvalidFileTypeError(UploadPolicyError):
    """Tipo MIME no permitido."""

    def __init__(self, content_type: str | None, allowed: frozenset[str]):
        super().__init__(
            message=(
                f"Invalid file type: {content_type or 'unknown'}. "
                f"Allowed types: {', '.join(sorted(allowed))}"
            ),
            code="INVALID_FILE_TYPE",
        )
        self.content_type = content_type


class FileTooLargeError(UploadPolicyError):
    """El archivo excede el tamaño máximo."""

    def __init__(self, size: int, max_size: int):
        super().__init__(
            message=f"File too large: {size} bytes. Maximum size is {max_size // (1024 * 1024)}MB",
            code="FILE_TOO_LARGE",
        )
        self.size = size
        self.max_size = max_size


class UploadFailedError(DomainError):
    """Falló la escritura en el almacenamiento de objetos."""

    def __init__(self, detail: str):
        super().__init__(
            message=f"Failed to upload ID file: {detail}",
            code="UPLOAD_FAILED",
            error=detail,
        )
        self.detail = detail


# === Errores de Persistencia ===


class PersistenceError(DomainError):
    """Falló una operación del almacén de datos; conserva el mensaje original."""

    def __init__(self, operation: str, detail: str):
        super().__init__(
            message=f"Failed to {operation}: {detail}",
            code="PERSISTENCE_ERROR",
            error=detail,
        )
        self.operation = operation
        self.detail = detail


class ReservationNotFoundError(PersistenceError):
    """La reservación no existe."""

    def __init__(self, reservation_id: str, operation: str = "find reservation"):
        super().__init__(operation=operation, detail=f"Reservation not found: {reservation_id}")
        self.code = "RESERVATION_NOT_FOUND"
        self.reservation_id = reservation_id
