"""
Sistema de manejo de errores del cliente.

Este módulo define todas las excepciones que el cliente puede lanzar y
proporciona utilidades para loggearlas de manera consistente. Ningún error
se reintenta ni se recupera localmente: todos se propagan al llamador.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from square_customers.schemas.common import SquareError

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados para el cliente.
    """

    # Errores generales
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Errores de transporte
    SQUARE_CONNECTION_FAILED = "SQUARE_CONNECTION_FAILED"
    SQUARE_API_ERROR = "SQUARE_API_ERROR"
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Errores de datos
    DESERIALIZATION_ERROR = "DESERIALIZATION_ERROR"

    # Errores de webhooks
    INVALID_WEBHOOK_SIGNATURE = "INVALID_WEBHOOK_SIGNATURE"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones del cliente.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
        is_critical: bool = False,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            status_code: Código HTTP asociado
            severity: Severidad del error
            is_retryable: Si la operación podría reintentarse (solo informativo)
            is_critical: Si requiere alerta inmediata
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.is_critical = is_critical
        self.timestamp = datetime.now(timezone.utc)
        self.traceback_str = traceback.format_exc()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "is_critical": self.is_critical,
            "timestamp": self.timestamp.isoformat(),
            "traceback": self.traceback_str,
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class ValidationException(AppException):
    """
    Excepción para argumentos inválidos detectados antes de llamar a Square.
    """

    def __init__(
        self,
        message: str,
        field: str,
        invalid_value: Any = None,
        expected_format: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de validación.

        Args:
            message: Mensaje de error
            field: Campo que falló la validación
            invalid_value: Valor que causó el error
            expected_format: Formato esperado
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            status_code=422,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )
        self.field = field
        self.invalid_value = invalid_value
        self.expected_format = expected_format

        self.details.update(
            {
                "field": field,
                "invalid_value": str(invalid_value) if invalid_value is not None else None,
                "expected_format": expected_format,
            }
        )


class SquareConnectionException(AppException):
    """
    Excepción para fallos de conectividad con Square (red, timeouts, sesión).
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        method: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de conexión.

        Args:
            message: Mensaje de error
            endpoint: URL que falló
            method: Método HTTP
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.SQUARE_CONNECTION_FAILED,
            status_code=503,
            severity=ErrorSeverity.HIGH,
            is_retryable=True,
            **kwargs,
        )
        self.endpoint = endpoint
        self.method = method

        self.details.update({"endpoint": endpoint, "method": method})


class SquareAPIException(AppException):
    """
    Excepción para respuestas no exitosas (no-2xx) de la API de Square.
    """

    def __init__(
        self,
        message: str,
        api_response_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        method: Optional[str] = None,
        errors: Optional[List[SquareError]] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de Square API.

        Args:
            message: Mensaje de error
            api_response_code: Código HTTP devuelto por Square
            endpoint: Endpoint que falló
            method: Método HTTP
            errors: Errores devueltos en el cuerpo de la respuesta
            **kwargs: Argumentos adicionales para AppException
        """
        error_code = ErrorCode.SQUARE_API_ERROR
        is_retryable = False
        severity = ErrorSeverity.MEDIUM

        if api_response_code == 429:
            error_code = ErrorCode.RATE_LIMIT_EXCEEDED
            severity = ErrorSeverity.LOW
            is_retryable = True
        elif api_response_code and api_response_code >= 500:
            severity = ErrorSeverity.HIGH
            is_retryable = True

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=api_response_code or 503,
            severity=severity,
            is_retryable=is_retryable,
            **kwargs,
        )

        self.api_response_code = api_response_code
        self.endpoint = endpoint
        self.method = method
        self.errors = errors or []

        self.details.update(
            {
                "api_response_code": api_response_code,
                "endpoint": endpoint,
                "method": method,
                "errors": [error.model_dump(mode="json", exclude_none=True) for error in self.errors],
            }
        )

    @property
    def rate_limited(self) -> bool:
        """Si Square rechazó la petición por rate limiting."""
        return self.error_code == ErrorCode.RATE_LIMIT_EXCEEDED


class DeserializationException(AppException):
    """
    Excepción para respuestas o payloads que no coinciden con el schema esperado.
    """

    def __init__(
        self,
        message: str,
        model_name: Optional[str] = None,
        raw_body: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de deserialización.

        Args:
            message: Mensaje de error
            model_name: Modelo que se intentaba construir
            raw_body: Cuerpo recibido (truncado en details)
            **kwargs: Argumentos adicionales para AppException
        """
        super().__init__(
            message=message,
            error_code=ErrorCode.DESERIALIZATION_ERROR,
            status_code=502,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.model_name = model_name
        self.raw_body = raw_body

        self.details.update(
            {
                "model": model_name,
                "raw_body": raw_body[:500] if raw_body else raw_body,
            }
        )


class WebhookSignatureException(AppException):
    """
    Excepción para webhooks con firma HMAC ausente o inválida.
    """

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_WEBHOOK_SIGNATURE,
            status_code=401,
            severity=ErrorSeverity.HIGH,
            **kwargs,
        )


# === FUNCIONES DE UTILIDAD ===


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
                "is_retryable": exception.is_retryable,
                "is_critical": exception.is_critical,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
