"""
Manejador de webhooks de Square.

Verifica la firma HMAC de las notificaciones entrantes y las convierte en
los modelos tipados correspondientes según el tipo de evento.
"""

import base64
import binascii
import hashlib
import hmac
import json
import logging
from typing import Any, Dict, Optional, Type, Union

from pydantic import ValidationError

from square_customers.core.config import get_settings
from square_customers.core.logging_config import LogContext, log_webhook_received
from square_customers.schemas.common import SquareModel
from square_customers.schemas.webhook_schemas import (
    LocationCreatedWebhookResponse,
    LocationUpdatedWebhookResponse,
    LocationWebhookEventType,
)
from square_customers.utils.error_handler import (
    DeserializationException,
    ValidationException,
    WebhookSignatureException,
)

logger = logging.getLogger("square_customers.webhooks")

WEBHOOK_EVENT_MODELS: Dict[str, Type[SquareModel]] = {
    LocationWebhookEventType.LOCATION_CREATED.value: LocationCreatedWebhookResponse,
    LocationWebhookEventType.LOCATION_UPDATED.value: LocationUpdatedWebhookResponse,
}

WebhookPayload = Union[bytes, str, Dict[str, Any]]


class WebhookProcessor:
    """
    Procesador de webhooks de Square.
    """

    def __init__(self, signature_key: Optional[str] = None, notification_url: Optional[str] = None):
        """
        Inicializa el procesador.

        Args:
            signature_key: Clave de firma de la suscripción (por defecto desde settings)
            notification_url: URL registrada en Square para la suscripción
        """
        settings = get_settings()
        self.signature_key = signature_key or settings.SQUARE_WEBHOOK_SIGNATURE_KEY
        self.notification_url = notification_url or settings.SQUARE_WEBHOOK_NOTIFICATION_URL or ""

    def compute_signature(self, body: bytes) -> str:
        """
        Calcula la firma esperada: base64(HMAC-SHA256(clave, url + cuerpo)).

        Args:
            body: Cuerpo crudo del webhook

        Returns:
            str: Firma en base64

        Raises:
            WebhookSignatureException: Si no hay clave de firma configurada
        """
        if not self.signature_key:
            raise WebhookSignatureException("No webhook signature key configured")

        digest = hmac.new(
            self.signature_key.encode("utf-8"),
            self.notification_url.encode("utf-8") + body,
            hashlib.sha256,
        ).digest()
        return base64.b64encode(digest).decode("ascii")

    def verify_signature(self, body: bytes, signature: Optional[str]) -> bool:
        """
        Verifica la firma HMAC del webhook.

        Args:
            body: Cuerpo crudo del webhook en bytes
            signature: Valor del header x-square-hmacsha256-signature

        Returns:
            bool: True si la firma es válida
        """
        if not signature:
            return False

        expected = base64.b64decode(self.compute_signature(body))
        try:
            received = base64.b64decode(signature, validate=True)
        except (binascii.Error, ValueError):
            logger.warning("Webhook signature is not valid base64")
            return False

        # Comparación segura contra timing attacks
        return hmac.compare_digest(expected, received)

    def parse_event(self, payload: WebhookPayload) -> SquareModel:
        """
        Convierte el payload en el modelo del tipo de evento.

        Args:
            payload: Cuerpo del webhook (bytes, str o dict ya decodificado)

        Returns:
            SquareModel: Evento tipado (ej: LocationUpdatedWebhookResponse)

        Raises:
            DeserializationException: Si el JSON es inválido o no coincide con el schema
            ValidationException: Si el tipo de evento no está soportado
        """
        if isinstance(payload, (bytes, str)):
            try:
                data = json.loads(payload)
            except ValueError as e:
                raise DeserializationException(
                    f"Webhook body is not valid JSON: {e}",
                    raw_body=payload.decode("utf-8", "replace") if isinstance(payload, bytes) else payload,
                ) from e
        else:
            data = payload

        if not isinstance(data, dict):
            raise DeserializationException("Webhook body must be a JSON object", raw_body=str(data))

        event_type = data.get("type")
        model = WEBHOOK_EVENT_MODELS.get(event_type) if isinstance(event_type, str) else None
        if model is None:
            raise ValidationException(
                f"Unsupported webhook event type: {event_type}",
                field="type",
                invalid_value=event_type,
                expected_format=", ".join(sorted(WEBHOOK_EVENT_MODELS)),
            )

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise DeserializationException(
                f"Failed to deserialize {model.__name__}: {e}",
                model_name=model.__name__,
                raw_body=json.dumps(data, default=str),
            ) from e

    def process(self, body: bytes, signature: Optional[str]) -> SquareModel:
        """
        Verifica y procesa un webhook entrante.

        Args:
            body: Cuerpo crudo del webhook
            signature: Valor del header x-square-hmacsha256-signature

        Returns:
            SquareModel: Evento tipado

        Raises:
            WebhookSignatureException: Si la firma falta o es inválida
        """
        if not self.verify_signature(body, signature):
            logger.warning("Rejected webhook with invalid signature")
            raise WebhookSignatureException("Invalid webhook signature")

        event = self.parse_event(body)

        with LogContext(event_id=event.event_id):
            log_webhook_received(event.type.value, event.merchant_id, location_id=event.location_id)

        return event
