"""
Services built on top of the Square models.
"""

from .webhook_handler import WebhookProcessor

__all__ = ["WebhookProcessor"]
