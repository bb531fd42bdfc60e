"""
Context provider
Supplies the footer message from outside the page. The message either comes
from static configuration or from an upstream HTTP endpoint.
"""
import logging

import requests

from terra_site.core.errors import ContextUnavailableError

logger = logging.getLogger(__name__)


class ContextProvider:
    """Opaque source of the ``message`` value shown in the footer"""

    def __init__(self, message=None, url=None, timeout=2):
        self.message = message
        self.url = url
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        """Build a provider from a Flask config mapping"""
        return cls(
            message=config.get('CONTEXT_MESSAGE'),
            url=config.get('CONTEXT_MESSAGE_URL'),
            timeout=config.get('CONTEXT_TIMEOUT', 2),
        )

    def get_message(self):
        """Return the message text, or None when the provider has none"""
        if not self.url:
            return self.message

        try:
            response = requests.get(self.url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error("Context provider request to %s failed: %s", self.url, e)
            raise ContextUnavailableError(self.url, str(e)) from e

        return self._extract_message(response)

    @staticmethod
    def _extract_message(response):
        # JSON bodies carry {"message": ...}; anything else is the message itself
        try:
            payload = response.json()
        except ValueError:
            return response.text or None

        if isinstance(payload, dict):
            return payload.get('message')
        return None
