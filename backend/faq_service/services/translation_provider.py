# faq_service/services/translation_provider.py
import logging
import threading
from functools import lru_cache
from typing import Protocol

from deep_translator import GoogleTranslator

from faq_service.config import settings
from faq_service.utils.errors import TranslationProviderError

logger = logging.getLogger(__name__)


class TranslationProvider(Protocol):
    def translate(self, text: str, target_language: str) -> str:
        """Returns `text` translated to `target_language` or raises TranslationProviderError."""
        ...


class GoogleTranslationProvider:
    """
    Google Translate through deep_translator.

    deep_translator has no request timeout of its own, so each call runs on
    its own daemon thread and is abandoned after `timeout` seconds. A call
    that never returns only keeps its own thread; later calls are unaffected.
    """

    def __init__(self, timeout: float | None = None):
        self.timeout = timeout if timeout is not None else settings.TRANSLATION_TIMEOUT_SECONDS

    def _translate(self, text: str, target_language: str) -> str:
        return GoogleTranslator(source="auto", target=target_language).translate(text)

    def translate(self, text: str, target_language: str) -> str:
        outcome = {}

        def run():
            try:
                outcome["text"] = self._translate(text, target_language)
            except Exception as e:
                # deep_translator raises its own hierarchy plus requests errors
                outcome["error"] = e

        worker = threading.Thread(target=run, name=f"translate-{target_language}", daemon=True)
        worker.start()
        worker.join(self.timeout)

        if worker.is_alive():
            logger.warning("Translation to %s abandoned after %ss", target_language, self.timeout)
            raise TranslationProviderError(target_language, f"timed out after {self.timeout}s")
        if "error" in outcome:
            error = outcome["error"]
            raise TranslationProviderError(target_language, str(error)) from error

        translated = outcome.get("text")
        if not translated:
            raise TranslationProviderError(target_language, "empty translation")
        return translated.strip()


@lru_cache
def get_translation_provider() -> TranslationProvider:
    """FastAPI dependency; tests override it with a fake provider."""
    return GoogleTranslationProvider()
