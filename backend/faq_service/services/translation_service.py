# faq_service/services/translation_service.py
import logging
from typing import Iterable

from faq_service.models.faq import FAQ
from faq_service.services.translation_provider import TranslationProvider
from faq_service.utils.errors import TranslationProviderError

logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

# {"en": {"question": "...", "answer": "..."}, "es": {...}}
TranslationMap = dict[str, dict[str, str]]


def _translate_pair(provider: TranslationProvider, question: str, answer: str, target_language: str) -> dict[str, str]:
    # Question first, then answer; one call at a time
    translated_question = provider.translate(question, target_language)
    translated_answer = provider.translate(answer, target_language)
    return {"question": translated_question, "answer": translated_answer}


def build_translations(
    question: str,
    answer: str,
    target_languages: Iterable[str],
    original_language: str,
    provider: TranslationProvider,
) -> TranslationMap:
    """
    Builds the translations map for one FAQ.

    The source text is stored verbatim under `original_language` and is never
    sent to the provider. Every other target language is best-effort: when a
    language fails, the texts are translated to English instead and written to
    the "en" key, so several failures leave only the last fallback. A failed
    fallback is logged and leaves the map as it was.

    When `original_language` is English the fallback is skipped, since the
    seeded entry already is the English text.
    """
    translations: TranslationMap = {
        original_language: {"question": question, "answer": answer},
    }

    for lang in target_languages:
        if lang == original_language:
            continue

        try:
            translations[lang] = _translate_pair(provider, question, answer, lang)
            continue
        except TranslationProviderError as e:
            logger.warning("Translation failed for language %s: %s", lang, e)

        if original_language == FALLBACK_LANGUAGE:
            continue

        try:
            translations[FALLBACK_LANGUAGE] = _translate_pair(provider, question, answer, FALLBACK_LANGUAGE)
        except TranslationProviderError as e:
            logger.warning("Fallback translation to %s failed after %s: %s", FALLBACK_LANGUAGE, lang, e)

    return translations


def source_text(faq: FAQ) -> dict[str, str]:
    """The authoritative question/answer of a stored FAQ, or empty strings if missing."""
    entry = (faq.translations or {}).get(faq.original_language) or {}
    return {"question": entry.get("question", ""), "answer": entry.get("answer", "")}


def needs_retranslation(
    new_question: str | None,
    new_answer: str | None,
    new_target_languages: list[str] | None,
    new_original_language: str | None,
    existing: FAQ,
) -> bool:
    """
    True when an update changes anything the translations are derived from.

    Fields left out of the update (None) count as unchanged. Category and
    status never trigger a re-translation.
    """
    current = source_text(existing)
    if new_question is not None and new_question != current["question"]:
        return True
    if new_answer is not None and new_answer != current["answer"]:
        return True
    if new_target_languages is not None and list(new_target_languages) != list(existing.target_languages or []):
        return True
    if new_original_language is not None and new_original_language != existing.original_language:
        return True
    return False
