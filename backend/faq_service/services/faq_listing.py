# faq_service/services/faq_listing.py
import logging

from sqlalchemy.orm import Session

from faq_service.models.faq import FAQ, FAQStatus
from faq_service.services.cache_service import ReadCache, get_cached_faq_list, set_cached_faq_list
from faq_service.services.translation_service import FALLBACK_LANGUAGE

logger = logging.getLogger(__name__)


def resolve_translation(faq: FAQ, language: str) -> dict | None:
    """
    Picks the question/answer shown for `language`.

    Falls back to English; records with neither are left out (None), never
    returned with an empty translation.
    """
    translations = faq.translations or {}
    entry = translations.get(language) or translations.get(FALLBACK_LANGUAGE)
    if not entry:
        return None

    return {
        "id": faq.id,
        "question": entry["question"],
        "answer": entry["answer"],
        "category": faq.category,
    }


def list_published_faqs(db: Session, cache: ReadCache, language: str) -> list[dict]:
    """
    Read-through listing of published FAQs in one language.

    A cache hit is returned as-is even if the store changed since; writes do
    not invalidate, entries just expire.
    """
    cached = get_cached_faq_list(cache, language)
    if cached is not None:
        logger.debug("FAQ list cache hit for %s", language)
        return cached

    faqs = db.query(FAQ).filter(FAQ.status == FAQStatus.PUBLISHED).order_by(FAQ.created_at).all()
    resolved = [item for item in (resolve_translation(faq, language) for faq in faqs) if item is not None]

    set_cached_faq_list(cache, language, resolved)
    return resolved
