# faq_service/api/routes/faq.py
import logging
from datetime import datetime
from typing import Annotated, List, Literal

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from faq_service.config import settings
from faq_service.database.connection import get_db
from faq_service.models.admin import Admin
from faq_service.models.faq import FAQ, FAQStatus
from faq_service.services.cache_service import ReadCache, get_cache
from faq_service.services.faq_listing import list_published_faqs
from faq_service.services.translation_provider import TranslationProvider, get_translation_provider
from faq_service.services.translation_service import build_translations, needs_retranslation, source_text
from faq_service.utils.errors import NotFoundError, ValidationError
from faq_service.utils.language_detector import (
    AUTO_DETECT,
    DEFAULT_LANGUAGE,
    LANGUAGE_CODE_PATTERN,
    LanguageCode,
    detect_language,
    normalize_language_code,
)
from faq_service.utils.limiter import limiter
from faq_service.utils.security import get_current_admin

logger = logging.getLogger(__name__)

router = APIRouter()

# =======================
# 1. SCHEMAS
# =======================

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

def _dedupe(languages: list[str] | None) -> list[str] | None:
    # Order of first occurrence decides translation order
    if languages is None:
        return None
    return list(dict.fromkeys(languages))

def _not_blank(value: str | None) -> str | None:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value

NonBlankStr = Annotated[str, AfterValidator(_not_blank)]
LanguageList = Annotated[List[LanguageCode], AfterValidator(_dedupe)]

class Translation(BaseModel):
    question: str
    answer: str

class FAQCreate(CamelModel):
    question: NonBlankStr
    answer: NonBlankStr
    category: str | None = None
    target_languages: LanguageList = Field(default_factory=list)
    original_language: LanguageCode | Literal["auto"] = DEFAULT_LANGUAGE
    status: FAQStatus = FAQStatus.PUBLISHED

class FAQUpdate(CamelModel):
    question: NonBlankStr | None = None
    answer: NonBlankStr | None = None
    category: str | None = None
    target_languages: LanguageList | None = None
    original_language: LanguageCode | None = None
    status: FAQStatus | None = None

class FAQResponse(CamelModel):
    id: str
    original_language: str
    status: FAQStatus
    category: str | None
    target_languages: List[str]
    translations: dict[str, Translation]
    created_by: str | None
    created_at: datetime | None
    updated_at: datetime | None

class FAQEnvelope(BaseModel):
    message: str
    faq: FAQResponse | None

class FAQListItem(BaseModel):
    id: str
    question: str
    answer: str
    category: str | None

class FAQListResponse(BaseModel):
    message: str
    faqs: List[FAQListItem]

def _envelope(message: str, faq: FAQ | None) -> dict:
    return {
        "message": message,
        "faq": FAQResponse.model_validate(faq) if faq is not None else None,
    }

def _get_faq_or_404(db: Session, faq_id: str) -> FAQ:
    faq = db.query(FAQ).filter(FAQ.id == faq_id).first()
    if not faq:
        raise NotFoundError("FAQ not found")
    return faq

# =======================
# 2. PUBLIC ROUTES
# =======================

@router.get("", response_model=FAQListResponse)
@limiter.limit(settings.PUBLIC_RATE_LIMIT)
def list_faqs(
    request: Request,
    lang: str = Query(DEFAULT_LANGUAGE, pattern=f"^$|{LANGUAGE_CODE_PATTERN}"),
    db: Session = Depends(get_db),
    cache: ReadCache = Depends(get_cache),
):
    """All published FAQs in one language, falling back to English per FAQ."""
    # "?lang=" with no value reads as the default
    language = normalize_language_code(lang) if lang else DEFAULT_LANGUAGE
    faqs = list_published_faqs(db, cache, language)
    return {"message": "All FAQ fetched successfully", "faqs": faqs}

@router.get("/{faq_id}", response_model=FAQEnvelope)
def get_faq(faq_id: str, db: Session = Depends(get_db)):
    faq = _get_faq_or_404(db, faq_id)
    return _envelope("FAQ fetched successfully", faq)

# =======================
# 3. ADMIN ROUTES
# =======================

@router.post("", response_model=FAQEnvelope, status_code=status.HTTP_201_CREATED)
def create_faq(
    faq_data: FAQCreate,
    db: Session = Depends(get_db),
    provider: TranslationProvider = Depends(get_translation_provider),
    current_admin: Admin = Depends(get_current_admin),
):
    original_language = faq_data.original_language
    if original_language == AUTO_DETECT:
        original_language = detect_language(faq_data.question)
        logger.info("Detected original language %s", original_language)

    translations = build_translations(
        faq_data.question,
        faq_data.answer,
        faq_data.target_languages,
        original_language,
        provider,
    )
    faq = FAQ(
        category=faq_data.category,
        translations=translations,
        target_languages=faq_data.target_languages,
        original_language=original_language,
        status=faq_data.status,
        created_by=current_admin.id,
    )
    db.add(faq)
    db.commit()
    db.refresh(faq)

    logger.info("FAQ %s created with languages %s", faq.id, sorted(translations))
    return _envelope("FAQ created successfully", faq)

@router.put("/{faq_id}", response_model=FAQEnvelope)
def update_faq(
    faq_id: str,
    faq_data: FAQUpdate,
    db: Session = Depends(get_db),
    provider: TranslationProvider = Depends(get_translation_provider),
    current_admin: Admin = Depends(get_current_admin),
):
    faq = _get_faq_or_404(db, faq_id)

    if needs_retranslation(
        faq_data.question,
        faq_data.answer,
        faq_data.target_languages,
        faq_data.original_language,
        faq,
    ):
        current = source_text(faq)
        question = faq_data.question if faq_data.question is not None else current["question"]
        answer = faq_data.answer if faq_data.answer is not None else current["answer"]
        if not question or not answer:
            raise ValidationError("Question and answer are required")

        target_languages = (
            faq_data.target_languages if faq_data.target_languages is not None else list(faq.target_languages or [])
        )
        original_language = faq_data.original_language or faq.original_language or DEFAULT_LANGUAGE

        # Replaced wholesale, entries for dropped languages are not kept
        faq.translations = build_translations(question, answer, target_languages, original_language, provider)
        faq.target_languages = target_languages
        faq.original_language = original_language
        logger.info("FAQ %s re-translated", faq.id)

    if "category" in faq_data.model_fields_set:
        faq.category = faq_data.category
    if faq_data.status is not None:
        faq.status = faq_data.status

    db.commit()
    db.refresh(faq)
    return _envelope("FAQ updated successfully", faq)

@router.delete("/{faq_id}", response_model=FAQEnvelope)
def delete_faq(
    faq_id: str,
    db: Session = Depends(get_db),
    current_admin: Admin = Depends(get_current_admin),
):
    faq = db.query(FAQ).filter(FAQ.id == faq_id).first()
    if not faq:
        # Nothing to delete; reported as found
        return _envelope("FAQ deleted successfully", None)

    deleted = _envelope("FAQ deleted successfully", faq)
    db.delete(faq)
    db.commit()
    return deleted
