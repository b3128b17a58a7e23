# faq_service/models/faq.py
import enum
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, JSON, Enum
from sqlalchemy.sql import func
from faq_service.database.connection import Base


class FAQStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


def generate_id() -> str:
    return uuid.uuid4().hex


class FAQ(Base):
    """
    One question/answer pair with its translations.

    `translations` maps a language code to {"question": ..., "answer": ...}
    and always holds the entry for `original_language`.
    """
    __tablename__ = "faqs"

    id = Column(String(32), primary_key=True, default=generate_id)
    original_language = Column(String, nullable=False, default="en")
    status = Column(
        Enum(FAQStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        nullable=False,
        default=FAQStatus.DRAFT,
        index=True,
    )
    category = Column(String, nullable=True, index=True)
    target_languages = Column(JSON, nullable=False, default=list)
    translations = Column(JSON, nullable=False, default=dict)
    created_by = Column(String(32), ForeignKey("admins.id", ondelete="SET NULL"), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
