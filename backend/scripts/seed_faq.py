# backend/scripts/seed_faq.py
import sys
import os

# Path Setup
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

from faq_service.database.connection import SessionLocal, engine, Base
from faq_service.models import FAQ, FAQStatus
from faq_service.services.translation_provider import GoogleTranslationProvider
from faq_service.services.translation_service import build_translations

TARGET_LANGUAGES = ["en", "es", "fr", "de", "hi"]

# 1. Define the starter Q&A pairs (English source text)
faq_data = [
    {
        "question": "How do I reset my password?",
        "answer": "Open the login page, choose **Forgot password** and follow the link we email you. The link is valid for 1 hour.",
        "category": "account",
    },
    {
        "question": "Which payment methods do you accept?",
        "answer": "We accept credit and debit cards, bank transfers and PayPal.",
        "category": "billing",
    },
    {
        "question": "Can I change my plan later?",
        "answer": "Yes. Upgrades take effect immediately; downgrades apply from the next billing cycle.",
        "category": "billing",
    },
    {
        "question": "How do I contact support?",
        "answer": "Write to support from the Help page. We answer within one business day.",
        "category": "general",
    },
]

def seed_faqs():
    print("--- Seeding FAQs ---")
    Base.metadata.create_all(bind=engine)

    provider = GoogleTranslationProvider()
    db = SessionLocal()
    count = 0
    try:
        for item in faq_data:
            print(f"Translating: {item['question']}")
            translations = build_translations(
                item["question"],
                item["answer"],
                TARGET_LANGUAGES,
                "en",
                provider,
            )
            db.add(FAQ(
                category=item["category"],
                translations=translations,
                target_languages=TARGET_LANGUAGES,
                original_language="en",
                status=FAQStatus.PUBLISHED,
            ))
            count += 1
            print(f"  Languages: {', '.join(sorted(translations))}")
        db.commit()
    except Exception as e:
        print(f"An error occurred while seeding: {e}")
        db.rollback()
        raise
    finally:
        db.close()

    print(f"--- Success! Seeded {count} FAQs ---")

if __name__ == "__main__":
    seed_faqs()
