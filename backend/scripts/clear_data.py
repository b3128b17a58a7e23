# backend/scripts/clear_data.py
import sys
import os

# --- Path Setup ---
script_dir = os.path.dirname(os.path.abspath(__file__))
backend_path = os.path.dirname(script_dir)
sys.path.append(backend_path)

# --- Database & Model Imports ---
from faq_service.database.connection import SessionLocal
from faq_service.models import FAQ
from faq_service.services.cache_service import CacheService

def clear_database_tables():
    """Deletes all FAQ records. Admin accounts are kept."""
    print("--- Clearing Database Tables ---")
    db = SessionLocal()
    try:
        num_faqs_deleted = db.query(FAQ).delete()
        print(f"Deleted {num_faqs_deleted} FAQ records.")

        db.commit()
        print("--- Database tables cleared successfully. ---")
    except Exception as e:
        print(f"An error occurred while clearing the database: {e}")
        db.rollback()
    finally:
        db.close()

def clear_read_cache():
    """Flushes cached FAQ lists so readers see the store again."""
    print("\n--- Clearing Read Cache ---")
    cache = CacheService()
    if not cache.enabled:
        print("Redis is not connected. Nothing to clear.")
        return
    cache.clear_all()
    print("--- Read cache flushed successfully. ---")


if __name__ == "__main__":
    clear_database_tables()
    clear_read_cache()
    print("\nOperation completed.")
