# faq_service/models/__init__.py
from faq_service.models.admin import Admin
from faq_service.models.faq import FAQ, FAQStatus
