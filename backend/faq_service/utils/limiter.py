# faq_service/utils/limiter.py
from slowapi import Limiter
from slowapi.util import get_remote_address
from faq_service.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
