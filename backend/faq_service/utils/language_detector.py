from typing import Annotated

from langdetect import DetectorFactory, detect, LangDetectException
from pydantic import AfterValidator, StringConstraints

from faq_service.config import settings

# langdetect is probabilistic; a fixed seed keeps results stable between calls
DetectorFactory.seed = 0

DEFAULT_LANGUAGE = "en"
AUTO_DETECT = "auto"

# "en", "es", "pt-BR", "zh-CN" ...
LANGUAGE_CODE_PATTERN = r"^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})?$"


def normalize_language_code(code: str) -> str:
    """
    Canonical casing so "EN" and "en" land on the same translation and cache key.
    Primary subtag lower case, region upper case ("zh-CN"), script title case ("zh-Hant").
    """
    primary, _, subtag = code.strip().partition("-")
    primary = primary.lower()
    if not subtag:
        return primary
    if len(subtag) == 2 and subtag.isalpha():
        subtag = subtag.upper()
    elif len(subtag) == 4 and subtag.isalpha():
        subtag = subtag.title()
    return f"{primary}-{subtag}"


LanguageCode = Annotated[
    str,
    StringConstraints(strip_whitespace=True, pattern=LANGUAGE_CODE_PATTERN),
    AfterValidator(normalize_language_code),
]


def detect_language(text: str) -> str:
    """Best guess at the language of `text`, limited to the supported whitelist."""
    try:
        lang = detect(text)
    except LangDetectException:
        return DEFAULT_LANGUAGE

    if lang in settings.SUPPORTED_DETECTION_LANGUAGES:
        return lang
    return DEFAULT_LANGUAGE  # Fallback to English for 'et', 'sv', etc.
