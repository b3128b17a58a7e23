"""Tests for the translation fan-out and the update re-translation gate."""

from faq_service.models.faq import FAQ
from faq_service.services.translation_service import build_translations, needs_retranslation
from faq_service.utils.errors import TranslationProviderError
from tests.fakes import FakeTranslationProvider

QUESTION = "How do I reset my password?"
ANSWER = "Use the Forgot password link."


class NumberedProvider(FakeTranslationProvider):
    """Tags each result with its call number so overwrites can be told apart."""

    def translate(self, text: str, target_language: str) -> str:
        result = super().translate(text, target_language)
        return f"{result} #{len(self.calls)}"


class FailingAfterProvider(FakeTranslationProvider):
    """Succeeds for the first `ok_calls` calls, then fails for `language`."""

    def __init__(self, language: str, ok_calls: int, failing_languages=()) -> None:
        super().__init__(failing_languages=failing_languages)
        self.language = language
        self.ok_calls = ok_calls

    def translate(self, text: str, target_language: str) -> str:
        if target_language == self.language and len(self.calls) >= self.ok_calls:
            self.calls.append((text, target_language))
            raise TranslationProviderError(target_language, "quota exceeded")
        return super().translate(text, target_language)


class TestBuildTranslations:
    def test_seeds_original_language_verbatim(self):
        provider = FakeTranslationProvider()

        result = build_translations(QUESTION, ANSWER, [], "en", provider)

        assert result == {"en": {"question": QUESTION, "answer": ANSWER}}
        assert provider.calls == []

    def test_original_language_is_never_sent_to_provider(self):
        provider = FakeTranslationProvider()

        build_translations(QUESTION, ANSWER, ["en", "es", "en"], "en", provider)

        assert "en" not in provider.languages_called

    def test_all_targets_succeed(self):
        provider = FakeTranslationProvider()

        result = build_translations(QUESTION, ANSWER, ["en", "es"], "en", provider)

        assert set(result) == {"en", "es"}
        assert result["es"] == {"question": f"[es] {QUESTION}", "answer": f"[es] {ANSWER}"}

    def test_calls_follow_target_order_question_first(self):
        provider = FakeTranslationProvider()

        build_translations(QUESTION, ANSWER, ["fr", "de"], "en", provider)

        assert provider.calls == [
            (QUESTION, "fr"),
            (ANSWER, "fr"),
            (QUESTION, "de"),
            (ANSWER, "de"),
        ]

    def test_failed_language_falls_back_to_english(self):
        provider = FakeTranslationProvider(failing_languages={"de"})

        result = build_translations(QUESTION, ANSWER, ["es", "de"], "fr", provider)

        assert set(result) == {"fr", "es", "en"}
        assert result["fr"] == {"question": QUESTION, "answer": ANSWER}
        assert result["en"] == {"question": f"[en] {QUESTION}", "answer": f"[en] {ANSWER}"}

    def test_answer_failure_drops_the_language(self):
        provider = FakeTranslationProvider(failing_texts={ANSWER})

        result = build_translations(QUESTION, ANSWER, ["es"], "en", provider)

        assert result == {"en": {"question": QUESTION, "answer": ANSWER}}

    def test_english_source_is_not_overwritten_by_fallback(self):
        provider = FakeTranslationProvider(failing_languages={"es"})

        result = build_translations(QUESTION, ANSWER, ["en", "es", "fr"], "en", provider)

        assert result["en"] == {"question": QUESTION, "answer": ANSWER}
        assert "es" not in result
        assert "fr" in result
        assert provider.languages_called == ["es", "fr", "fr"]

    def test_last_fallback_wins(self):
        provider = NumberedProvider(failing_languages={"de", "it"})

        result = build_translations(QUESTION, ANSWER, ["de", "it"], "fr", provider)

        # de, fallback en (#2, #3), it, fallback en (#5, #6)
        assert result["en"] == {
            "question": f"[en] {QUESTION} #5",
            "answer": f"[en] {ANSWER} #6",
        }
        assert set(result) == {"fr", "en"}

    def test_fallback_overwrites_requested_english(self):
        provider = NumberedProvider(failing_languages={"de"})

        result = build_translations(QUESTION, ANSWER, ["en", "de"], "fr", provider)

        assert result["en"]["question"].endswith("#4")

    def test_failed_fallback_keeps_previous_english(self):
        # First two "en" calls translate the requested English entry, later ones fail
        provider = FailingAfterProvider("en", ok_calls=2, failing_languages={"de"})

        result = build_translations(QUESTION, ANSWER, ["en", "de"], "fr", provider)

        assert result["en"] == {"question": f"[en] {QUESTION}", "answer": f"[en] {ANSWER}"}
        assert "de" not in result

    def test_everything_failing_still_returns_source(self):
        provider = FakeTranslationProvider(failing_languages={"de", "en"})

        result = build_translations(QUESTION, ANSWER, ["de"], "fr", provider)

        assert result == {"fr": {"question": QUESTION, "answer": ANSWER}}


def _existing(**overrides) -> FAQ:
    values = dict(
        id="abc",
        original_language="en",
        target_languages=["en", "es"],
        translations={
            "en": {"question": QUESTION, "answer": ANSWER},
            "es": {"question": "P", "answer": "R"},
        },
        category="general",
    )
    values.update(overrides)
    return FAQ(**values)


class TestNeedsRetranslation:
    def test_nothing_supplied(self):
        assert needs_retranslation(None, None, None, None, _existing()) is False

    def test_same_values(self):
        assert needs_retranslation(QUESTION, ANSWER, ["en", "es"], "en", _existing()) is False

    def test_question_changed(self):
        assert needs_retranslation("New?", None, None, None, _existing()) is True

    def test_answer_changed(self):
        assert needs_retranslation(None, "New answer", None, None, _existing()) is True

    def test_target_languages_changed(self):
        assert needs_retranslation(None, None, ["en", "es", "fr"], None, _existing()) is True

    def test_target_language_order_matters(self):
        assert needs_retranslation(None, None, ["es", "en"], None, _existing()) is True

    def test_original_language_changed(self):
        assert needs_retranslation(None, None, None, "es", _existing()) is True

    def test_compares_against_original_language_entry(self):
        existing = _existing(original_language="es")

        assert needs_retranslation("P", "R", None, None, existing) is False
        assert needs_retranslation(QUESTION, None, None, None, existing) is True
