"""Tests for translation lookup."""

import pytest

from analytics_core.translation import TranslationFormatError, TranslationResult, Translator


@pytest.fixture
def translator() -> Translator:
    return Translator(
        catalog={
            "Foo": {"Greeting": "Hello %s", "Percent": "100%", "Visits": "%1$s visits on %2$s"},
            "General": {"Error": "An error occurred: %s"},
        }
    )


class TestTranslate:
    def test_missing_key_returned_unchanged(self, translator: Translator):
        assert translator.translate("Foo_Bar") == "Foo_Bar"

    def test_missing_plugin_returned_unchanged(self, translator: Translator):
        assert translator.translate("Unknown_Key") == "Unknown_Key"

    def test_key_without_separator(self, translator: Translator):
        assert translator.translate("Greeting") == "Greeting"
        assert translator.has_translation("Greeting") is False

    def test_registered_key_is_formatted(self, translator: Translator):
        assert translator.translate("Foo_Greeting", "World") == "Hello World"

    def test_dotted_key(self, translator: Translator):
        assert translator.translate("Foo.Greeting", "World") == "Hello World"

    def test_no_args_returns_template_unformatted(self, translator: Translator):
        assert translator.translate("Foo_Greeting") == "Hello %s"
        assert translator.translate("Foo_Percent") == "100%"

    def test_positional_arguments(self, translator: Translator):
        assert translator.translate("Foo_Visits", 12, "Monday") == "12 visits on Monday"

    def test_missing_key_is_formatted_with_args(self, translator: Translator):
        assert translator.translate("Raw %s message", "x") == "Raw x message"

    def test_add_translations_merges(self, translator: Translator):
        translator.add_translations("Foo", {"Bye": "Goodbye %s"})

        assert translator.translate("Foo_Bye", "Ann") == "Goodbye Ann"
        assert translator.translate("Foo_Greeting", "Ann") == "Hello Ann"
        assert set(translator.get_plugin_translations("Foo")) == {"Greeting", "Percent", "Visits", "Bye"}

    def test_later_load_overrides(self, translator: Translator):
        translator.add_translations("Foo", {"Greeting": "Hi %s"})
        assert translator.translate("Foo_Greeting", "Bob") == "Hi Bob"


class TestFormatMismatch:
    def test_lenient_returns_template(self, translator: Translator):
        assert translator.translate("Foo_Greeting", "a", "b") == "Hello %s"
        assert translator.translate("Foo_Visits", 1) == "%1$s visits on %2$s"

    def test_strict_raises(self):
        translator = Translator(strict=True, catalog={"Foo": {"Greeting": "Hello %s"}})
        with pytest.raises(TranslationFormatError):
            translator.translate("Foo_Greeting", "a", "b")


class TestTranslateException:
    def test_never_raises_in_strict_mode(self):
        translator = Translator(strict=True, catalog={"General": {"Error": "An error occurred: %s %s"}})
        assert translator.translate_exception("General_Error", "only one") == "General_Error"

    def test_translates_when_possible(self, translator: Translator):
        assert translator.translate_exception("General_Error", "disk full") == "An error occurred: disk full"

    def test_missing_key(self, translator: Translator):
        assert translator.translate_exception("Nope_Missing") == "Nope_Missing"


class TestTranslationResult:
    def test_try_translate_success(self, translator: Translator):
        result = translator.try_translate("Foo_Greeting", "World")
        assert result.is_ok
        assert result.unwrap() == "Hello World"

    def test_try_translate_failure(self):
        translator = Translator(strict=True, catalog={"Foo": {"Greeting": "Hello %s"}})
        result = translator.try_translate("Foo_Greeting")
        assert result.is_ok
        result = translator.try_translate("Foo_Greeting", 1, 2)
        assert not result.is_ok
        assert isinstance(result.error, TranslationFormatError)
        assert result.unwrap_or("fallback") == "fallback"
        assert result.or_else(lambda e: type(e).__name__) == "TranslationFormatError"
        with pytest.raises(TranslationFormatError):
            result.unwrap()

    def test_result_combinators_on_success(self):
        result = TranslationResult.success("ok")
        assert result.unwrap_or("fallback") == "ok"
        assert result.or_else(lambda e: "recovered") == "ok"
