"""Unit tests for locale normalization and locale table merging."""

import pytest

from speechlocales.locales import (
    combine_locales,
    extract_stt_locales,
    extract_tts_locales,
    normalize_language,
    normalize_locale,
)
from speechlocales.models import SttLanguage, TtsVoice


class TestNormalizeLocale:
    """Tests for normalize_locale."""

    @pytest.mark.parametrize("raw, expected", [
        ("fr-fr", "fr-FR"),
        ("en-US", "en-US"),
        ("zh-cn-liaoning", "zh-CN-liaoning"),
        ("zh-CN-SICHUAN", "zh-CN-sichuan"),
        ("zh-cn-Shandong", "zh-CN-shandong"),
        ("sr-latn-rs", "sr-LATN-RS"),
        ("wuu-cn", "wuu-CN"),
        ("EN-us", "EN-US"),
    ])
    def test_normalize(self, raw, expected):
        """Region and variant segments are upper-cased, accents lower."""
        assert normalize_locale(raw) == expected

    def test_empty_string(self):
        """Empty input passes through."""
        assert normalize_locale("") == ""

    def test_empty_segments(self):
        """Empty segments are kept."""
        assert normalize_locale("en--us") == "en--US"

    def test_idempotent(self):
        """Normalizing twice changes nothing."""
        once = normalize_locale("zh-cn-henan")
        assert normalize_locale(once) == once


class TestNormalizeLanguage:
    """Tests for normalize_language."""

    @pytest.mark.parametrize("locale, expected", [
        ("ca-ES", "Catalan"),
        ("tr-TR", "Turkish (Türkiye)"),
        ("sw-KE", "Kiswahili (Kenya)"),
        ("sw-TZ", "Kiswahili (Tanzania)"),
        ("zu-ZA", "isiZulu (South Africa)"),
    ])
    def test_overrides(self, locale, expected):
        """Fixed names replace the reported ones."""
        assert normalize_language(locale, "Reported") == expected

    def test_substring_match(self):
        """Locales containing an override key are renamed too."""
        assert normalize_language("tr-TR-whatever", "Turkish") == (
            "Turkish (Türkiye)"
        )

    def test_unrelated_locale(self):
        """Other locales keep their name."""
        assert normalize_language("en-US", "English (United States)") == (
            "English (United States)"
        )

    def test_case_sensitive(self):
        """Matching uses the locale as given."""
        assert normalize_language("tr-tr", "Turkish") == "Turkish"


class TestExtractLocales:
    """Tests for extract_stt_locales and extract_tts_locales."""

    def test_stt_locales(self):
        """Locales and names are normalized."""
        languages = [
            SttLanguage(name="en-us", english_name="English (United States)"),
            SttLanguage(name="tr-TR", english_name="Turkish (Turkey)"),
        ]
        assert extract_stt_locales(languages) == {
            "en-US": "English (United States)",
            "tr-TR": "Turkish (Türkiye)",
        }

    def test_stt_duplicate_locale(self):
        """Duplicate locales after normalization are rejected."""
        languages = [
            SttLanguage(name="en-us", english_name="English"),
            SttLanguage(name="en-US", english_name="English"),
        ]
        with pytest.raises(ValueError, match="en-US"):
            extract_stt_locales(languages)

    def test_stt_skips_empty_locale(self):
        """Entries without a locale are skipped."""
        languages = [SttLanguage(name="", english_name="Unknown")]
        assert extract_stt_locales(languages) == {}

    def test_tts_first_voice_wins(self):
        """The first voice of a locale names it."""
        voices = [
            TtsVoice(locale="en-US", locale_name="English (US)"),
            TtsVoice(locale="en-us", locale_name="English (Other)"),
            TtsVoice(locale="de-DE", locale_name="German (Germany)"),
        ]
        assert extract_tts_locales(voices) == {
            "en-US": "English (US)",
            "de-DE": "German (Germany)",
        }

    def test_tts_skips_missing_fields(self):
        """Voices without locale or locale name are skipped."""
        voices = [
            TtsVoice(locale="", locale_name="English"),
            TtsVoice(locale="fr-FR", locale_name=""),
            TtsVoice(locale="fr-FR", locale_name="French (France)"),
        ]
        assert extract_tts_locales(voices) == {"fr-FR": "French (France)"}


class TestCombineLocales:
    """Tests for combine_locales."""

    def test_primary_wins(self):
        """Names from the first table win on conflict."""
        stt = {"en-US": "English (United States)"}
        tts = {"en-US": "English (US)", "ar-EG": "Arabic (Egypt)"}

        assert combine_locales(stt, tts) == {
            "ar-EG": "Arabic (Egypt)",
            "en-US": "English (United States)",
        }
        assert combine_locales(tts, stt)["en-US"] == "English (US)"

    def test_same_keys_both_orders(self):
        """Argument order only affects names."""
        first = {"fr-FR": "French", "de-DE": "German"}
        second = {"fr-FR": "Francais", "it-IT": "Italian"}
        assert list(combine_locales(first, second)) == list(
            combine_locales(second, first)
        )

    def test_ordinal_order(self):
        """Keys are sorted by code point, upper case before lower."""
        combined = combine_locales(
            {"zh-CN": "a", "en-US": "b", "en-GB": "c"},
            {"en-US-x": "d", "EN-US": "e", "zh-CN-sichuan": "f"},
        )
        keys = list(combined)
        assert keys == [
            "EN-US", "en-GB", "en-US", "en-US-x", "zh-CN", "zh-CN-sichuan"
        ]
        assert all(a < b for a, b in zip(keys, keys[1:]))

    def test_empty(self):
        """Empty tables combine to an empty table."""
        assert combine_locales({}, {}) == {}
