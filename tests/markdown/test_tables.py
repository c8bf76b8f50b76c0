"""Unit tests for the Markdown table builders."""

import pytest

from speechlocales.markdown.tables import (
    LanguageIdentificationTableBuilder,
    SttTableBuilder,
    TtsTableBuilder,
    VoiceStylesRolesTableBuilder,
)
from speechlocales.models import (
    BaseModel,
    FastTranscriptionLocales,
    SttLanguage,
    TtsVoice,
)


@pytest.fixture
def stt_languages():
    """Speech to text languages in service order."""
    return [
        SttLanguage(name="fr-fr", english_name="French (France)"),
        SttLanguage(name="en-us", english_name="English (United States)"),
        SttLanguage(name="en-gb", english_name="English (United Kingdom)"),
        SttLanguage(name="zh-cn-sichuan",
                    english_name="Chinese (Southwestern Mandarin, Simplified)"),
    ]


@pytest.fixture
def tts_voices():
    """Voices with fetch order already assigned."""
    return [
        TtsVoice(short_name="en-US-GuyNeural", gender="Male", locale="en-US",
                 locale_name="English (United States)", status="GA", order=2,
                 style_list=("cheerful", "angry")),
        TtsVoice(short_name="en-US-AriaNeural", gender="Female",
                 locale="en-US", locale_name="English (United States)",
                 status="GA", order=0, style_list=("chat",),
                 role_play_list=("Girl",)),
        TtsVoice(short_name="en-US-AnaNeural", gender="Female",
                 locale="en-US", locale_name="English (United States)",
                 status="GA", order=1),
        TtsVoice(short_name="pa-IN-VaaniNeural", gender="Female",
                 locale="pa-IN", locale_name="Punjabi (India)",
                 status="Preview", order=3),
    ]


class TestSttTableBuilder:
    """Tests for the speech to text table."""

    def test_header(self):
        lines = SttTableBuilder().build([])
        assert lines == [
            "| Locale (BCP-47) | Language | Fast transcription support "
            "| Custom speech support |",
            "| ----- | ----- | ----- | ----- |",
        ]

    def test_single_language(self):
        """A locale without extras is not supported for either."""
        lines = SttTableBuilder().build([
            SttLanguage(name="en-us", english_name="English (United States)")
        ])
        assert lines[2] == (
            "| `en-US` | English (United States) | No | Not supported |"
        )

    def test_rows(self, stt_languages):
        """Rows are ordered by locale and carry feature support."""
        fast = FastTranscriptionLocales(
            submit=("en-US",), transcribe=("en-us", "fr-FR")
        )
        models = [
            BaseModel(locale="en-US",
                      supports_adaptations_with=("Language", "Acoustic")),
            BaseModel(locale="zh-CN-sichuan", supports_adaptations_with=()),
        ]
        lines = SttTableBuilder().build(stt_languages, fast, models)

        assert lines[2:] == [
            "| `en-GB` | English (United Kingdom) | No | Not supported |",
            "| `en-US` | English (United States) | Yes | "
            "Audio + human-labeled transcript<br/><br/>Plain text"
            "<br/><br/>Phrase list |",
            "| `fr-FR` | French (France) | Yes | Not supported |",
            "| `zh-CN-sichuan` | Chinese (Southwestern Mandarin, Simplified)"
            " | No | Not supported |",
        ]


class TestLanguageIdentificationTableBuilder:
    """Tests for the language identification table."""

    def test_rows(self, stt_languages):
        lines = LanguageIdentificationTableBuilder().build(stt_languages)
        assert lines == [
            "| Language | Locales (BCP-47) |",
            "| ----- | ----- |",
            "| Chinese | `zh-CN-sichuan` |",
            "| English | `en-GB`<br/>`en-US` |",
            "| French | `fr-FR` |",
        ]

    def test_containment_over_matches(self):
        """A language contained in another name lists both locales."""
        languages = [
            SttLanguage(name="ar-EG", english_name="Arabic (Egypt)"),
            SttLanguage(name="ar-MA",
                        english_name="Arabic Moroccan (Morocco)"),
        ]
        lines = LanguageIdentificationTableBuilder().build(languages)
        assert lines[2:] == [
            "| Arabic | `ar-EG`<br/>`ar-MA` |",
            "| Arabic Moroccan | `ar-MA` |",
        ]


class TestTtsTableBuilder:
    """Tests for the text to speech table."""

    def test_single_voice(self):
        """A GA voice in a viseme locale has no footnotes."""
        stt = [SttLanguage(name="en-us",
                           english_name="English (United States)")]
        voices = [TtsVoice(locale="en-us",
                           locale_name="English (United States)",
                           short_name="en-US-AriaNeural", gender="Female",
                           status="GA", order=0)]
        lines = TtsTableBuilder().build(voices, stt)
        assert lines == [
            "| Locale (BCP-47) | Language | Text to speech voices |",
            "| ----- | ----- | ----- |",
            "| `en-US` | English (United States) | "
            "`en-US-AriaNeural` (Female) |",
        ]

    def test_voices_ordered_by_fetch_order(self, tts_voices):
        lines = TtsTableBuilder().build(tts_voices)
        assert lines[2:] == [
            "| `en-US` | English (United States) | "
            "`en-US-AriaNeural` (Female)<br/>"
            "`en-US-AnaNeural` (Female, Child)<br/>"
            "`en-US-GuyNeural` (Male) |",
            "| `pa-IN` | Punjabi (India) | "
            "`pa-IN-VaaniNeural`<sup>2,3</sup> (Female) |",
        ]

    def test_merged_locales(self, tts_voices, stt_languages):
        """Speech to text names win and locales without voices remain."""
        lines = TtsTableBuilder().build(tts_voices, stt_languages)
        locales = [line.split(" | ")[0] for line in lines[2:]]
        assert locales == [
            "| `en-GB`", "| `en-US`", "| `fr-FR`", "| `pa-IN`",
            "| `zh-CN-sichuan`",
        ]
        assert lines[2] == (
            "| `en-GB` | English (United Kingdom) | Not supported |"
        )

    def test_voice_without_locale_skipped(self):
        voices = [TtsVoice(short_name="Orphan", gender="Male", status="GA")]
        assert TtsTableBuilder().build(voices)[2:] == []

    def test_nameless_locale_kept_when_stt_names_it(self):
        """Voices of a nameless locale show once speech to text names it."""
        voices = [TtsVoice(short_name="xx-XX-TestNeural", gender="Male",
                           locale="xx-XX", status="GA")]
        assert TtsTableBuilder().build(voices)[2:] == []

        stt = [SttLanguage(name="xx-XX", english_name="Test (Region)")]
        assert TtsTableBuilder().build(voices, stt)[2:] == [
            "| `xx-XX` | Test (Region) | "
            "`xx-XX-TestNeural`<sup>3</sup> (Male) |",
        ]

    def test_voice_without_short_name_skipped(self):
        """Nameless voices are left out of their locale cell."""
        voices = [
            TtsVoice(short_name="en-US-AriaNeural", gender="Female",
                     locale="en-US", locale_name="English (United States)",
                     status="GA", order=0),
            TtsVoice(short_name="", gender="Male", locale="en-US",
                     locale_name="English (United States)", status="GA",
                     order=1),
        ]
        assert TtsTableBuilder().build(voices)[2:] == [
            "| `en-US` | English (United States) | "
            "`en-US-AriaNeural` (Female) |",
        ]


class TestVoiceStylesRolesTableBuilder:
    """Tests for the voice styles and roles table."""

    def test_rows(self, tts_voices):
        lines = VoiceStylesRolesTableBuilder().build(tts_voices)
        assert lines == [
            "| Voice | Styles |Roles |",
            "| ----- | ----- | ----- |",
            "| `en-US-AriaNeural` | `chat` | `Girl` |",
            "| `en-US-GuyNeural` | `cheerful`, `angry` | Not supported |",
        ]

    def test_roles_only(self):
        voices = [TtsVoice(short_name="zh-CN-YunyeNeural",
                           role_play_list=("Boy", "Girl"))]
        lines = VoiceStylesRolesTableBuilder().build(voices)
        assert lines[2] == (
            "| `zh-CN-YunyeNeural` | Not supported | `Boy`, `Girl` |"
        )
