"""Builders for the four Markdown reference tables.

Every builder returns the table as a list of lines: the header row, the
separator row and one row per locale or voice.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Sequence

from speechlocales.annotations import (
    create_custom_speech_cells,
    format_footnotes,
    voice_footnotes,
    voice_gender,
)
from speechlocales.constants import CELL_LINE_BREAK, NOT_SUPPORTED
from speechlocales.locales import (
    combine_locales,
    extract_stt_locales,
    extract_tts_locales,
    normalize_locale,
)
from speechlocales.models import (
    BaseModel,
    FastTranscriptionLocales,
    SttLanguage,
    TtsVoice,
)

logger = logging.getLogger(__name__)


class MarkdownTableBuilder:
    """Base class holding the table header and row formatting."""

    COLUMNS: Sequence[str] = ()

    def header(self) -> List[str]:
        """Return the header and separator rows."""
        return [
            "| " + " | ".join(self.COLUMNS) + " |",
            "| " + " | ".join("-----" for _ in self.COLUMNS) + " |",
        ]

    @staticmethod
    def row(cells: Iterable[str]) -> str:
        return "| " + " | ".join(cells) + " |"

    @staticmethod
    def code(value: str) -> str:
        return f"`{value}`"


class SttTableBuilder(MarkdownTableBuilder):
    """Speech to text locales with fast transcription and custom speech
    support."""

    COLUMNS = (
        "Locale (BCP-47)",
        "Language",
        "Fast transcription support",
        "Custom speech support",
    )

    def build(
        self,
        languages: Iterable[SttLanguage],
        fast_transcription: Optional[FastTranscriptionLocales] = None,
        base_models: Iterable[BaseModel] = (),
    ) -> List[str]:
        locales = combine_locales(extract_stt_locales(languages), {})
        transcribe = set()
        if fast_transcription is not None:
            transcribe = {
                normalize_locale(locale)
                for locale in fast_transcription.transcribe
            }
        custom_speech_cells = create_custom_speech_cells(base_models)

        lines = self.header()
        for locale, language in locales.items():
            lines.append(self.row([
                self.code(locale),
                language or NOT_SUPPORTED,
                "Yes" if locale in transcribe else "No",
                custom_speech_cells.get(locale) or NOT_SUPPORTED,
            ]))
        logger.info("Built speech to text table with %d locales", len(locales))
        return lines


class LanguageIdentificationTableBuilder(MarkdownTableBuilder):
    """Languages available for language identification and their
    locales."""

    COLUMNS = ("Language", "Locales (BCP-47)")

    @staticmethod
    def base_language(name: str) -> str:
        """Strip the parenthesized region, e.g. ``English (Canada)``."""
        return name.split("(")[0].strip()

    def build(self, languages: Iterable[SttLanguage]) -> List[str]:
        locales = combine_locales(extract_stt_locales(languages), {})
        base_languages = sorted(
            {self.base_language(name) for name in locales.values()}
        )

        lines = self.header()
        for base_language in base_languages:
            # Containment also matches names that extend another name
            matching = [
                self.code(locale)
                for locale, name in locales.items()
                if base_language in name
            ]
            lines.append(self.row([
                base_language, CELL_LINE_BREAK.join(matching)
            ]))
        logger.info(
            "Built language identification table with %d languages",
            len(base_languages)
        )
        return lines


class TtsTableBuilder(MarkdownTableBuilder):
    """Text to speech voices per locale."""

    COLUMNS = ("Locale (BCP-47)", "Language", "Text to speech voices")

    def voice_markdown(self, voice: TtsVoice) -> str:
        """Render one voice as ``name<sup>..</sup> (gender)``."""
        footnotes = format_footnotes(voice_footnotes(voice))
        return f"{self.code(voice.short_name)}{footnotes} ({voice_gender(voice)})"

    def create_voice_cells(
        self, voices: Iterable[TtsVoice]
    ) -> Dict[str, str]:
        by_locale = defaultdict(list)
        for voice in voices:
            if not voice.locale or not voice.short_name:
                continue
            by_locale[normalize_locale(voice.locale)].append(voice)

        cells = {}
        for locale, locale_voices in by_locale.items():
            locale_voices.sort(key=lambda voice: voice.order)
            cells[locale] = CELL_LINE_BREAK.join(
                self.voice_markdown(voice) for voice in locale_voices
            )
        return cells

    def build(
        self,
        voices: Iterable[TtsVoice],
        languages: Optional[Iterable[SttLanguage]] = None,
    ) -> List[str]:
        """Build the table.

        Args:
            voices: Voices to list.
            languages: Speech to text languages. When given, their
                locales are merged in and their names take priority.

        Returns:
            List[str]: Table lines.
        """
        voices = list(voices)
        tts_locales = extract_tts_locales(voices)
        if languages is None:
            locales = combine_locales(tts_locales, {})
        else:
            locales = combine_locales(
                extract_stt_locales(languages), tts_locales
            )
        voice_cells = self.create_voice_cells(voices)

        lines = self.header()
        for locale, language in locales.items():
            lines.append(self.row([
                self.code(locale),
                language or NOT_SUPPORTED,
                voice_cells.get(locale) or NOT_SUPPORTED,
            ]))
        logger.info("Built text to speech table with %d locales", len(locales))
        return lines


class VoiceStylesRolesTableBuilder(MarkdownTableBuilder):
    """Voices supporting speaking styles or role play."""

    COLUMNS = ("Voice", "Styles", "Roles")

    def header(self) -> List[str]:
        # Published header has no space before "Roles"
        return ["| Voice | Styles |Roles |", "| ----- | ----- | ----- |"]

    def list_cell(self, values: Sequence[str]) -> str:
        if not values:
            return NOT_SUPPORTED
        return ", ".join(self.code(value) for value in values)

    def build(self, voices: Iterable[TtsVoice]) -> List[str]:
        selected = sorted(
            (
                voice for voice in voices
                if voice.short_name
                and (voice.style_list or voice.role_play_list)
            ),
            key=lambda voice: voice.short_name,
        )

        lines = self.header()
        for voice in selected:
            lines.append(self.row([
                self.code(voice.short_name),
                self.list_cell(voice.style_list),
                self.list_cell(voice.role_play_list),
            ]))
        logger.info(
            "Built voice styles and roles table with %d voices", len(selected)
        )
        return lines
