"""Markdown table generation for speech locales and voices."""

from speechlocales.markdown.tables import (
    LanguageIdentificationTableBuilder,
    MarkdownTableBuilder,
    SttTableBuilder,
    TtsTableBuilder,
    VoiceStylesRolesTableBuilder,
)

__all__ = [
    "LanguageIdentificationTableBuilder",
    "MarkdownTableBuilder",
    "SttTableBuilder",
    "TtsTableBuilder",
    "VoiceStylesRolesTableBuilder",
]
