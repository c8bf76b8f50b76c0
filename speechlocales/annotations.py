"""Per-locale and per-voice annotations shown in the tables."""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List

from speechlocales.constants import (
    ADAPTATION_TYPES,
    CHILD_GENDER_SUFFIX,
    CHILD_VOICES,
    CUSTOM_SPEECH_SEPARATOR,
    FOOTNOTE_MULTILINGUAL,
    FOOTNOTE_NO_VISEME,
    FOOTNOTE_PREVIEW,
    FOOTNOTE_PREVIEW_INDIAN_REGION,
    INDIAN_REGION_LOCALES,
    PHRASE_LIST_LABEL,
    PHRASE_LIST_LOCALES,
    VISEME_LOCALES,
)
from speechlocales.locales import normalize_locale
from speechlocales.models import BaseModel, TtsVoice

logger = logging.getLogger(__name__)


def custom_speech_cell(locale: str, models: Iterable[BaseModel]) -> str:
    """Describe the custom speech options of one locale.

    Adaptation types of all models are deduplicated, sorted and mapped
    to their display names. ``Phrase list`` is appended last for locales
    that support phrase lists.

    Args:
        locale: Normalized locale.
        models: Base models of that locale which can still be adapted.

    Returns:
        str: Entries joined with a double line break, possibly empty.
    """
    adaptations = set()
    for model in models:
        adaptations.update(model.supports_adaptations_with)
    entries = [
        ADAPTATION_TYPES.get(adaptation, adaptation)
        for adaptation in sorted(adaptations)
    ]
    if locale in PHRASE_LIST_LOCALES:
        entries.append(PHRASE_LIST_LABEL)
    return CUSTOM_SPEECH_SEPARATOR.join(entries)


def create_custom_speech_cells(
    models: Iterable[BaseModel],
) -> Dict[str, str]:
    """Build the custom speech cell of every locale with base models."""
    by_locale = defaultdict(list)
    for model in models:
        if not model.locale:
            continue
        by_locale[normalize_locale(model.locale)].append(model)

    cells = {
        locale: custom_speech_cell(locale, locale_models)
        for locale, locale_models in by_locale.items()
    }
    logger.debug("Built custom speech cells for %d locales", len(cells))
    return cells


def voice_footnotes(voice: TtsVoice) -> List[int]:
    """Footnote markers of a voice, in display order."""
    locale = normalize_locale(voice.locale)
    markers = []
    if "Preview" in voice.status:
        if locale in INDIAN_REGION_LOCALES:
            markers.append(FOOTNOTE_PREVIEW_INDIAN_REGION)
        else:
            markers.append(FOOTNOTE_PREVIEW)
    if locale not in VISEME_LOCALES:
        markers.append(FOOTNOTE_NO_VISEME)
    if "Multilingual" in voice.short_name:
        markers.append(FOOTNOTE_MULTILINGUAL)
    return markers


def format_footnotes(markers: List[int]) -> str:
    if not markers:
        return ""
    return "<sup>" + ",".join(str(marker) for marker in markers) + "</sup>"


def voice_gender(voice: TtsVoice) -> str:
    """Gender shown for a voice; child voices get a suffix."""
    if voice.short_name in CHILD_VOICES:
        return voice.gender + CHILD_GENDER_SUFFIX
    return voice.gender
