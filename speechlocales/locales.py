"""Locale normalization and locale table merging.

Upstream endpoints do not agree on locale casing or display names. The
helpers here turn every locale into the canonical ``ll-RR[-variant]``
form and merge the locale sets of different endpoints into a single
ordered mapping.
"""

import logging
from typing import Dict, Iterable, Mapping

from speechlocales.constants import CHINESE_ACCENTS, LANGUAGE_OVERRIDES
from speechlocales.models import SttLanguage, TtsVoice

logger = logging.getLogger(__name__)


def normalize_locale(locale: str) -> str:
    """Normalize the casing of a locale code.

    The language segment is kept as is. Every following segment is
    upper-cased, except Chinese dialect accents which are lower-cased.

    Args:
        locale: Raw locale, e.g. ``zh-cn-liaoning``.

    Returns:
        str: Normalized locale, e.g. ``zh-CN-liaoning``.
    """
    segments = locale.split("-")
    normalized = [segments[0]]
    for segment in segments[1:]:
        if segment.lower() in CHINESE_ACCENTS:
            normalized.append(segment.lower())
        else:
            normalized.append(segment.upper())
    return "-".join(normalized)


def normalize_language(locale: str, language: str) -> str:
    """Replace the display name of locales with a fixed name.

    Matching is substring containment on the locale, so ``tr-TR-x``
    is renamed as well.

    Args:
        locale: Locale the name belongs to.
        language: Display name reported by the service.

    Returns:
        str: Fixed display name, or ``language`` unchanged.
    """
    for key, name in LANGUAGE_OVERRIDES:
        if key in locale:
            return name
    return language


def extract_stt_locales(languages: Iterable[SttLanguage]) -> Dict[str, str]:
    """Map each speech to text locale to its display name.

    Raises:
        ValueError: If two entries share the same normalized locale.
    """
    locales = {}
    for language in languages:
        if not language.name:
            logger.debug("Skipping speech to text entry without locale")
            continue
        locale = normalize_locale(language.name)
        if locale in locales:
            raise ValueError(f"Duplicate speech to text locale: {locale}")
        locales[locale] = normalize_language(
            language.name, language.english_name
        )
    return locales


def extract_tts_locales(voices: Iterable[TtsVoice]) -> Dict[str, str]:
    """Map each text to speech locale to the name of its first voice."""
    locales = {}
    for voice in voices:
        # Nameless locales are dropped unless speech to text names them
        if not voice.locale or not voice.locale_name:
            continue
        locale = normalize_locale(voice.locale)
        if locale not in locales:
            locales[locale] = normalize_language(
                voice.locale, voice.locale_name
            )
    return locales


def combine_locales(
    primary: Mapping[str, str],
    secondary: Mapping[str, str],
) -> Dict[str, str]:
    """Union two locale tables.

    Names from ``primary`` win when both define a locale. The result is
    ordered by locale using ordinal string comparison.
    """
    combined = dict(primary)
    for locale, name in secondary.items():
        combined.setdefault(locale, name)
    logger.debug(
        "Combined %d + %d locales into %d",
        len(primary), len(secondary), len(combined)
    )
    return {locale: combined[locale] for locale in sorted(combined)}
