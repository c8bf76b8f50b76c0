"""Records returned by the speech service metadata endpoints.

Each record is built from the raw JSON payload with ``from_dict``.
Missing fields never fail parsing: strings default to empty, lists to
empty tuples and dates to ``None``.
"""

import logging
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_FRACTION_PATTERN = re.compile(r"\.(\d+)")


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO 8601 timestamp from the service.

    Naive timestamps are taken as UTC. Fractions are padded or
    truncated to microseconds.

    Args:
        value: Timestamp string, e.g. ``2026-01-15T00:00:00Z``.

    Returns:
        Optional[datetime]: Timezone aware datetime, or None when the
        value is missing or unparsable.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    text = _FRACTION_PATTERN.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"), text
    )
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        logger.warning("Ignoring unparsable timestamp: %s", value)
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _strings(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


@dataclass
class SttLanguage:
    """Speech to text language entry."""

    name: str = ""
    english_name: str = ""
    native_name: str = ""
    direction: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SttLanguage":
        return cls(
            name=_str(data, "name"),
            english_name=_str(data, "englishName"),
            native_name=_str(data, "nativeName"),
            direction=_str(data, "direction"),
        )


@dataclass
class TtsVoice:
    """Text to speech voice entry.

    Attributes:
        short_name: Voice identifier, e.g. ``en-US-AriaNeural``.
        gender: Gender as reported by the service.
        locale: Voice locale.
        locale_name: Display name of the voice locale.
        status: Release status, e.g. ``GA`` or ``Preview``.
        order: Position in the fetched voice list after status
            filtering, used to order voices within a locale.
        style_list: Speaking styles, empty when not supported.
        role_play_list: Role play roles, empty when not supported.
    """

    short_name: str = ""
    gender: str = ""
    locale: str = ""
    locale_name: str = ""
    status: str = ""
    order: int = 0
    style_list: Tuple[str, ...] = ()
    role_play_list: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TtsVoice":
        # The list endpoint uses PascalCase, older payloads camelCase
        def pick(*keys):
            for key in keys:
                value = _str(data, key)
                if value:
                    return value
            return ""

        order = data.get("order", 0)
        return cls(
            short_name=pick("shortName", "ShortName"),
            gender=pick("gender", "Gender"),
            locale=pick("locale", "Locale"),
            locale_name=pick("localeName", "LocaleName"),
            status=pick("status", "Status"),
            order=order if isinstance(order, int) else 0,
            style_list=_strings(data.get("styleList", data.get("StyleList"))),
            role_play_list=_strings(
                data.get("rolePlayList", data.get("RolePlayList"))
            ),
        )


@dataclass
class BaseModel:
    """Custom speech base model entry."""

    locale: str = ""
    status: str = ""
    display_name: str = ""
    self_url: str = ""
    adaptation_deprecation: Optional[datetime] = None
    transcription_deprecation: Optional[datetime] = None
    supports_adaptations_with: Tuple[str, ...] = ()
    supported_output_formats: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseModel":
        properties = data.get("properties") or {}
        dates = properties.get("deprecationDates") or {}
        features = properties.get("features") or {}
        return cls(
            locale=_str(data, "locale"),
            status=_str(data, "status"),
            display_name=_str(data, "displayName"),
            self_url=_str(data, "self"),
            adaptation_deprecation=parse_datetime(
                dates.get("adaptationDateTime")
            ),
            transcription_deprecation=parse_datetime(
                dates.get("transcriptionDateTime")
            ),
            supports_adaptations_with=_strings(
                features.get("supportsAdaptationsWith")
            ),
            supported_output_formats=_strings(
                features.get("supportedOutputFormats")
            ),
        )

    def is_adaptable(self, now: datetime) -> bool:
        """Check whether adaptation is still possible at ``now``."""
        return (
            self.adaptation_deprecation is not None
            and self.adaptation_deprecation > now
        )


@dataclass
class FastTranscriptionLocales:
    """Locales supported by fast transcription."""

    submit: Tuple[str, ...] = ()
    transcribe: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FastTranscriptionLocales":
        return cls(
            submit=_strings(data.get("Submit")),
            transcribe=_strings(data.get("Transcribe")),
        )


@dataclass
class SpeechCatalog:
    """Everything fetched from the service in one run."""

    stt_languages: List[SttLanguage] = field(default_factory=list)
    fast_transcription: FastTranscriptionLocales = field(
        default_factory=FastTranscriptionLocales
    )
    base_models: List[BaseModel] = field(default_factory=list)
    tts_voices: List[TtsVoice] = field(default_factory=list)
