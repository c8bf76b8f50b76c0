"""Configuration for speech locale table generation.

Settings are loaded from environment variables when not passed in.

Environment variables:
    SPEECH_KEY: Speech resource subscription key
    SPEECH_REGION: Speech resource region (default: eastus)
    SPEECH_LOCALES_OUTPUT_DIR: Directory for the tables (default: output)
    SPEECH_LOCALES_TIMEOUT: HTTP timeout in seconds (default: 30)
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

FAST_TRANSCRIPTION_API_VERSION = "2024-11-15"
QUERY_STRING = "?alt=json"


@dataclass
class SpeechLocalesConfig:
    """Speech service access and output settings.

    Attributes:
        subscription_key: Speech resource key
        service_region: Speech resource region
        output_dir: Directory the Markdown tables are written to
        request_timeout: Timeout for each HTTP request, in seconds
    """
    subscription_key: str = field(
        default_factory=lambda: os.environ.get('SPEECH_KEY', '')
    )
    service_region: str = field(
        default_factory=lambda: os.environ.get('SPEECH_REGION') or 'eastus'
    )
    output_dir: str = field(
        default_factory=lambda: os.environ.get(
            'SPEECH_LOCALES_OUTPUT_DIR', 'output'
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(
            os.environ.get('SPEECH_LOCALES_TIMEOUT', '30')
        )
    )

    def __post_init__(self):
        """Validate configuration and log loading process."""
        self._log_config_loading()
        self._validate_config()

    def _log_config_loading(self):
        masked_key = (
            f"{self.subscription_key[:4]}..." if self.subscription_key
            else "<empty>"
        )
        logger.debug(
            "Loaded speech locales config: region=%s, key=%s, "
            "output_dir=%s, timeout=%s",
            self.service_region, masked_key, self.output_dir,
            self.request_timeout
        )

    def _validate_config(self):
        if not self.subscription_key:
            raise ValueError(
                "subscription_key is required. Set the SPEECH_KEY "
                "environment variable or pass it explicitly."
            )
        if not self.service_region:
            raise ValueError("service_region is required")
        if self.request_timeout <= 0:
            raise ValueError("request_timeout must be positive")

    @property
    def stt_languages_url(self) -> str:
        return (
            f"https://{self.service_region}.stt.speech.microsoft.com"
            f"/api/v1.0/languages/recognition{QUERY_STRING}&format=detailed"
        )

    @property
    def voices_url(self) -> str:
        return (
            f"https://{self.service_region}.tts.speech.microsoft.com"
            f"/cognitiveservices/voices/list{QUERY_STRING}"
        )

    @property
    def base_models_url(self) -> str:
        return (
            f"https://{self.service_region}.api.cognitive.microsoft.com"
            f"/speechtotext/v3.2/models/base{QUERY_STRING}"
        )

    @property
    def fast_transcription_locales_url(self) -> str:
        return (
            f"https://{self.service_region}.api.cognitive.microsoft.com"
            f"/speechtotext/transcriptions/locales"
            f"?api-version={FAST_TRANSCRIPTION_API_VERSION}"
        )
