"""
SpeechServiceClient: Fetches speech to text languages, fast transcription
locales, custom speech base models and text to speech voices from the
speech service REST endpoints.

Every request is a single blocking GET. Failures are not retried; they
surface as SpeechNetworkError or SpeechApiError and abort the run.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

import requests

from speechlocales.clients.speech_errors import (
    SpeechApiError,
    SpeechNetworkError,
)
from speechlocales.config import SpeechLocalesConfig
from speechlocales.locales import normalize_language, normalize_locale
from speechlocales.models import (
    BaseModel,
    FastTranscriptionLocales,
    SttLanguage,
    TtsVoice,
)

logger = logging.getLogger(__name__)


class SpeechServiceClient:
    """
    Speech service metadata client.
    """

    def __init__(self, config: SpeechLocalesConfig):
        """
        Initialize SpeechServiceClient with configuration.

        Args:
            config: SpeechLocalesConfig instance with credentials.
        """
        self.config = config
        self.headers = {
            "Ocp-Apim-Subscription-Key": config.subscription_key,
            "Accept": "application/json",
        }

    def get_json(self, url: str) -> Any:
        """
        GET a URL and return the decoded JSON body.

        Args:
            url (str): Endpoint URL.

        Returns:
            Any: Decoded JSON payload.

        Raises:
            SpeechNetworkError: On timeouts and connection failures.
            SpeechApiError: On non-success responses or invalid JSON.
        """
        logger.debug("GET %s", url)
        try:
            resp = requests.get(
                url, headers=self.headers, timeout=self.config.request_timeout
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed (network error): {e} url={url}")
            raise SpeechNetworkError(
                f"Network error requesting {url}: {e}"
            ) from e

        if not resp.ok:
            error = SpeechApiError.from_response(resp)
            logger.error(
                f"Request failed: status={resp.status_code} "
                f"code={error.code} message={error.message} url={url}"
            )
            raise error

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Invalid JSON response: {e} url={url}")
            raise SpeechApiError(
                f"Invalid JSON response from {url}: {e}",
                status_code=resp.status_code
            ) from e

    def get_stt_languages(self) -> List[SttLanguage]:
        """
        Fetch speech to text languages.

        Returns:
            List[SttLanguage]: Languages sorted by locale, with locale and
            English name normalized.
        """
        payload = self.get_json(self.config.stt_languages_url)
        languages = [
            SttLanguage.from_dict(item) for item in payload or []
            if isinstance(item, dict)
        ]
        languages.sort(key=lambda language: language.name)
        for language in languages:
            language.name = normalize_locale(language.name)
            language.english_name = normalize_language(
                language.name, language.english_name
            )
        logger.info("Fetched %d speech to text languages", len(languages))
        return languages

    def get_fast_transcription_locales(self) -> FastTranscriptionLocales:
        """
        Fetch the locales supported by fast transcription.

        Returns:
            FastTranscriptionLocales: Submit and transcribe locale lists.
        """
        payload = self.get_json(self.config.fast_transcription_locales_url)
        locales = FastTranscriptionLocales.from_dict(
            payload if isinstance(payload, dict) else {}
        )
        logger.info(
            "Fetched %d fast transcription locales", len(locales.transcribe)
        )
        return locales

    def iter_base_model_pages(self) -> Iterator[List[Dict[str, Any]]]:
        """
        Lazily yield pages of raw base models.

        Follows the ``@nextLink`` continuation until it is empty.

        Yields:
            List[Dict[str, Any]]: Raw base models of one page.
        """
        url = self.config.base_models_url
        page_number = 0
        while url:
            page_number += 1
            payload = self.get_json(url)
            if not isinstance(payload, dict):
                payload = {}
            logger.debug("Fetched base model page %d", page_number)
            yield [
                item for item in payload.get("values") or []
                if isinstance(item, dict)
            ]
            url = payload.get("@nextLink") or ""

    def get_custom_speech_base_models(
        self, now: Optional[datetime] = None
    ) -> List[BaseModel]:
        """
        Fetch custom speech base models that can still be adapted.

        Args:
            now (datetime, optional): Reference time, defaults to the
                current UTC time.

        Returns:
            List[BaseModel]: Models whose adaptation deprecation date lies
            after ``now``, sorted by locale, locale normalized.
        """
        now = now or datetime.now(timezone.utc)
        models = []
        total = 0
        for page in self.iter_base_model_pages():
            for item in page:
                total += 1
                model = BaseModel.from_dict(item)
                if model.is_adaptable(now):
                    models.append(model)
        models.sort(key=lambda model: model.locale)
        for model in models:
            model.locale = normalize_locale(model.locale)
        logger.info(
            "Fetched %d custom speech base models, %d still adaptable",
            total, len(models)
        )
        return models

    def get_tts_voices(self) -> List[TtsVoice]:
        """
        Fetch text to speech voices in GA or preview.

        Returns:
            List[TtsVoice]: Voices sorted by locale. ``order`` keeps the
            position in the service's list.
        """
        payload = self.get_json(self.config.voices_url)
        voices = [
            TtsVoice.from_dict(item) for item in payload or []
            if isinstance(item, dict)
        ]
        voices = [
            voice for voice in voices
            if "GA" in voice.status or "Preview" in voice.status
        ]
        for order, voice in enumerate(voices):
            voice.order = order
            voice.locale = normalize_locale(voice.locale)
            voice.locale_name = normalize_language(
                voice.locale, voice.locale_name
            )
            voice.style_list = tuple(sorted(voice.style_list))
            voice.role_play_list = tuple(sorted(voice.role_play_list))
        voices.sort(key=lambda voice: voice.locale)
        logger.info("Fetched %d text to speech voices", len(voices))
        return voices
