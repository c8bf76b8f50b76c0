"""Report service layer.

This module provides the ReportService class which fetches everything
from the speech service, builds the four Markdown tables and writes them
to the output directory.
"""

import logging
import os
from typing import Dict, List, Optional

from speechlocales.clients.speech_client import SpeechServiceClient
from speechlocales.config import SpeechLocalesConfig
from speechlocales.constants import OUTPUT_FILES
from speechlocales.locales import (
    combine_locales,
    extract_stt_locales,
    extract_tts_locales,
)
from speechlocales.markdown.tables import (
    LanguageIdentificationTableBuilder,
    SttTableBuilder,
    TtsTableBuilder,
    VoiceStylesRolesTableBuilder,
)
from speechlocales.models import SpeechCatalog

logger = logging.getLogger(__name__)


class ReportService:
    """Speech locale report generation.

    Tables are fully built in memory before any file is written.
    """

    def __init__(
        self,
        config: SpeechLocalesConfig,
        client: Optional[SpeechServiceClient] = None,
    ):
        """Initialize the report service.

        Args:
            config: Service access and output settings.
            client: Client to fetch with, created from config if omitted.
        """
        logger.debug("Initializing ReportService with config: %s", config)
        self.config = config
        self.client = client or SpeechServiceClient(config)

    def fetch(self) -> SpeechCatalog:
        """Fetch all metadata, one endpoint after the other."""
        logger.info("Fetching speech to text locales...")
        stt_languages = self.client.get_stt_languages()

        logger.info("Fetching fast transcription locales...")
        fast_transcription = self.client.get_fast_transcription_locales()

        logger.info("Fetching custom speech base models...")
        base_models = self.client.get_custom_speech_base_models()

        logger.info("Fetching text to speech voices...")
        tts_voices = self.client.get_tts_voices()

        return SpeechCatalog(
            stt_languages=stt_languages,
            fast_transcription=fast_transcription,
            base_models=base_models,
            tts_voices=tts_voices,
        )

    def build_tables(self, catalog: SpeechCatalog) -> Dict[str, List[str]]:
        """Build every table, keyed by output name."""
        logger.info("Generating language identification markdown...")
        language_identification = LanguageIdentificationTableBuilder().build(
            catalog.stt_languages
        )

        logger.info("Generating speech to text markdown...")
        stt = SttTableBuilder().build(
            catalog.stt_languages,
            catalog.fast_transcription,
            catalog.base_models,
        )

        logger.info("Generating text to speech markdown...")
        tts = TtsTableBuilder().build(
            catalog.tts_voices, catalog.stt_languages
        )

        logger.info("Generating voice styles and roles markdown...")
        voice_styles = VoiceStylesRolesTableBuilder().build(catalog.tts_voices)

        return {
            "stt": stt,
            "language-identification": language_identification,
            "tts": tts,
            "voice-styles-and-roles": voice_styles,
        }

    def write_tables(
        self,
        tables: Dict[str, List[str]],
        output_dir: Optional[str] = None,
    ) -> List[str]:
        """Write the tables as UTF-8 Markdown files.

        Args:
            tables: Table lines keyed by output name.
            output_dir: Target directory, defaults to the configured one.

        Returns:
            List[str]: Paths of the written files.
        """
        output_dir = output_dir or self.config.output_dir
        os.makedirs(output_dir, exist_ok=True)

        paths = []
        for name, lines in tables.items():
            path = os.path.join(output_dir, OUTPUT_FILES[name])
            with open(path, "w", encoding="utf-8", newline="\n") as f:
                f.write("\n".join(lines) + "\n")
            logger.debug("Wrote %d lines to %s", len(lines), path)
            paths.append(path)
        return paths

    def generate(self, output_dir: Optional[str] = None) -> List[str]:
        """Fetch, build and write all tables."""
        catalog = self.fetch()
        tables = self.build_tables(catalog)
        paths = self.write_tables(tables, output_dir)
        logger.info("Successfully generated %d markdown files", len(paths))
        return paths

    def merged_locales(self) -> Dict[str, str]:
        """Fetch speech to text and voices and merge their locales."""
        stt_locales = extract_stt_locales(self.client.get_stt_languages())
        tts_locales = extract_tts_locales(self.client.get_tts_voices())
        return combine_locales(stt_locales, tts_locales)
