#!/usr/bin/env python3
"""
Basic example of using ReportService.

This example fetches the speech service metadata once, prints the merged
locale count and writes the four Markdown tables to ``outputs/``.

Before running this example, please set the following environment variables:
- SPEECH_KEY: Your speech resource subscription key
- SPEECH_REGION: Your speech resource region (defaults to 'eastus')
"""

import logging

from speechlocales.config import SpeechLocalesConfig
from speechlocales.locales import (
    combine_locales,
    extract_stt_locales,
    extract_tts_locales,
)
from speechlocales.service import ReportService

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(levelname)s - %(message)s'
)


def main():
    """Run the report service example."""
    print("STARTING LOCALE TABLES EXAMPLE")
    print("=" * 50)

    config = SpeechLocalesConfig(output_dir="outputs")
    service = ReportService(config)

    catalog = service.fetch()
    merged = combine_locales(
        extract_stt_locales(catalog.stt_languages),
        extract_tts_locales(catalog.tts_voices),
    )
    print(f"\nSpeech to text languages: {len(catalog.stt_languages)}")
    print(f"Text to speech voices: {len(catalog.tts_voices)}")
    print(f"Adaptable base models: {len(catalog.base_models)}")
    print(f"Merged locales: {len(merged)}")

    tables = service.build_tables(catalog)
    for path in service.write_tables(tables):
        print(f"- {path}")


if __name__ == "__main__":
    main()
