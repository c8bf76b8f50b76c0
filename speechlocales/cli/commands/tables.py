"""
Locale table commands
"""
import logging
from pathlib import Path
from typing import Optional

import typer

from speechlocales.cli.utils import build_config_kwargs, setup_logging
from speechlocales.clients.speech_errors import (
    SpeechApiError,
    SpeechLocalesError,
)
from speechlocales.config import SpeechLocalesConfig
from speechlocales.service import ReportService


logger = logging.getLogger("speechlocales.tables")
app = typer.Typer(help="Speech locale table commands")


# Common service options
REGION_OPTION = typer.Option(
    None,
    "-r", "--region",
    help="Speech resource region (default: SPEECH_REGION or eastus)",
)
KEY_OPTION = typer.Option(
    None,
    "-k", "--key",
    help="Speech resource key (default: SPEECH_KEY)",
)
TIMEOUT_OPTION = typer.Option(
    None,
    "--timeout",
    help="HTTP timeout in seconds (default: 30)",
)


@app.callback()
def callback(
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode",
    ),
):
    """
    Speech locale table tool
    """
    global logger
    logger = setup_logging(debug, "speechlocales")


def _create_service(
    region: Optional[str],
    key: Optional[str],
    timeout: Optional[float],
    output: Optional[Path] = None,
) -> ReportService:
    config = SpeechLocalesConfig(**build_config_kwargs(
        service_region=region,
        subscription_key=key,
        request_timeout=timeout,
        output_dir=str(output) if output else None,
    ))
    return ReportService(config)


def _report_error(action: str, error: Exception):
    logger.error("Failed to %s: %s", action, str(error), exc_info=True)
    typer.echo(f"Failed to {action}: {str(error)}")
    if isinstance(error, SpeechApiError):
        if error.code:
            typer.echo(f"Error code: {error.code}")
        for reason, message in error.details:
            typer.echo(f"Reason: {reason}")
            typer.echo(f"Message: {message}")


@app.command("generate")
def generate(
    output: Optional[Path] = typer.Option(
        None,
        "-o", "--output",
        help="Output directory (default: SPEECH_LOCALES_OUTPUT_DIR or output)",
        file_okay=False,
        dir_okay=True,
    ),
    region: Optional[str] = REGION_OPTION,
    key: Optional[str] = KEY_OPTION,
    timeout: Optional[float] = TIMEOUT_OPTION,
):
    """
    Generate the speech to text, language identification, text to speech
    and voice styles/roles tables
    """
    logger.debug(
        "Generating locale tables (output=%s, region=%s, timeout=%s)",
        output, region, timeout
    )

    try:
        service = _create_service(region, key, timeout, output)
        paths = service.generate()
    except (SpeechLocalesError, ValueError, OSError) as e:
        _report_error("generate locale tables", e)
        raise typer.Exit(1)

    typer.echo("Successfully generated markdown files:")
    for path in paths:
        typer.echo(f"- {path}")


@app.command("locales")
def locales(
    region: Optional[str] = REGION_OPTION,
    key: Optional[str] = KEY_OPTION,
    timeout: Optional[float] = TIMEOUT_OPTION,
):
    """
    Print the merged speech to text and text to speech locales
    """
    try:
        service = _create_service(region, key, timeout)
        merged = service.merged_locales()
    except (SpeechLocalesError, ValueError) as e:
        _report_error("list locales", e)
        raise typer.Exit(1)

    for locale, language in merged.items():
        typer.echo(f"{locale}\t{language}")
