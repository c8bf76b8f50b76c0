"""
Main CLI entry point for speech-locales
"""
import typer
from dotenv import load_dotenv

from speechlocales.cli.commands import tables

app = typer.Typer(
    name="speech-locales",
    help="Generate Markdown tables of speech service locales and voices",
    add_completion=False,
)

# Register table commands
app.add_typer(tables.app, name="tables", help="Locale table commands")


def main():
    """Main entry point for the CLI"""
    load_dotenv()
    app()


if __name__ == "__main__":
    main()
