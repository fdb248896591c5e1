import json
import sys
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from ..core import config as config_module
from ..core.config import Settings
from ..core.logging import log, setup_logging
from ..defaults import DEFAULT_LANGUAGES, load_default_parser
from ..errors import ModelError, UnknownLanguageError
from ..model import load_model_file
from ..parser import Parser

app = typer.Typer(add_completion=False, help="Phraseline CLI")
console = Console()


@app.callback()
def _init(
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        help="Config file (.phraseline.yaml auto-discovered)",
    ),
    log_format: Optional[str] = typer.Option(None, "--log-format", help="json|plain|auto"),
) -> None:
    try:
        settings = Settings.load_config(config_file)
    except Exception as e:
        typer.echo(f"❌ Config error: {e}", err=True)
        raise typer.Exit(1) from e
    config_module.SETTINGS = settings

    fmt = log_format or settings.LOG_FORMAT
    if fmt not in ("json", "plain", "auto"):
        typer.echo(f"❌ Unknown log format: {fmt}", err=True)
        raise typer.Exit(1)
    setup_logging(fmt, settings.LOG_LEVEL)  # type: ignore[arg-type]


def _load_parser(model_path: Optional[str], lang: Optional[str]) -> Parser:
    """Build a parser from --model or --lang, exiting with a message on failure."""
    if model_path and lang:
        typer.echo("❌ Specify either --model or --lang, not both.", err=True)
        raise typer.Exit(1)

    if model_path:
        try:
            model = load_model_file(model_path)
        except OSError as e:
            typer.echo(f"❌ Failed to read model file: {e}", err=True)
            raise typer.Exit(1) from e
        except ModelError as e:
            typer.echo(f"❌ Failed to parse model: {e}", err=True)
            raise typer.Exit(1) from e
        log.info("cli.model.file", path=model_path)
        return Parser(model)

    code = lang or config_module.SETTINGS.DEFAULT_LANG
    try:
        return load_default_parser(code)
    except UnknownLanguageError as e:
        typer.echo(f"❌ Unknown --lang value: {code}", err=True)
        typer.echo(f"Available --lang values: {', '.join(DEFAULT_LANGUAGES)}", err=True)
        raise typer.Exit(1) from e
    except (OSError, ModelError) as e:
        typer.echo(f"❌ Failed to load model for {code}: {e}", err=True)
        raise typer.Exit(1) from e


def _read_input(text: Optional[List[str]]) -> str:
    if text:
        return " ".join(text)
    return sys.stdin.read().rstrip()


@app.command()
def version() -> None:
    from .. import __version__

    typer.echo(__version__)


@app.command()
def config(
    as_json: bool = typer.Option(True, "--json/--plain", help="Output format"),
) -> None:
    """Show effective settings."""
    data = config_module.SETTINGS.model_dump()
    if as_json:
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False))
        return
    table = Table(title="Effective Settings")
    table.add_column("Setting", style="bold cyan")
    table.add_column("Value", style="bold green")
    for key, value in data.items():
        table.add_row(key, repr(value))
    console.print(table)


@app.command()
def parse(
    text: Optional[List[str]] = typer.Argument(None, help="Sentence to split (stdin if omitted)"),
    model: Optional[str] = typer.Option(None, "--model", help="Path to model JSON"),
    lang: Optional[str] = typer.Option(
        None, "--lang", help=f"Bundled model: {', '.join(DEFAULT_LANGUAGES)}"
    ),
    separator: Optional[str] = typer.Option(None, "--separator", help="Chunk separator (default: '|')"),
) -> None:
    """Split a sentence into phrases."""
    parser = _load_parser(model, lang)
    sentence = _read_input(text)
    chunks = parser.parse(sentence)
    log.info("cli.parse.done", chars=len(sentence), chunks=len(chunks))
    sep = separator if separator is not None else config_module.SETTINGS.CHUNK_SEPARATOR
    typer.echo(sep.join(chunks))


@app.command()
def translate(
    html: Optional[List[str]] = typer.Argument(None, help="HTML fragment (stdin if omitted)"),
    model: Optional[str] = typer.Option(None, "--model", help="Path to model JSON"),
    lang: Optional[str] = typer.Option(
        None, "--lang", help=f"Bundled model: {', '.join(DEFAULT_LANGUAGES)}"
    ),
    separator: Optional[str] = typer.Option(None, "--separator", help="Text inserted at each boundary"),
    class_name: Optional[str] = typer.Option(
        None, "--class-name", help="Class added to annotated elements instead of an inline style"
    ),
) -> None:
    """Insert separators at phrase boundaries in an HTML fragment."""
    from ..html import HTMLProcessor, HTMLProcessorOptions

    settings = config_module.SETTINGS
    parser = _load_parser(model, lang)
    options = HTMLProcessorOptions(
        class_name=class_name or settings.CLASS_NAME,
        separator=separator if separator is not None else settings.SEPARATOR,
        builder=settings.HTML_PARSER,
    )
    fragment = _read_input(html)
    output = HTMLProcessor(parser, options).apply_to_html_string(fragment)
    log.info("cli.translate.done", chars_in=len(fragment), chars_out=len(output))
    typer.echo(output)


if __name__ == "__main__":
    app()
