from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import TransliteratorConfig
from .errors import HtError
from .transliterator import HindiTransliterator

app = typer.Typer(add_completion=False, no_args_is_help=True)
_console = Console()
_err_console = Console(stderr=True)

_LEXICON_HELP = "User lexicon (.json/.yaml/.yml) of latin -> Devanagari overrides."
_NASALIZE_HELP = "Render n/m between a vowel and a consonant as anusvara."
_VERBOSE_HELP = "Log per-word decisions to stderr."


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


def _build(lexicon: Optional[Path], nasalize: bool, verbose: bool) -> HindiTransliterator:
    _setup_logging(verbose)
    log = logging.getLogger("hindi_transliterator.cli")

    def on_event(event: dict[str, object]) -> None:
        log.debug("%s -> %s (%s)", event.get("word"), event.get("normalized"), event.get("source"))

    cfg = TransliteratorConfig(
        nasalize=nasalize,
        user_lexicon_path=str(lexicon) if lexicon else None,
    )
    try:
        return HindiTransliterator(cfg, on_event=on_event if verbose else None)
    except HtError as e:
        _console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(code=2)


@app.command()
def text(
    value: str = typer.Argument(..., help="Romanized text; non-letters are kept as-is."),
    smart: bool = typer.Option(False, "--smart", help="Leave text that already has Devanagari."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    nasalize: bool = typer.Option(False, "--nasalize", help=_NASALIZE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """Transliterate free text."""
    t = _build(lexicon, nasalize, verbose)
    _console.print(t.smart_transliterate(value) if smart else t.transliterate(value))


@app.command()
def name(
    value: str = typer.Argument(..., help="Full name, e.g. 'Rajesh Kumar'."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    nasalize: bool = typer.Option(False, "--nasalize", help=_NASALIZE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """Transliterate a full name, keeping its spacing."""
    t = _build(lexicon, nasalize, verbose)
    _console.print(t.transliterate_full_name(value))


@app.command()
def address(
    value: str = typer.Argument(..., help="Address, e.g. '12, MG Road, Delhi'."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    nasalize: bool = typer.Option(False, "--nasalize", help=_NASALIZE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """Transliterate an address; numbers and punctuation are kept."""
    t = _build(lexicon, nasalize, verbose)
    _console.print(t.transliterate_address(value))


@app.command()
def suggest(
    value: str = typer.Argument(..., help="Name or address to suggest transliterations for."),
    is_address: bool = typer.Option(False, "--address", help="Treat the input as an address."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    nasalize: bool = typer.Option(False, "--nasalize", help=_NASALIZE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """Show up to three suggestions with confidence."""
    t = _build(lexicon, nasalize, verbose)
    table = Table("suggestion", "confidence")
    for s in t.get_suggestions_with_confidence(value, is_address):
        table.add_row(s.text, f"{s.confidence:.2f}")
    _console.print(table)


@app.command()
def alternatives(
    value: str = typer.Argument(..., help="Word to list alternative renderings for."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    nasalize: bool = typer.Option(False, "--nasalize", help=_NASALIZE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """List up to three alternative renderings, one per line."""
    t = _build(lexicon, nasalize, verbose)
    for alt in t.get_alternatives(value):
        _console.print(alt)


@app.command()
def score(
    value: str = typer.Argument(..., help="Text to score."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """Print the confidence score and whether the result is likely accurate."""
    t = _build(lexicon, False, verbose)
    _console.print(
        json.dumps(
            {
                "confidence": round(t.get_confidence_score(value), 4),
                "likely_accurate": t.is_likely_accurate(value),
            },
            ensure_ascii=True,
        )
    )


@app.command()
def explain(
    value: str = typer.Argument(..., help="Single word to trace."),
    lexicon: Optional[Path] = typer.Option(None, "--lexicon", help=_LEXICON_HELP),
    nasalize: bool = typer.Option(False, "--nasalize", help=_NASALIZE_HELP),
    verbose: bool = typer.Option(False, "--verbose", help=_VERBOSE_HELP),
) -> None:
    """Show how the segmenter reads a word (typo-corrected, dictionary bypassed)."""
    t = _build(lexicon, nasalize, verbose)
    table = Table("latin", "glyph", "kind", "inherent vowel", "rule")
    for seg in t.explain(value):
        inherent = "" if seg.inherent_vowel is None else ("kept" if seg.inherent_vowel else "silent")
        table.add_row(seg.latin, seg.glyph, seg.kind, inherent, seg.rule or "")
    _console.print(table)


@app.command()
def doctor() -> None:
    """Print environment and data-table diagnostics (JSON)."""
    from .doctor import collect_doctor_info

    _console.print(json.dumps(collect_doctor_info(), ensure_ascii=False, indent=2))
