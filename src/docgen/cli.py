"""Typer-based command line interface for corpus generation.

The ``run`` command loads configuration, optionally asks for parameters
interactively, loads the dictionary, then streams the generated documents to
the output file while printing progress.  The dictionary is loaded before the
output is opened, so a bad words file never truncates an existing corpus.

Exit codes
----------
0 success
3 I/O error (unreadable or empty words file, output open/write failure)
4 configuration error
"""

from __future__ import annotations

import contextlib
import os
import sys
from pathlib import Path
from time import perf_counter
from types import TracebackType
from typing import Any, NoReturn, Optional, TextIO

import typer
import yaml
from pydantic import ValidationError

from .config import ConfigModel, apply_overrides, load_config
from .generate import write_corpus
from .io import load_dictionary, open_output
from .sampling import effective_mean, make_rng
from .utils.errors import ConfigError, DictionaryError, OutputError, OutputWriteError
from .utils.logging import configure_logging, get_logger

if not sys.stdout.isatty():  # pragma: no cover - CLI test context
    os.environ.setdefault("NO_COLOR", "1")

app = typer.Typer(
    name="docgen",
    help="Synthetic corpus generator. Use 'docgen run' to generate documents.",
)

log = get_logger(__name__)

WORDS_HINT = "Pass --words with the path of a newline-delimited word list."


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _safe_exit(code: int, msg: str | None = None) -> NoReturn:
    """Exit the CLI with ``code`` emitting ``msg`` to stderr if provided."""

    if msg:
        typer.echo(msg, err=True)
    raise typer.Exit(code)


def _config_error_message(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        err = exc.errors()[0]
        where = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "")
        return f"Invalid configuration: {where}: {msg}" if where else f"Invalid configuration: {msg}"
    return f"Invalid configuration: {exc}"


class Timing:
    """Context manager measuring elapsed seconds."""

    def __init__(self) -> None:
        self._start = 0.0
        self._end = 0.0

    def __enter__(self) -> "Timing":
        self._start = perf_counter()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._end = perf_counter()

    @property
    def seconds(self) -> float:
        return self._end - self._start


def _prompt_for_input(cfg: ConfigModel) -> dict[str, Any]:
    """Ask for generation parameters, offering current values as defaults.

    The words file is deliberately not prompted for; it comes from the
    configuration or ``--words``.
    """

    gen = cfg.generation
    return {
        "generation": {
            "num_documents": typer.prompt("Number of documents", default=gen.num_documents, type=int),
            "min_words": typer.prompt("Minimum words per document", default=gen.min_words, type=int),
            "max_words": typer.prompt("Maximum words per document", default=gen.max_words, type=int),
            "avg_words": typer.prompt(
                "Target average words per document", default=gen.avg_words, type=int
            ),
        },
        "paths": {
            "output_file": typer.prompt("Output file", default=str(cfg.paths.output_file)),
        },
    }


def format_config(cfg: ConfigModel) -> str:
    """Return the human readable configuration block."""

    gen = cfg.generation
    lines = [
        "Document Generator Configuration:",
        f"  Number of documents: {gen.num_documents}",
        f"  Min words per document: {gen.min_words}",
        f"  Max words per document: {gen.max_words}",
        f"  Target avg words per document: {gen.avg_words}",
        f"  Output file: {cfg.paths.output_file}",
        f"  Words file: {cfg.paths.words_file}",
    ]
    return "\n".join(lines) + "\n"


def _warn_unreachable_average(cfg: ConfigModel) -> None:
    gen = cfg.generation
    expected = effective_mean(gen.min_words, gen.max_words, gen.avg_words)
    if abs(expected - gen.avg_words) > 0.5:
        log.warning(
            "Target average %d is not reachable within [%d, %d]; expected mean is %.1f",
            gen.avg_words,
            gen.min_words,
            gen.max_words,
            expected,
        )


def _echo_progress(done: int, total: int) -> None:
    typer.echo(f"Progress: {done}/{total} documents ({done / total * 100:.1f}%)")


def _abort_sink(sink: TextIO) -> None:
    """Close ``sink`` after a failed write; the write error is what gets reported."""

    with contextlib.suppress(OSError, ValueError):
        sink.close()


@app.callback()
def main() -> None:
    """Entry point for the docgen command group."""
    pass


@app.command()
def run(  # noqa: PLR0913
    num_documents: Optional[int] = typer.Option(  # noqa: B008
        None, "--num", help="Number of documents to generate"
    ),
    min_words: Optional[int] = typer.Option(  # noqa: B008
        None, "--min", help="Minimum words per document"
    ),
    max_words: Optional[int] = typer.Option(  # noqa: B008
        None, "--max", help="Maximum words per document"
    ),
    avg_words: Optional[int] = typer.Option(  # noqa: B008
        None, "--avg", help="Target average words per document"
    ),
    output_file: Optional[Path] = typer.Option(  # noqa: B008
        None, "--output", "--out", help="Output file path"
    ),
    words_file: Optional[Path] = typer.Option(  # noqa: B008
        None, "--words", help="Words file path (one word per line)"
    ),
    seed: Optional[int] = typer.Option(  # noqa: B008
        None, "--seed", help="Random seed; defaults to a time-derived value"
    ),
    config_path: Optional[Path] = typer.Option(  # noqa: B008
        None, "--config", help="YAML config to override defaults"
    ),
    interactive: bool = typer.Option(  # noqa: B008
        False, "--interactive", "-i", help="Prompt for generation parameters"
    ),
    verbose: bool = typer.Option(  # noqa: B008
        False, "--verbose", "-v", help="Emit debug logs to stderr"
    ),
    quiet: bool = typer.Option(  # noqa: B008
        False, "--quiet", "-q", help="Suppress progress lines"
    ),
) -> None:
    """Generate synthetic documents and write them one per line."""

    configure_logging(verbose)

    # Load configuration
    try:
        cfg = load_config(config_path)
        cfg = apply_overrides(
            cfg,
            {
                "generation": {
                    "num_documents": num_documents,
                    "min_words": min_words,
                    "max_words": max_words,
                    "avg_words": avg_words,
                    "seed": seed,
                },
                "paths": {"output_file": output_file, "words_file": words_file},
            },
        )
        if interactive:
            cfg = apply_overrides(cfg, _prompt_for_input(cfg))
        params = cfg.to_params()
    except (ValidationError, ConfigError, yaml.YAMLError, OSError) as exc:
        _safe_exit(4, _config_error_message(exc))

    typer.echo(format_config(cfg))
    _warn_unreachable_average(cfg)

    with Timing() as t_total:
        typer.echo("Starting document generation...")
        rng, used_seed = make_rng(cfg.generation.seed)
        typer.echo(f"Random seed: {used_seed}")

        # Load dictionary
        typer.echo("Loading words from file...")
        try:
            dictionary = load_dictionary(cfg.paths.words_file)
        except DictionaryError as exc:
            _safe_exit(3, f"Error loading words: {exc}\n{WORDS_HINT}")
        typer.echo(f"Loaded {len(dictionary)} words")

        # Generate
        try:
            sink = open_output(cfg.paths.output_file, encoding=cfg.paths.encoding)
        except OutputError as exc:
            _safe_exit(3, str(exc))

        typer.echo(f"Generating {params.num_documents} documents...")
        on_progress = _echo_progress if cfg.progress.enabled and not quiet else None
        try:
            stats = write_corpus(
                sink,
                rng,
                dictionary,
                params,
                on_progress=on_progress,
                progress_steps=cfg.progress.steps,
            )
        except OutputWriteError as exc:
            _abort_sink(sink)
            _safe_exit(3, str(exc))
        try:
            sink.close()
        except OSError as exc:
            _safe_exit(3, f"Failed closing output '{cfg.paths.output_file}': {exc}")

    typer.echo(f"Document generation completed in {t_total.seconds:.2f}s")
    typer.echo(
        f"Wrote {stats.documents} documents ({stats.words} words, "
        f"{stats.mean_words:.1f} words per document)"
    )
    typer.echo(f"Output written to {cfg.paths.output_file}")
