"""CLI entry point for wordnik_api package."""
from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Awaitable, Callable, Optional, Tuple, get_args

import click
from pydantic import BaseModel

from .client import WordnikClient
from .enums import PartOfSpeech, PronunciationSource, RelationshipType, SourceDictionary, TypeFormat
from .exceptions import ConfigurationError, InvalidDateError
from .utils import clean_text

SOURCES = list(get_args(SourceDictionary))
POS_CHOICE = click.Choice([p.value for p in PartOfSpeech])


def _setup_logger(verbose: bool) -> logging.Logger:
    logger = logging.getLogger("wordnik_api")
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        logger.addHandler(h)
        logger.propagate = False
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return logger


def _jsonable(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(obj, list):
        return [_jsonable(o) for o in obj]
    return obj


def _lookup(ctx: click.Context, call: Callable[[WordnikClient], Awaitable[Any]]) -> Any:
    """Run one client call; a missing result exits with status 1."""
    try:
        client = WordnikClient(ctx.obj["api_key"])
    except ConfigurationError as e:
        raise click.UsageError(str(e), ctx=ctx) from e

    async def _run():
        with client:
            return await call(client)

    result = asyncio.run(_run())
    if result is None:
        click.echo("Not found.", err=True)
        ctx.exit(1)
    return result


def _show(ctx: click.Context, call: Callable[[WordnikClient], Awaitable[Any]]) -> None:
    click.echo(json.dumps(_jsonable(_lookup(ctx, call)), indent=2))


@click.group()
@click.option("--api-key", envvar="WORDNIK_API_KEY", help="Wordnik API key [env: WORDNIK_API_KEY].")
@click.option("--verbose", "-v", is_flag=True, help="Log each request.")
@click.pass_context
def main(ctx: click.Context, api_key: Optional[str], verbose: bool) -> None:
    """Wordnik dictionary lookup command-line tool."""
    _setup_logger(verbose)
    ctx.ensure_object(dict)
    ctx.obj["api_key"] = api_key


@main.command("definitions")
@click.argument("word")
@click.option("--limit", default=1, show_default=True)
@click.option("--part-of-speech", "-p", type=POS_CHOICE)
@click.option("--source", type=click.Choice(SOURCES), default="all", show_default=True)
@click.option("--canonical", is_flag=True, help="Use the canonical form of WORD.")
@click.option("--plain", is_flag=True, help="Print cleaned definition text only.")
@click.pass_context
def definitions_cmd(
    ctx: click.Context,
    word: str,
    limit: int,
    part_of_speech: Optional[str],
    source: str,
    canonical: bool,
    plain: bool,
) -> None:
    """Define WORD."""
    call = lambda c: c.get_definitions(  # noqa: E731
        word, limit=limit, part_of_speech=part_of_speech, source_dictionary=source, use_canonical=canonical
    )
    if not plain:
        _show(ctx, call)
        return
    for w in _lookup(ctx, call):
        if w.text:
            pos = str(w.part_of_speech) if w.part_of_speech else "-"
            click.echo(f"{pos}: {clean_text(w.text)}")


@main.command("audio")
@click.argument("word")
@click.option("--limit", default=1, show_default=True)
@click.option("--canonical", is_flag=True)
@click.pass_context
def audio_cmd(ctx: click.Context, word: str, limit: int, canonical: bool) -> None:
    """List audio pronunciations of WORD."""
    _show(ctx, lambda c: c.get_audio(word, use_canonical=canonical, limit=limit))


@main.command("etymologies")
@click.argument("word")
@click.option("--canonical", is_flag=True)
@click.pass_context
def etymologies_cmd(ctx: click.Context, word: str, canonical: bool) -> None:
    """Show etymologies of WORD."""
    _show(ctx, lambda c: c.get_etymologies(word, use_canonical=canonical))


@main.command("examples")
@click.argument("word")
@click.option("--limit", default=1, show_default=True, help="At most 50.")
@click.option("--skip", default=0, show_default=True)
@click.option("--duplicates", is_flag=True, help="Include duplicate examples.")
@click.option("--canonical", is_flag=True)
@click.pass_context
def examples_cmd(ctx: click.Context, word: str, limit: int, skip: int, duplicates: bool, canonical: bool) -> None:
    """Show usage examples of WORD."""
    _show(
        ctx,
        lambda c: c.get_examples(
            word, include_duplicates=duplicates, use_canonical=canonical, skip=skip, limit=limit
        ),
    )


@main.command("frequency")
@click.argument("word")
@click.option("--start-year", default=1800, show_default=True)
@click.option("--end-year", default=2012, show_default=True)
@click.option("--canonical", is_flag=True)
@click.pass_context
def frequency_cmd(ctx: click.Context, word: str, start_year: int, end_year: int, canonical: bool) -> None:
    """Show yearly corpus frequency of WORD."""
    _show(
        ctx,
        lambda c: c.get_frequency(word, use_canonical=canonical, start_year=start_year, end_year=end_year),
    )


@main.command("hyphenation")
@click.argument("word")
@click.option("--limit", default=1, show_default=True)
@click.option("--source", type=click.Choice(SOURCES), default="all", show_default=True)
@click.option("--canonical", is_flag=True)
@click.pass_context
def hyphenation_cmd(ctx: click.Context, word: str, limit: int, source: str, canonical: bool) -> None:
    """Split WORD into syllables."""
    _show(
        ctx,
        lambda c: c.get_hyphenation(word, use_canonical=canonical, source_dictionary=source, limit=limit),
    )


@main.command("phrases")
@click.argument("word")
@click.option("--limit", default=1, show_default=True)
@click.option("--canonical", is_flag=True)
@click.pass_context
def phrases_cmd(ctx: click.Context, word: str, limit: int, canonical: bool) -> None:
    """List bigram phrases containing WORD."""
    _show(ctx, lambda c: c.get_phrases(word, use_canonical=canonical, limit=limit))


@main.command("pronunciation")
@click.argument("word")
@click.option("--limit", default=1, show_default=True)
@click.option("--source", type=click.Choice(get_args(PronunciationSource)))
@click.option("--format", "type_format", type=click.Choice(get_args(TypeFormat)))
@click.option("--canonical", is_flag=True)
@click.pass_context
def pronunciation_cmd(
    ctx: click.Context,
    word: str,
    limit: int,
    source: Optional[str],
    type_format: Optional[str],
    canonical: bool,
) -> None:
    """Show text pronunciations of WORD."""
    _show(
        ctx,
        lambda c: c.get_pronunciation(
            word, use_canonical=canonical, source_dictionary=source, type_format=type_format, limit=limit
        ),
    )


@main.command("related")
@click.argument("word")
@click.option(
    "--type",
    "-t",
    "relationship_types",
    multiple=True,
    type=click.Choice([r.value for r in RelationshipType]),
    help="Relationship type; repeat for several.",
)
@click.option("--limit-per-type", type=int)
@click.option("--canonical", is_flag=True)
@click.pass_context
def related_cmd(
    ctx: click.Context,
    word: str,
    relationship_types: Tuple[str, ...],
    limit_per_type: Optional[int],
    canonical: bool,
) -> None:
    """List words related to WORD."""
    _show(
        ctx,
        lambda c: c.get_related_words(
            word,
            use_canonical=canonical,
            relationship_types=list(relationship_types) or None,
            limit_per_relationship_type=limit_per_type,
        ),
    )


@main.command("scrabble")
@click.argument("word")
@click.pass_context
def scrabble_cmd(ctx: click.Context, word: str) -> None:
    """Print the Scrabble score of WORD."""
    click.echo(_lookup(ctx, lambda c: c.get_scrabble_score(word.lower())))


@main.command("top-example")
@click.argument("word")
@click.option("--canonical", is_flag=True)
@click.pass_context
def top_example_cmd(ctx: click.Context, word: str, canonical: bool) -> None:
    """Show the top usage example of WORD."""
    _show(ctx, lambda c: c.get_top_example(word, use_canonical=canonical))


def _random_options(f):
    f = click.option("--include-pos", multiple=True, type=POS_CHOICE, help="Repeat for several.")(f)
    f = click.option("--exclude-pos", multiple=True, type=POS_CHOICE, help="Repeat for several.")(f)
    f = click.option("--min-length", type=int)(f)
    f = click.option("--max-length", type=int)(f)
    f = click.option("--min-corpus-count", type=int)(f)
    f = click.option("--max-corpus-count", type=int)(f)
    f = click.option("--min-dictionary-count", type=int)(f)
    f = click.option("--max-dictionary-count", type=int)(f)
    f = click.option("--any-word", is_flag=True, help="Include words without dictionary definitions.")(f)
    return f


def _random_kwargs(opts: dict) -> dict:
    return {
        "has_dictionary_def": not opts["any_word"],
        "include_part_of_speech": list(opts["include_pos"]) or None,
        "exclude_part_of_speech": list(opts["exclude_pos"]) or None,
        "min_corpus_count": opts["min_corpus_count"],
        "max_corpus_count": opts["max_corpus_count"],
        "min_dictionary_count": opts["min_dictionary_count"],
        "max_dictionary_count": opts["max_dictionary_count"],
        "min_length": opts["min_length"],
        "max_length": opts["max_length"],
    }


@main.command("random-word")
@_random_options
@click.pass_context
def random_word_cmd(ctx: click.Context, **opts: Any) -> None:
    """Show one random word."""
    _show(ctx, lambda c: c.get_random_word(**_random_kwargs(opts)))


@main.command("random-words")
@_random_options
@click.option("--sort-by", type=click.Choice(["alpha", "count"]))
@click.option("--sort-order", type=click.Choice(["asc", "desc"]))
@click.option("--limit", default=10, show_default=True)
@click.pass_context
def random_words_cmd(
    ctx: click.Context, sort_by: Optional[str], sort_order: Optional[str], limit: int, **opts: Any
) -> None:
    """List random words."""
    _show(
        ctx,
        lambda c: c.get_random_words(
            **_random_kwargs(opts), sort_by=sort_by, sort_order=sort_order, limit=limit
        ),
    )


@main.command("wotd")
@click.argument("date", required=False)
@click.pass_context
def wotd_cmd(ctx: click.Context, date: Optional[str]) -> None:
    """Show the word of the day for DATE (yyyy-MM-dd, default today)."""

    async def call(c: WordnikClient):
        try:
            return await c.get_word_of_the_day(date)
        except InvalidDateError as e:
            raise click.BadParameter(str(e), param_hint="DATE")

    _show(ctx, call)


if __name__ == "__main__":
    main()
