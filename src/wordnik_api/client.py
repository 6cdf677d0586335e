"""wordnik_api.client

``WordnikClient`` exposes one coroutine per Wordnik endpoint. Each call
issues a single GET through :class:`~wordnik_api.transport.Transport` and
turns the JSON body into records from :mod:`wordnik_api.models`.

Failed lookups come back as ``None`` (``[]`` for :meth:`get_random_words`)
so callers can treat "not found", "bad key" and "network down" alike. Pass
``raise_errors=True`` in :class:`~wordnik_api.config.ClientSettings` to get
the underlying :class:`~wordnik_api.exceptions.RequestError` instead.

Example Usage:
    import asyncio
    from wordnik_api import WordnikClient

    async def main():
        async with WordnikClient("my-api-key") as client:
            words = await client.get_definitions("serendipity", limit=3)
            for w in words or []:
                print(w.part_of_speech, w.text)

    asyncio.run(main())
"""
from __future__ import annotations

import asyncio
import datetime as dt
import logging
from typing import Any, Callable, List, Mapping, Optional, Sequence, Type, TypeVar, Union

import requests
from pydantic import TypeAdapter, ValidationError

from .config import WORD_URL, WORDS_URL, ClientSettings
from .enums import (
    PartOfSpeech,
    PronunciationSource,
    RelationshipType,
    SortBy,
    SortOrder,
    SourceDictionary,
    TypeFormat,
)
from .exceptions import RequestError, ResponseFormatError
from .models import (
    AudioMetadata,
    Example,
    Frequency,
    Phrase,
    Pronunciation,
    RandomWord,
    RelatedWord,
    Syllable,
    Word,
    WordOfTheDay,
)
from .transport import Transport
from .utils import normalize_date

__all__ = ["WordnikClient", "MAX_EXAMPLES"]

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E", PartOfSpeech, RelationshipType)

# the examples endpoint refuses larger pages
MAX_EXAMPLES = 50

_words = TypeAdapter(List[Word])
_audio = TypeAdapter(List[AudioMetadata])
_strings = TypeAdapter(List[str])
_examples = TypeAdapter(List[Example])
_frequencies = TypeAdapter(List[Frequency])
_syllables = TypeAdapter(List[Syllable])
_phrases = TypeAdapter(List[Phrase])
_pronunciations = TypeAdapter(List[Pronunciation])
_related = TypeAdapter(List[RelatedWord])
_random_words = TypeAdapter(List[RandomWord])
_score = TypeAdapter(int)


def _enum_param(enum_cls: Type[E], value: Any) -> Any:
    """Coerce a filter argument (one tag or a sequence of tags) into *enum_cls*."""
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return [enum_cls(v) for v in value]
    return enum_cls(value)


class WordnikClient:
    """Public client for the Wordnik REST API.

    Concurrent calls share one ``requests.Session`` and so one connection
    pool. Use a client per thread if the pool itself must not be shared.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        settings: Optional[ClientSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        if settings is None:
            settings = ClientSettings(api_key=api_key)
        elif api_key is not None:
            settings = settings.model_copy(update={"api_key": api_key})
        self.settings = settings
        self._transport = Transport(settings, session=session)

    @property
    def api_key(self) -> str:
        return self._transport.api_key

    # ------------------------------------------------------------------ #
    # lifecycle
    # ------------------------------------------------------------------ #
    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "WordnikClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "WordnikClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------ #
    # plumbing
    # ------------------------------------------------------------------ #
    async def _call(
        self,
        endpoint: str,
        params: Mapping[str, Any],
        parse: Callable[[Any], T],
        base_url: str = WORD_URL,
        default: Any = None,
    ) -> Any:
        """Run one request in a worker thread and shape the result.

        Request and shape failures are logged and replaced by *default*,
        unless the client is configured with ``raise_errors``.
        """
        try:
            data = await asyncio.to_thread(self._transport.request, endpoint, params, base_url)
            try:
                return parse(data)
            except (ValidationError, KeyError, TypeError) as e:
                raise ResponseFormatError(f"Unexpected response from {endpoint}: {e}") from e
        except RequestError as e:
            if self.settings.raise_errors:
                raise
            logger.warning("Wordnik lookup %s failed: %s", endpoint, e)
            return default

    # ------------------------------------------------------------------ #
    # word.json endpoints
    # ------------------------------------------------------------------ #
    async def get_definitions(
        self,
        word: str,
        limit: int = 1,
        part_of_speech: Union[PartOfSpeech, str, None] = None,
        source_dictionary: SourceDictionary = "all",
        use_canonical: bool = False,
        include_tags: bool = False,
    ) -> Optional[List[Word]]:
        """
        Get definitions of a word.
        :param word: The word to define.
        :param limit: Maximum number of definitions to return.
        :param part_of_speech: Only return definitions for this part of speech.
        :param source_dictionary: Dictionary to draw from, or "all".
        :param use_canonical: Look up the canonical form ("cats" -> "cat").
        :param include_tags: Return a closed set of XML tags in the response.
        :return: The definitions, or None if the lookup failed.
        """
        params = {
            "limit": limit,
            "partOfSpeech": _enum_param(PartOfSpeech, part_of_speech),
            "sourceDictionaries": source_dictionary,
            "useCanonical": use_canonical,
            "includeTags": include_tags,
        }
        return await self._call(f"{word}/definitions", params, _words.validate_python)

    async def get_audio(self, word: str, use_canonical: bool = False, limit: int = 1) -> Optional[List[AudioMetadata]]:
        """Get metadata for audio pronunciations of a word; file URLs expire after a short while."""
        params = {"useCanonical": use_canonical, "limit": limit}
        return await self._call(f"{word}/audio", params, _audio.validate_python)

    async def get_etymologies(self, word: str, use_canonical: bool = False) -> Optional[List[str]]:
        return await self._call(
            f"{word}/etymologies", {"useCanonical": use_canonical}, _strings.validate_python
        )

    async def get_examples(
        self,
        word: str,
        include_duplicates: bool = False,
        use_canonical: bool = False,
        skip: int = 0,
        limit: int = 1,
    ) -> Optional[List[Example]]:
        """
        Get usage examples of a word.
        :param skip: Number of results to skip.
        :param limit: Maximum number of results; values above 50 are lowered to 50.
        :return: The examples, or None if the lookup failed.
        """
        params = {
            "includeDuplicates": include_duplicates,
            "useCanonical": use_canonical,
            "skip": skip,
            "limit": min(limit, MAX_EXAMPLES),
        }
        return await self._call(
            f"{word}/examples", params, lambda data: _examples.validate_python(data["examples"])
        )

    async def get_frequency(
        self,
        word: str,
        use_canonical: bool = False,
        start_year: int = 1800,
        end_year: int = 2012,
    ) -> Optional[List[Frequency]]:
        """Get the yearly corpus frequency of a word between *start_year* and *end_year*."""
        params = {"useCanonical": use_canonical, "startYear": start_year, "endYear": end_year}
        return await self._call(
            f"{word}/frequency", params, lambda data: _frequencies.validate_python(data["frequency"])
        )

    async def get_hyphenation(
        self,
        word: str,
        use_canonical: bool = False,
        source_dictionary: SourceDictionary = "all",
        limit: int = 1,
    ) -> Optional[List[Syllable]]:
        params = {"useCanonical": use_canonical, "sourceDictionary": source_dictionary, "limit": limit}
        return await self._call(f"{word}/hyphenation", params, _syllables.validate_python)

    async def get_phrases(self, word: str, use_canonical: bool = False, limit: int = 1) -> Optional[List[Phrase]]:
        """Get bigram phrases containing a word."""
        params = {"useCanonical": use_canonical, "limit": limit}
        return await self._call(f"{word}/phrases", params, _phrases.validate_python)

    async def get_pronunciation(
        self,
        word: str,
        use_canonical: bool = False,
        source_dictionary: Optional[PronunciationSource] = None,
        type_format: Optional[TypeFormat] = None,
        limit: int = 1,
    ) -> Optional[List[Pronunciation]]:
        """
        Get text pronunciations of a word.
        :param source_dictionary: Only use this dictionary; None lets the service choose.
        :param type_format: Notation of the pronunciation, e.g. "IPA" or "arpabet".
        :return: The pronunciations, or None if the lookup failed.
        """
        params = {
            "limit": limit,
            "useCanonical": use_canonical,
            "sourceDictionary": source_dictionary,
            "typeFormat": type_format,
        }
        return await self._call(f"{word}/pronunciation", params, _pronunciations.validate_python)

    async def get_related_words(
        self,
        word: str,
        use_canonical: bool = False,
        relationship_types: Union[RelationshipType, str, Sequence[Union[RelationshipType, str]], None] = None,
        limit_per_relationship_type: Optional[int] = None,
    ) -> Optional[List[RelatedWord]]:
        """
        Get words related to a word, grouped by relationship.
        :param relationship_types: One relationship type or several; None returns every type.
        :param limit_per_relationship_type: Cap on the words returned per group.
        :return: The groups, or None if the lookup failed.
        """
        params = {
            "useCanonical": use_canonical,
            "relationshipTypes": _enum_param(RelationshipType, relationship_types),
            "limitPerRelationshipType": limit_per_relationship_type,
        }
        return await self._call(f"{word}/relatedWords", params, _related.validate_python)

    async def get_scrabble_score(self, word: str) -> Optional[int]:
        """Get the Scrabble score of a word. The service is case sensitive, so lowercase the word first."""
        return await self._call(
            f"{word}/scrabbleScore", {}, lambda data: _score.validate_python(data["value"])
        )

    async def get_top_example(self, word: str, use_canonical: bool = False) -> Optional[Example]:
        return await self._call(
            f"{word}/topExample", {"useCanonical": use_canonical}, Example.model_validate
        )

    # ------------------------------------------------------------------ #
    # words.json endpoints
    # ------------------------------------------------------------------ #
    async def get_random_word(
        self,
        has_dictionary_def: bool = True,
        include_part_of_speech: Union[PartOfSpeech, str, Sequence[Union[PartOfSpeech, str]], None] = None,
        exclude_part_of_speech: Union[PartOfSpeech, str, Sequence[Union[PartOfSpeech, str]], None] = None,
        min_corpus_count: Optional[int] = None,
        max_corpus_count: Optional[int] = None,
        min_dictionary_count: Optional[int] = None,
        max_dictionary_count: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
    ) -> Optional[RandomWord]:
        """
        Get a single random word.
        :param has_dictionary_def: Only return words with dictionary definitions.
        :param min_corpus_count: Minimum corpus frequency for terms.
        :param min_dictionary_count: Minimum number of dictionaries the word appears in.
        :param min_length: Minimum word length.
        :return: The word, or None if the lookup failed.
        """
        params = self._random_filters(
            has_dictionary_def,
            include_part_of_speech,
            exclude_part_of_speech,
            min_corpus_count,
            max_corpus_count,
            min_dictionary_count,
            max_dictionary_count,
            min_length,
            max_length,
        )
        return await self._call("randomWord", params, RandomWord.model_validate, base_url=WORDS_URL)

    async def get_random_words(
        self,
        has_dictionary_def: bool = True,
        include_part_of_speech: Union[PartOfSpeech, str, Sequence[Union[PartOfSpeech, str]], None] = None,
        exclude_part_of_speech: Union[PartOfSpeech, str, Sequence[Union[PartOfSpeech, str]], None] = None,
        min_corpus_count: Optional[int] = None,
        max_corpus_count: Optional[int] = None,
        min_dictionary_count: Optional[int] = None,
        max_dictionary_count: Optional[int] = None,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        sort_by: Optional[SortBy] = None,
        sort_order: Optional[SortOrder] = None,
        limit: int = 10,
    ) -> List[RandomWord]:
        """
        Get a list of random words. Takes the filters of :meth:`get_random_word` plus ordering.
        :param sort_by: "alpha" or "count".
        :param sort_order: "asc" or "desc".
        :param limit: Number of words to return.
        :return: The words, or an empty list if the lookup failed.
        """
        params = self._random_filters(
            has_dictionary_def,
            include_part_of_speech,
            exclude_part_of_speech,
            min_corpus_count,
            max_corpus_count,
            min_dictionary_count,
            max_dictionary_count,
            min_length,
            max_length,
        )
        params.update({"sortBy": sort_by, "sortOrder": sort_order, "limit": limit})
        return await self._call(
            "randomWords", params, _random_words.validate_python, base_url=WORDS_URL, default=[]
        )

    async def get_word_of_the_day(self, date: Union[str, dt.date, None] = None) -> Optional[WordOfTheDay]:
        """
        Get the word of the day.
        :param date: A ``yyyy-MM-dd`` string, a date/datetime, or None for today.
        :return: The word of the day, or None if the lookup failed.
        :raises InvalidDateError: if *date* is a string not in ``yyyy-MM-dd`` form.
        """
        params = {"date": normalize_date(date)}
        return await self._call("wordOfTheDay", params, WordOfTheDay.model_validate, base_url=WORDS_URL)

    @staticmethod
    def _random_filters(
        has_dictionary_def: bool,
        include_part_of_speech: Any,
        exclude_part_of_speech: Any,
        min_corpus_count: Optional[int],
        max_corpus_count: Optional[int],
        min_dictionary_count: Optional[int],
        max_dictionary_count: Optional[int],
        min_length: Optional[int],
        max_length: Optional[int],
    ) -> dict:
        return {
            "hasDictionaryDef": has_dictionary_def,
            "includePartOfSpeech": _enum_param(PartOfSpeech, include_part_of_speech),
            "excludePartOfSpeech": _enum_param(PartOfSpeech, exclude_part_of_speech),
            "minCorpusCount": min_corpus_count,
            "maxCorpusCount": max_corpus_count,
            "minDictionaryCount": min_dictionary_count,
            "maxDictionaryCount": max_dictionary_count,
            "minLength": min_length,
            "maxLength": max_length,
        }
