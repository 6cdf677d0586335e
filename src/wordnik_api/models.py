"""wordnik_api.models

Immutable records for the JSON bodies the service returns. Attribute names
are snake_case; the camelCase wire names are accepted on input and restored
by ``model_dump(by_alias=True)``. Keys the service adds beyond the fields
declared here are kept as extra attributes.
"""
from __future__ import annotations

from typing import Annotated, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .enums import PartOfSpeech, RelationshipType

# Tags outside the enums are kept as plain strings rather than rejected.
PartOfSpeechTag = Annotated[Union[PartOfSpeech, str], Field(union_mode="left_to_right")]
RelationshipTag = Annotated[Union[RelationshipType, str], Field(union_mode="left_to_right")]

__all__ = [
    "WordnikModel",
    "Label",
    "Citation",
    "ExampleUse",
    "RelatedWord",
    "Word",
    "ContentProvider",
    "Example",
    "AudioMetadata",
    "Frequency",
    "Syllable",
    "Phrase",
    "Pronunciation",
    "RandomWord",
    "Definition",
    "WordOfTheDay",
]


class WordnikModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="allow",
    )


class Label(WordnikModel):
    text: str
    type: Optional[str] = None


class Citation(WordnikModel):
    source: Optional[str] = None
    cite: str


class ExampleUse(WordnikModel):
    text: str


class RelatedWord(WordnikModel):
    """Words linked to the subject word by one relationship."""

    relationship_type: RelationshipTag
    words: List[str] = Field(default_factory=list)


class Word(WordnikModel):
    """One definition of a word, as returned by the definitions endpoint."""

    id: Optional[str] = None
    part_of_speech: Optional[PartOfSpeechTag] = None
    attribution_text: Optional[str] = None
    attribution_url: Optional[str] = None
    source_dictionary: Optional[str] = None
    text: Optional[str] = None
    sequence: Optional[str] = None
    score: Optional[float] = None
    labels: List[Label] = Field(default_factory=list)
    citations: List[Citation] = Field(default_factory=list)
    word: Optional[str] = None
    related_words: List[RelatedWord] = Field(default_factory=list)
    example_uses: List[ExampleUse] = Field(default_factory=list)
    wordnik_url: Optional[str] = None


class ContentProvider(WordnikModel):
    id: int
    name: Optional[str] = None


class Example(WordnikModel):
    """A usage example drawn from a published document."""

    provider: Optional[ContentProvider] = None
    year: Optional[int] = None
    rating: Optional[float] = None
    url: Optional[str] = None
    word: Optional[str] = None
    text: str
    document_id: Optional[int] = None
    example_id: Optional[int] = None
    title: Optional[str] = None
    author: Optional[str] = None


class AudioMetadata(WordnikModel):
    comment_count: Optional[int] = None
    created_by: Optional[str] = None
    created_at: Optional[str] = None
    id: int
    word: str
    duration: Optional[float] = None
    audio_type: Optional[str] = None
    attribution_text: Optional[str] = None
    attribution_url: Optional[str] = None
    file_url: str


class Frequency(WordnikModel):
    """Number of corpus occurrences of a word in one year."""

    year: int
    count: int


class Syllable(WordnikModel):
    text: str
    seq: int
    type: Optional[str] = None


class Phrase(WordnikModel):
    """Bigram statistics for a two-word phrase."""

    count: int
    gram1: str
    gram2: str
    mi: float
    wlmi: float


class Pronunciation(WordnikModel):
    seq: int
    raw: str
    raw_type: str
    id: Optional[str] = None
    attribution_text: Optional[str] = None
    attribution_url: Optional[str] = None


class RandomWord(WordnikModel):
    id: int
    word: str
    canonical_form: Optional[str] = None
    original_word: Optional[str] = None
    suggestions: Optional[List[str]] = None
    vulgar: Optional[str] = None


class Definition(WordnikModel):
    """A definition attached to a word of the day."""

    source: Optional[str] = None
    text: str
    note: Optional[str] = None
    part_of_speech: Optional[PartOfSpeechTag] = None


class WordOfTheDay(WordnikModel):
    id: str = Field(alias="_id")
    word: str
    content_provider: Optional[ContentProvider] = None
    definitions: List[Definition] = Field(default_factory=list)
    publish_date: Optional[str] = None
    examples: List[Example] = Field(default_factory=list)
    pdd: Optional[str] = None
    html_extra: Optional[str] = None
    note: Optional[str] = None
