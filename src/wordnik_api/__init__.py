# noqa: D104
"""Top-level package for wordnik_api."""
from __future__ import annotations

from .config import ClientSettings
from .enums import PartOfSpeech, RelationshipType
from .exceptions import (
    ConfigurationError,
    InvalidAPIKeyError,
    InvalidDateError,
    RequestError,
    ResponseFormatError,
    WordnikError,
)
from .models import (
    AudioMetadata,
    Citation,
    ContentProvider,
    Definition,
    Example,
    ExampleUse,
    Frequency,
    Label,
    Phrase,
    Pronunciation,
    RandomWord,
    RelatedWord,
    Syllable,
    Word,
    WordOfTheDay,
)

__version__ = "1.0.0"
__all__ = [
    "WordnikClient",
    "ClientSettings",
    "PartOfSpeech",
    "RelationshipType",
    "WordnikError",
    "ConfigurationError",
    "InvalidDateError",
    "RequestError",
    "InvalidAPIKeyError",
    "ResponseFormatError",
    "AudioMetadata",
    "Citation",
    "ContentProvider",
    "Definition",
    "Example",
    "ExampleUse",
    "Frequency",
    "Label",
    "Phrase",
    "Pronunciation",
    "RandomWord",
    "RelatedWord",
    "Syllable",
    "Word",
    "WordOfTheDay",
]


def __getattr__(name):  # type: ignore[override]
    if name == "WordnikClient":
        from .client import WordnikClient

        return WordnikClient
    raise AttributeError(name)
