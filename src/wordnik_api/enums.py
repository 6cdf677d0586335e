"""wordnik_api.enums

Closed vocabularies shared by request filters and response records. The
values are the exact tags the service sends and expects.
"""
from __future__ import annotations

from enum import Enum
from typing import Literal

__all__ = [
    "PartOfSpeech",
    "RelationshipType",
    "SourceDictionary",
    "PronunciationSource",
    "TypeFormat",
    "SortBy",
    "SortOrder",
]


class PartOfSpeech(str, Enum):
    NOUN = "noun"
    ADJECTIVE = "adjective"
    VERB = "verb"
    ADVERB = "adverb"
    INTERJECTION = "interjection"
    PRONOUN = "pronoun"
    PREPOSITION = "preposition"
    ABBREVIATION = "abbreviation"
    AFFIX = "affix"
    ARTICLE = "article"
    AUXILIARY_VERB = "auxiliary-verb"
    CONJUNCTION = "conjunction"
    DEFINITE_ARTICLE = "definite-article"
    FAMILY_NAME = "family-name"
    GIVEN_NAME = "given-name"
    IDIOM = "idiom"
    IMPERATIVE = "imperative"
    NOUN_PLURAL = "noun-plural"
    # the service spells "possessive" this way
    NOUN_POSESSIVE = "noun-posessive"
    PAST_PARTICIPLE = "past-participle"
    PHRASAL_PREFIX = "phrasal-prefix"
    PROPER_NOUN = "proper-noun"
    PROPER_NOUN_PLURAL = "proper-noun-plural"
    PROPER_NOUN_POSESSIVE = "proper-noun-posessive"
    SUFFIX = "suffix"
    VERB_INTRANSITIVE = "verb-intransitive"
    VERB_TRANSITIVE = "verb-transitive"

    def __str__(self) -> str:
        return self.value


class RelationshipType(str, Enum):
    SYNONYM = "synonym"
    ANTONYM = "antonym"
    VARIANT = "variant"
    EQUIVALENT = "equivalent"
    CROSS_REFERENCE = "cross-reference"
    RELATED_WORD = "related-word"
    RHYME = "rhyme"
    FORM = "form"
    ETYMOLOGICALLY_RELATED_TERM = "etymologically-related-term"
    HYPERNYM = "hypernym"
    HYPONYM = "hyponym"
    INFLECTED_FORM = "inflected-form"
    PRIMARY = "primary"
    SAME_CONTEXT = "same-context"
    VERB_FORM = "verb-form"
    VERB_STEM = "verb-stem"
    HAS_TOPIC = "has_topic"

    def __str__(self) -> str:
        return self.value


# Closed value sets that the service documents but does not name.
SourceDictionary = Literal["all", "ahd-5", "century", "wiktionary", "webster", "wordnet"]
PronunciationSource = Literal["ahd-5", "century", "wiktionary", "webster", "wordnet"]
TypeFormat = Literal["ahd-5", "arpabet", "gcide-diacritical", "IPA"]
SortBy = Literal["alpha", "count"]
SortOrder = Literal["asc", "desc"]
