import pytest
from pydantic import ValidationError

from wordnik_api import PartOfSpeech, RelatedWord, RelationshipType, Word, WordOfTheDay
from wordnik_api.models import Example, Pronunciation


def test_wire_names_round_trip():
    data = {"relationshipType": "cross-reference", "words": ["see also"]}
    related = RelatedWord.model_validate(data)
    assert related.model_dump(by_alias=True, mode="json") == data


def test_snake_case_names_are_accepted():
    w = Word(part_of_speech=PartOfSpeech.VERB_TRANSITIVE, text="to chase")
    assert w.model_dump(by_alias=True, exclude_none=True)["partOfSpeech"] == "verb-transitive"


def test_unknown_keys_are_kept():
    w = Word.model_validate({"id": "x", "textProns": [], "notes": ["n"]})
    assert w.model_extra == {"textProns": [], "notes": ["n"]}


def test_records_are_immutable():
    w = Word.model_validate({"id": "x"})
    with pytest.raises(ValidationError):
        w.text = "changed"


def test_word_of_the_day_id_comes_from_underscore_id():
    wotd = WordOfTheDay.model_validate({"_id": "abc", "word": "quidnunc"})
    assert wotd.id == "abc"
    assert wotd.definitions == []
    assert wotd.model_dump(by_alias=True)["_id"] == "abc"


def test_numeric_ids_are_coerced_to_strings():
    p = Pronunciation.model_validate({"seq": 0, "raw": "kat", "rawType": "arpabet", "id": 12})
    assert p.id == "12"


def test_unknown_tags_are_kept_as_strings():
    related = RelatedWord.model_validate({"relationshipType": "cousin", "words": []})
    assert related.relationship_type == "cousin"
    w = Word.model_validate({"partOfSpeech": "phrasal-verb"})
    assert w.part_of_speech == "phrasal-verb"
    assert w.model_dump(by_alias=True, exclude_unset=True) == {"partOfSpeech": "phrasal-verb"}


def test_known_tags_become_enum_members():
    related = RelatedWord.model_validate({"relationshipType": "synonym", "words": []})
    assert related.relationship_type is RelationshipType.SYNONYM


def test_example_requires_text():
    with pytest.raises(ValidationError):
        Example.model_validate({"word": "cat"})
