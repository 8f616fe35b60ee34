"""Tests for skill vocabulary loading and indexing."""

import dataclasses
import json

import pytest
from pydantic import ValidationError

from config import settings
from services.matching.vocabulary import (
    DEFAULT_VOCABULARY_PATH,
    SkillVocabulary,
    get_vocabulary,
    load_vocabulary,
    reset_vocabulary,
)


def _write(tmp_path, payload) -> str:
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestBundledVocabulary:
    def test_loads(self):
        vocab = load_vocabulary(DEFAULT_VOCABULARY_PATH)
        assert len(vocab.synonyms) >= 35
        assert vocab.canonical("js") == "javascript"
        assert vocab.canonical("node.js") == "node"

    def test_related_table(self):
        vocab = load_vocabulary(DEFAULT_VOCABULARY_PATH)
        assert "javascript" in vocab.related_to("react")
        assert vocab.related_to("cobol") == frozenset()

    def test_get_vocabulary_is_cached(self):
        assert get_vocabulary() is get_vocabulary()


class TestFromTables:
    def test_keys_and_aliases_are_cleaned(self):
        vocab = SkillVocabulary.from_tables({" Rust ": ["RS", "rust-lang"]})
        assert vocab.canonical("rs") == "rust"
        assert vocab.canonical("Rust-Lang") == "rust"

    def test_first_canonical_wins_alias_collision(self):
        vocab = SkillVocabulary.from_tables({
            "postgresql": ["pg"],
            "pygame": ["pg"],
        })
        assert vocab.canonical("pg") == "postgresql"

    def test_canonical_name_never_remapped_by_alias(self):
        vocab = SkillVocabulary.from_tables({
            "machine learning": ["ai"],
            "ai": ["artificial intelligence"],
        })
        assert vocab.canonical("ai") == "ai"
        assert vocab.canonical("artificial intelligence") == "ai"

    def test_related_entries_are_canonicalized(self):
        vocab = SkillVocabulary.from_tables(
            {"javascript": ["js"], "react": ["reactjs"]},
            {"ReactJS": ["JS", "css"]},
        )
        assert vocab.related_to("react") == frozenset({"javascript", "css"})

    def test_skill_is_not_related_to_itself(self):
        vocab = SkillVocabulary.from_tables({"react": ["reactjs"]}, {"react": ["reactjs", "jsx"]})
        assert vocab.related_to("react") == frozenset({"jsx"})


class TestLoadVocabulary:
    def test_custom_file(self, tmp_path):
        path = _write(tmp_path, {"synonyms": {"golang": ["go"]}})
        vocab = load_vocabulary(path)
        assert vocab.canonical("Go") == "golang"
        assert vocab.related == {}

    def test_malformed_file_raises(self, tmp_path):
        path = _write(tmp_path, {"synonyms": {"golang": "go"}})
        with pytest.raises(ValidationError):
            load_vocabulary(path)

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_vocabulary(tmp_path / "nope.json")

    def test_settings_override(self, tmp_path, monkeypatch):
        path = _write(tmp_path, {"synonyms": {"elixir": ["ex"]}})
        monkeypatch.setattr(settings, "skill_vocabulary_path", path)
        reset_vocabulary()
        assert get_vocabulary().canonical("ex") == "elixir"
        assert get_vocabulary().canonical("js") == "js"


def test_vocabulary_is_frozen():
    vocab = SkillVocabulary.from_tables({"golang": ["go"]})
    with pytest.raises(dataclasses.FrozenInstanceError):
        vocab.alias_index = {}
