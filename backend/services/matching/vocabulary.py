"""Skill vocabulary: canonical synonyms and related-skill tables.

The vocabulary is data, loaded from a JSON file shaped like::

    {
      "synonyms": {"javascript": ["js", "es6", ...], ...},
      "related":  {"react": ["javascript", "html", ...], ...}
    }

``synonyms`` maps a canonical skill to its aliases. ``related`` maps a
canonical skill to adjacent skills that earn partial credit when the skill
itself is missing. The bundled file lives next to this module; set
``SKILL_VOCABULARY_PATH`` to load a different one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel

from config import settings

logger = logging.getLogger(__name__)

DEFAULT_VOCABULARY_PATH = Path(__file__).resolve().parent / "data" / "skill_vocabulary.json"


class VocabularyFile(BaseModel):
    """On-disk format of a skill vocabulary."""
    synonyms: dict[str, list[str]] = {}
    related: dict[str, list[str]] = {}


def _clean(skill: str) -> str:
    return skill.lower().strip()


@dataclass(frozen=True)
class SkillVocabulary:
    """Immutable lookup tables built from a :class:`VocabularyFile`.

    ``alias_index`` maps every known spelling (canonical names included) to
    its canonical name, so canonicalization is a single dict lookup.
    """

    synonyms: dict[str, list[str]] = field(default_factory=dict)
    related: dict[str, frozenset[str]] = field(default_factory=dict)
    alias_index: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_tables(
        cls,
        synonyms: dict[str, list[str]],
        related: dict[str, list[str]] | None = None,
    ) -> SkillVocabulary:
        clean_synonyms = {
            _clean(canonical): [_clean(alias) for alias in aliases]
            for canonical, aliases in synonyms.items()
        }

        # Canonical names always resolve to themselves; on alias collisions
        # the first canonical entry wins.
        alias_index: dict[str, str] = {c: c for c in clean_synonyms}
        for canonical, aliases in clean_synonyms.items():
            for alias in aliases:
                alias_index.setdefault(alias, canonical)

        def canon(skill: str) -> str:
            cleaned = _clean(skill)
            return alias_index.get(cleaned, cleaned)

        clean_related: dict[str, frozenset[str]] = {}
        for skill, adjacent in (related or {}).items():
            key = canon(skill)
            merged = set(clean_related.get(key, frozenset()))
            merged.update(canon(a) for a in adjacent)
            merged.discard(key)
            clean_related[key] = frozenset(merged)

        return cls(synonyms=clean_synonyms, related=clean_related, alias_index=alias_index)

    def canonical(self, skill: str) -> str:
        cleaned = _clean(skill)
        return self.alias_index.get(cleaned, cleaned)

    def related_to(self, canonical_skill: str) -> frozenset[str]:
        return self.related.get(canonical_skill, frozenset())


def load_vocabulary(path: str | Path) -> SkillVocabulary:
    """Read and index a vocabulary JSON file.

    Raises ``FileNotFoundError`` or ``pydantic.ValidationError`` when the file
    is missing or malformed.
    """
    path = Path(path)
    raw = VocabularyFile.model_validate_json(path.read_text(encoding="utf-8"))
    vocab = SkillVocabulary.from_tables(raw.synonyms, raw.related)
    logger.info(
        "Skill vocabulary loaded from %s (%d canonical skills, %d aliases, %d related entries)",
        path, len(vocab.synonyms), len(vocab.alias_index), len(vocab.related),
    )
    return vocab


_vocabulary: SkillVocabulary | None = None


def get_vocabulary() -> SkillVocabulary:
    """Return the process-wide vocabulary, loading it on first use."""
    global _vocabulary
    if _vocabulary is None:
        _vocabulary = load_vocabulary(settings.skill_vocabulary_path or DEFAULT_VOCABULARY_PATH)
    return _vocabulary


def reset_vocabulary() -> None:
    """Drop the cached vocabulary. Useful for testing."""
    global _vocabulary
    _vocabulary = None
