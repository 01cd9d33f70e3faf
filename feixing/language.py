"""Multilingual names attached to every reference record."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidInputError

__all__ = ["LanguageDetails", "Language", "NamedRecord"]

_DETAIL_KEYS = ("ja", "ja2", "vi", "zh_cn", "zh_tw")


@dataclass(frozen=True)
class LanguageDetails:
    """Written form and its romanised reading, e.g. ``("甲", "jiǎ")``."""

    alphabet: str = ""
    phonetic: str = ""

    @classmethod
    def from_pair(cls, pair: Sequence[str] | None) -> "LanguageDetails":
        if not pair:
            return cls()
        phonetic = pair[1] if len(pair) > 1 else ""
        return cls(alphabet=str(pair[0]), phonetic=str(phonetic))


@dataclass(frozen=True)
class Language:
    """Name of a record in English plus the CJK/Vietnamese renderings."""

    en: str
    ja: LanguageDetails = field(default_factory=LanguageDetails)
    ja2: LanguageDetails = field(default_factory=LanguageDetails)
    vi: LanguageDetails = field(default_factory=LanguageDetails)
    zh_cn: LanguageDetails = field(default_factory=LanguageDetails)
    zh_tw: LanguageDetails = field(default_factory=LanguageDetails)

    @classmethod
    def from_data(cls, payload: Mapping[str, Any]) -> "Language":
        """Build a :class:`Language` from a ``{"en": ..., "ja": [a, p], ...}`` row."""

        details = {
            key: LanguageDetails.from_pair(payload.get(key)) for key in _DETAIL_KEYS
        }
        return cls(en=str(payload.get("en", "")), **details)

    def details(self, lang: str | None = None) -> LanguageDetails:
        """Return the details for ``lang`` (defaults to the configured language)."""

        if lang is None:
            from .config import get_settings

            lang = get_settings().language
        if lang == "en":
            return LanguageDetails(alphabet=self.en, phonetic=self.en)
        if lang not in _DETAIL_KEYS:
            raise InvalidInputError(f"Unsupported language '{lang}'")
        return getattr(self, lang)

    def alphabet(self, lang: str | None = None) -> str:
        return self.details(lang).alphabet

    def phonetic(self, lang: str | None = None) -> str:
        return self.details(lang).phonetic


class NamedRecord:
    """Mixin for records carrying a ``name: Language`` attribute."""

    name: Language

    def alphabet(self, lang: str | None = None) -> str:
        """Written form in ``lang`` or the configured display language."""

        return self.name.alphabet(lang)

    def phonetic(self, lang: str | None = None) -> str:
        return self.name.phonetic(lang)

    def alphabet_ja(self) -> str:
        return self.name.ja.alphabet
