"""
Token extractor: derives hashtags and mentions from entry text.

Public API
----------
extract_tokens(content)                  -> ExtractedTokens
resolve_tokens(content, tags, mentions)  -> ExtractedTokens

A token is `#` or `@` followed by one or more ASCII word characters
(letters, digits, underscore). The symbol may sit inside another word:
"mail@domain" yields the mention "domain". Values are lowercased and
deduplicated.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, Optional


_TOKEN_RE = re.compile(r"([#@])(\w+)", re.ASCII)


@dataclass(frozen=True)
class ExtractedTokens:
    tags: frozenset[str] = field(default_factory=frozenset)
    mentions: frozenset[str] = field(default_factory=frozenset)

    def sorted_tags(self) -> list[str]:
        return sorted(self.tags)

    def sorted_mentions(self) -> list[str]:
        return sorted(self.mentions)


def extract_tokens(content: str) -> ExtractedTokens:
    """Scan `content` once and collect lowercase tags and mentions."""
    tags: set[str] = set()
    mentions: set[str] = set()
    for symbol, word in _TOKEN_RE.findall(content or ""):
        if symbol == "#":
            tags.add(word.lower())
        else:
            mentions.add(word.lower())
    return ExtractedTokens(tags=frozenset(tags), mentions=frozenset(mentions))


def _normalize(values: Optional[Iterable[str]]) -> frozenset[str]:
    if not values:
        return frozenset()
    cleaned = (v.strip().lstrip("#@").lower() for v in values if v)
    return frozenset(v for v in cleaned if v)


def resolve_tokens(
    content: str,
    tags: Optional[Iterable[str]] = None,
    mentions: Optional[Iterable[str]] = None,
) -> ExtractedTokens:
    """
    Tokens to persist on a new entry.

    Extraction wins per field; caller-supplied values are used only for a
    field where extraction found nothing.
    """
    extracted = extract_tokens(content)
    return ExtractedTokens(
        tags=extracted.tags or _normalize(tags),
        mentions=extracted.mentions or _normalize(mentions),
    )
