#!/usr/bin/env python3
"""
titles - Display titles for command path tokens.

Generated file names only carry lowercase tokens ("apikey", "cpusizes"), so
plain capitalization gets acronyms and product names wrong. The override
table below fixes the known cases; everything else gets its first letter
uppercased.
"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional


TITLE_OVERRIDES: Mapping[str, str] = MappingProxyType({
    'apikey': 'API Key',
    'apikeys': 'API Keys',
    'cacertificate': 'CA Certificate',
    'cacertificates': 'CA Certificates',
    'ipallowlist': 'IP Allowlist',
    'ipallowlists': 'IP Allowlists',
    'tandc': 'Terms & Conditions',
    'arangodb': 'ArangoDB',
    'cpusizes': 'CPU Sizes',
    'nodesizes': 'Node Sizes',
})


def build_overrides(extra: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """Merge user supplied overrides over the built-in table (read-only result)."""
    if not extra:
        return TITLE_OVERRIDES
    merged = dict(TITLE_OVERRIDES)
    merged.update({str(k).lower(): str(v) for k, v in extra.items()})
    return MappingProxyType(merged)


def upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def resolve(token: str, overrides: Mapping[str, str] = TITLE_OVERRIDES) -> str:
    """
    Map a single path token to its display string.

    Tokens are never split further: "nodesizes" is either in the table or
    becomes "Nodesizes".
    """
    if token in overrides:
        return overrides[token]
    return upper_first(token)


def command_title(tokens: Iterable[str], overrides: Mapping[str, str] = TITLE_OVERRIDES) -> str:
    """Title for a command path (prefix already removed)."""
    return " ".join(resolve(token, overrides) for token in tokens)


def capitalize_words(text: str) -> str:
    """
    Uppercase the first letter of every word, leaving the rest alone.

    Used for the main heading of a document. Runs of whitespace collapse to a
    single space.
    """
    # Not str.capitalize(): "ArangoDB" must not become "Arangodb"
    return " ".join(upper_first(word) for word in text.split())
