"""
URL-safe slugs derived from display names.

Slugs are lossy: case and punctuation collapse, so distinct names may share a
slug. Identity always stays with the display name.
"""

from __future__ import annotations

import re

from storytime.core.exceptions import ValidationError

_DISALLOWED = re.compile(r"[^a-zA-Z0-9\s-]")
_SEPARATORS = re.compile(r"[\s_]+")
_HYPHEN_RUNS = re.compile(r"-+")


def to_slug(text: str) -> str:
    """Convert text to a lowercase, hyphen-delimited slug.

    Returns an empty string when nothing addressable remains.
    """
    slug = text.lower()
    slug = _DISALLOWED.sub("", slug)
    slug = _SEPARATORS.sub("-", slug)
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")


def character_slug(name: str) -> str:
    return to_slug(name)


def prompt_slug(title: str) -> str:
    return to_slug(title)


def job_slug(character: str, prompt: str) -> str:
    """Legacy composite job slug: ``{character_slug}-{prompt_slug}``.

    Each component is slugged on its own before joining.
    """
    return f"{to_slug(character)}-{to_slug(prompt)}"


def require_slug(text: str, kind: str = "resource") -> str:
    """Slug ``text`` or raise ValidationError if the result is empty."""
    slug = to_slug(text)
    if not slug:
        raise ValidationError(
            f"Cannot address {kind} {text!r}: name has no URL-safe characters",
            details={"kind": kind, "name": text},
        )
    return slug
