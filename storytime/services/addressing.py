"""
Resource addressing.

Maps logical references (character names, prompt titles, job references,
chat archives and message indices) to request paths, and maps slugs back to
display names when only a slug is at hand.
"""

from __future__ import annotations

from typing import Iterable, Optional
from urllib.parse import quote

from storytime.core.exceptions import ValidationError
from storytime.models.job import JobById, JobByLegacyComposite, JobRef
from storytime.utils.slug import job_slug, require_slug, to_slug

API_PREFIX = "/api"


# ===========================================
# Characters and prompts
# ===========================================


def characters_path() -> str:
    return f"{API_PREFIX}/characters"


def character_path(name: str) -> str:
    return f"{characters_path()}/{require_slug(name, 'character')}"


def prompts_path() -> str:
    return f"{API_PREFIX}/prompts"


def prompt_path(title: str) -> str:
    return f"{prompts_path()}/{require_slug(title, 'prompt')}"


# ===========================================
# Jobs
# ===========================================


def jobs_path() -> str:
    return f"{API_PREFIX}/jobs"


def job_segment(ref: JobRef) -> str:
    """Path segment for a job reference.

    ID references use the opaque ID as-is. Legacy references join the
    independently slugged character and prompt; both must be addressable.
    """
    if isinstance(ref, JobById):
        job_id = str(ref.id).strip()
        if not job_id:
            raise ValidationError("Cannot address job: empty ID")
        return quote(job_id, safe="")
    if isinstance(ref, JobByLegacyComposite):
        require_slug(ref.character, "character")
        require_slug(ref.prompt, "prompt")
        return job_slug(ref.character, ref.prompt)
    raise TypeError(f"Unsupported job reference: {ref!r}")


def job_path(ref: JobRef) -> str:
    return f"{jobs_path()}/{job_segment(ref)}"


def job_run_path(ref: JobRef) -> str:
    return f"{job_path(ref)}/run"


def job_run_unsaved_path() -> str:
    return f"{jobs_path()}/run"


# ===========================================
# Chats
# ===========================================


def chats_path() -> str:
    return f"{API_PREFIX}/chats"


def chat_path(character: str) -> str:
    return f"{chats_path()}/{require_slug(character, 'chat')}"


def chat_messages_path(character: str) -> str:
    return f"{chat_path(character)}/messages"


def _check_index(index: int) -> int:
    if index < 0:
        raise ValidationError(f"Message index must be non-negative, got {index}")
    return index


def chat_message_path(character: str, index: int) -> str:
    return f"{chat_messages_path(character)}/{_check_index(index)}"


def chat_message_read_path(character: str, index: int) -> str:
    return f"{chat_message_path(character, index)}/read"


def chat_read_all_path(character: str) -> str:
    return f"{chat_path(character)}/read-all"


def prompt_test_run_path() -> str:
    return f"{API_PREFIX}/test/prompt"


def character_test_run_path() -> str:
    return f"{API_PREFIX}/test/character"


# ===========================================
# Reverse mapping
# ===========================================


def slug_to_display_name(slug: str) -> str:
    """Approximate a display name: hyphens to spaces, each word capitalised.

    ``"jane-doe"`` becomes ``"Jane Doe"``. Not an inverse of ``to_slug``.
    """
    words = slug.replace("-", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


def find_by_slug(slug: str, known_names: Iterable[str]) -> Optional[str]:
    """First known name whose slug equals ``slug``, or None."""
    target = to_slug(slug)
    if not target:
        return None
    for name in known_names:
        if to_slug(name) == target:
            return name
    return None


def resolve_display_name(slug: str, known_names: Iterable[str]) -> str:
    """Resolve a slug against known names, or fall back to the approximation.

    The fallback is for display only. Callers that need exact identity must
    carry the canonical name instead of rebuilding it from a slug.
    """
    match = find_by_slug(slug, known_names)
    if match is not None:
        return match
    return slug_to_display_name(slug)
