"""Helpers for ``owner/name`` repository slugs.

Slugs use ``/`` as a separator but are API identifiers, not filesystem paths,
so they are split here rather than with ``pathlib``.
"""

from __future__ import annotations


def repo_slug(owner: str, name: str) -> str:
    """Join an owner and repository name into ``owner/name``.

    Examples
    --------
    >>> repo_slug("octocat", "Hello-World")
    'octocat/Hello-World'

    """
    return f"{owner}/{name}"


def _invalid_slug(slug: str) -> ValueError:
    return ValueError(
        f"Invalid repository slug: expected 'owner/name', got {slug!r}"
    )


def parse_repo_slug(slug: str) -> tuple[str, str]:
    """Split an ``owner/name`` slug into its two parts.

    Surrounding whitespace is ignored; anything other than exactly two
    non-empty segments is rejected.

    Raises
    ------
    ValueError
        If the slug is not in ``owner/name`` format.

    Examples
    --------
    >>> parse_repo_slug("octocat/Hello-World")
    ('octocat', 'Hello-World')

    """
    candidate = slug.strip()
    if candidate.count("/") != 1:
        raise _invalid_slug(slug)

    owner, name = candidate.split("/")
    if not owner or not name or owner != owner.strip() or name != name.strip():
        raise _invalid_slug(slug)

    return owner, name
