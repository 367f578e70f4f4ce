"""Domain-level exception hierarchy.

Purpose
-------
Expose the error taxonomy shared by the resolver, the process adapter, and
consuming applications. The hierarchy lives in the domain layer so outer
layers (CLI, adapters) may depend on it without the reverse being true.

Contents
--------
* :class:`ResolverError` – umbrella base class for all library failures.
* :class:`MissingKey` – raised when none of the candidate keys is bound.
"""

from __future__ import annotations

from typing import Iterable


class ResolverError(Exception):
    """Base type for all exceptions emitted by ``lib_env_resolver``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class MissingKey(ResolverError):
    """Raised when no candidate key is present in the environment source.

    Why
    ----
    Operators need the full search path to decide which variable to set, so
    the exception carries every candidate that was tried, in order.

    Attributes
    ----------
    keys:
        Candidate key names in the order they were searched.

    Examples
    --------
    >>> error = MissingKey("PROJECT_URL", "URL")
    >>> str(error)
    'PROJECT_URL or URL must be provided.'
    >>> error.keys
    ('PROJECT_URL', 'URL')
    """

    def __init__(self, *keys: str) -> None:
        # args carries the keys so pickling rebuilds the same search path.
        super().__init__(*keys)
        self.keys: tuple[str, ...] = tuple(keys)

    def __str__(self) -> str:
        return _describe(self.keys)


def _describe(keys: Iterable[str]) -> str:
    """Render the candidate list the way it appears in error messages."""

    return f"{' or '.join(keys)} must be provided."
