"""Key segmentation and candidate-key composition.

Purpose
-------
Turn prefixes, namespaces, targets, and logical keys into the upper-case,
underscore-joined names looked up in an environment source.

Contents
--------
* :data:`NAMESPACE_PATTERN` – delimiter pattern (``_`` or ``.``).
* :func:`split_segments` – split a value into path segments.
* :func:`compose_key` – join segment groups into one candidate name.
* :func:`candidate_keys` – build the six candidates in precedence order.

System Role
-----------
Pure functions with no I/O; :class:`lib_env_resolver.domain.resolver.Resolver`
delegates all naming decisions here.
"""

from __future__ import annotations

import re
from typing import Final, Sequence

NAMESPACE_PATTERN: Final[re.Pattern[str]] = re.compile(r"[_.]")
"""Delimiters that mark segment boundaries in prefixes, namespaces, targets, and keys."""


def split_segments(value: object) -> list[str]:
    """Split ``value`` (after ``str()``) on :data:`NAMESPACE_PATTERN`.

    Empty strings and consecutive delimiters produce empty segments; nothing is
    trimmed, so an unset prefix still contributes one empty segment.

    Examples
    --------
    >>> split_segments('a.b_c')
    ['a', 'b', 'c']
    >>> split_segments('')
    ['']
    >>> split_segments(42)
    ['42']
    """

    return NAMESPACE_PATTERN.split(str(value))


def compose_key(*groups: Sequence[str]) -> str:
    """Join segment ``groups`` with ``_`` and upper-case the result.

    Examples
    --------
    >>> compose_key(['some'], ['project'], ['url'])
    'SOME_PROJECT_URL'
    >>> compose_key([''], ['url'])
    '_URL'
    """

    return "_".join(segment for group in groups for segment in group).upper()


def candidate_keys(
    key: object,
    *,
    prefix: str = "",
    namespace: str = "",
    target: str = "",
) -> tuple[str, ...]:
    """Return the six candidate names for ``key``, most specific first.

    Order: prefix+namespace+target, namespace+target, prefix+namespace,
    namespace, prefix, bare key.

    Examples
    --------
    >>> candidate_keys('url', prefix='some', namespace='project', target='test')
    ('SOME_PROJECT_TEST_URL', 'PROJECT_TEST_URL', 'SOME_PROJECT_URL', 'PROJECT_URL', 'SOME_URL', 'URL')
    >>> candidate_keys('url')[-1]
    'URL'
    """

    keys = split_segments(key)
    prefixes = split_segments(prefix)
    namespaces = split_segments(namespace)
    targets = split_segments(target)
    return (
        compose_key(prefixes, namespaces, targets, keys),
        compose_key(namespaces, targets, keys),
        compose_key(prefixes, namespaces, keys),
        compose_key(namespaces, keys),
        compose_key(prefixes, keys),
        compose_key(keys),
    )
