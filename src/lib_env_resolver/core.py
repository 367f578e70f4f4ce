"""Composition root for ``lib_env_resolver``.

Purpose
-------
Collect the stable, consumer-ready API in one module so callers and the CLI do
not reach into domain or adapter modules directly.

Contents
--------
* :class:`Resolver` / :class:`ResolverOptions` / :class:`Resolution` – domain
  value objects.
* :class:`ResolverError` / :class:`MissingKey` – error taxonomy.
* :func:`from_process_env` / :func:`default_env_prefix` – process adapter.
* :func:`candidate_keys` / :func:`split_segments` – naming helpers.
"""

from __future__ import annotations

from .adapters.env.default import DEFAULT_TARGET_VARIABLE, default_env_prefix, from_process_env, target_from
from .domain.errors import MissingKey, ResolverError
from .domain.keys import NAMESPACE_PATTERN, candidate_keys, split_segments
from .domain.resolver import DEFAULT_ENVIRONMENT, DEFAULT_TARGET, Resolution, Resolver, ResolverOptions

__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_TARGET",
    "DEFAULT_TARGET_VARIABLE",
    "NAMESPACE_PATTERN",
    "MissingKey",
    "Resolution",
    "Resolver",
    "ResolverError",
    "ResolverOptions",
    "candidate_keys",
    "default_env_prefix",
    "from_process_env",
    "split_segments",
    "target_from",
]
