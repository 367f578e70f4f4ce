"""Public package surface for layered environment key resolution.

``Resolver`` searches an environment mapping for the most specific of six
composite names built from a prefix, namespace, deployment target, and the
requested key. The logging helpers are re-exported so host applications can
attach handlers and bind trace identifiers.
"""

from __future__ import annotations

from .core import (
    DEFAULT_TARGET,
    MissingKey,
    Resolution,
    Resolver,
    ResolverError,
    ResolverOptions,
    candidate_keys,
    default_env_prefix,
    from_process_env,
)
from .observability import bind_trace_id, get_logger

__all__ = [
    "DEFAULT_TARGET",
    "MissingKey",
    "Resolution",
    "Resolver",
    "ResolverError",
    "ResolverOptions",
    "bind_trace_id",
    "candidate_keys",
    "default_env_prefix",
    "from_process_env",
    "get_logger",
]
