"""Immutable resolver that searches an environment source for layered keys.

Purpose
-------
Anchor the :class:`Resolver` value object which maps a short logical key such
as ``"url"`` onto the most specific variable bound in an environment source.

Contents
--------
* :data:`DEFAULT_TARGET` / :data:`DEFAULT_ENVIRONMENT` – construction defaults.
* :class:`ResolverOptions` – plain configuration record.
* :class:`Resolution` – introspection record describing a successful lookup.
* :class:`Resolver` – ``required`` / ``optional`` / ``with_target`` API.

System Role
-----------
Belongs to the domain layer: no I/O, no access to process state. The process
adapter (:mod:`lib_env_resolver.adapters.env.default`) supplies ``os.environ``
when callers want the live environment.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Final, Mapping, Optional

from ..observability import log_debug, make_event
from .errors import MissingKey
from .keys import candidate_keys

Environment = Mapping[str, Optional[str]]

DEFAULT_TARGET: Final[str] = "development"
DEFAULT_ENVIRONMENT: Final[Environment] = MappingProxyType({})
"""Shared empty environment used when callers do not supply one."""


def _default_environment() -> Environment:
    return DEFAULT_ENVIRONMENT


@dataclass(frozen=True, slots=True)
class ResolverOptions:
    """Configuration accepted by :meth:`Resolver.from_options`.

    Attributes
    ----------
    environment:
        Mapping of variable names to values. ``None`` values count as unset.
    prefix / namespace:
        Optional scoping segments; ``_`` or ``.`` separate nested segments.
    target:
        Deployment target such as ``"test"`` or ``"production"``.
    """

    environment: Environment = field(default_factory=_default_environment, repr=False, hash=False)
    prefix: str = ""
    namespace: str = ""
    target: str = DEFAULT_TARGET


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a successful :meth:`Resolver.lookup`.

    ``candidate`` is the name that matched; ``candidates`` is the full search
    path in the order it was tried.
    """

    key: str
    candidate: str
    value: str
    candidates: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Resolver:
    """Resolve logical keys against an environment source with layered fallbacks.

    Why
    ----
    Applications deployed under several names and targets want to write
    ``resolver.required("url")`` once and let operators override the value at
    whichever level of specificity suits them.

    What
    ----
    For each lookup six candidate names are built (see
    :func:`lib_env_resolver.domain.keys.candidate_keys`) and the first one
    bound in :attr:`environment` wins. Instances never change after
    construction; :meth:`with_target` returns a sibling instead.

    Examples
    --------
    >>> resolver = Resolver(
    ...     environment={"SOME_PROJECT_URL": "a", "URL": "b"},
    ...     prefix="some",
    ...     namespace="project",
    ...     target="test",
    ... )
    >>> resolver.required("url")
    'a'
    >>> resolver.optional("missing", "fallback")
    'fallback'
    >>> resolver.with_target("production").target
    'production'
    """

    environment: Environment = field(default_factory=_default_environment, repr=False, hash=False)
    prefix: str = ""
    namespace: str = ""
    target: str = DEFAULT_TARGET

    @classmethod
    def from_options(cls, options: ResolverOptions) -> Resolver:
        """Build a resolver from a :class:`ResolverOptions` record."""

        return cls(
            environment=options.environment,
            prefix=options.prefix,
            namespace=options.namespace,
            target=options.target,
        )

    def candidate_keys(self, key: object) -> tuple[str, ...]:
        """Return the six names searched for ``key``, most specific first.

        Examples
        --------
        >>> Resolver(namespace="project", target="test").candidate_keys("db.url")
        ('_PROJECT_TEST_DB_URL', 'PROJECT_TEST_DB_URL', '_PROJECT_DB_URL', 'PROJECT_DB_URL', '_DB_URL', 'DB_URL')
        """

        return candidate_keys(key, prefix=self.prefix, namespace=self.namespace, target=self.target)

    def has(self, name: str) -> bool:
        """Return whether ``name`` is bound; empty strings count, ``None`` does not.

        Examples
        --------
        >>> resolver = Resolver(environment={"BLANK": "", "UNSET": None})
        >>> resolver.has("BLANK"), resolver.has("UNSET"), resolver.has("OTHER")
        (True, False, False)
        """

        return self.environment.get(name) is not None

    def lookup(self, key: object) -> Resolution | None:
        """Return the first bound candidate for ``key`` or ``None``.

        Emits ``key_resolved`` or ``key_missing`` debug events. Values are
        never logged.
        """

        return self._scan(key, self.candidate_keys(key))

    def _scan(self, key: object, candidates: tuple[str, ...]) -> Resolution | None:
        """Search ``candidates`` in order and describe the first bound one."""

        for candidate in candidates:
            if self.has(candidate):
                log_debug("key_resolved", **make_event(str(key), candidate, {"target": self.target}))
                return Resolution(
                    key=str(key),
                    candidate=candidate,
                    value=self.environment[candidate],
                    candidates=candidates,
                )
        log_debug("key_missing", **make_event(str(key), None, {"candidates": list(candidates)}))
        return None

    def required(self, key: object) -> str:
        """Return the value bound to the most specific candidate for ``key``.

        Raises
        ------
        MissingKey
            When none of the six candidates is bound; the error lists them all.

        Examples
        --------
        >>> Resolver(namespace="project").required("url")
        Traceback (most recent call last):
        ...
        lib_env_resolver.domain.errors.MissingKey: _PROJECT_DEVELOPMENT_URL or PROJECT_DEVELOPMENT_URL or _PROJECT_URL or PROJECT_URL or _URL or URL must be provided.
        """

        candidates = self.candidate_keys(key)
        resolution = self._scan(key, candidates)
        if resolution is None:
            raise MissingKey(*candidates)
        return resolution.value

    def optional(self, key: object, default: str | None = None) -> str:
        """Return :meth:`required` or ``default`` when nothing is bound.

        Only a truthy ``default`` is honoured: ``None`` and ``""`` both let the
        original :class:`MissingKey` propagate.

        Examples
        --------
        >>> Resolver().optional("port", "8080")
        '8080'
        >>> Resolver().optional("port", "")
        Traceback (most recent call last):
        ...
        lib_env_resolver.domain.errors.MissingKey: __DEVELOPMENT_PORT or _DEVELOPMENT_PORT or __PORT or _PORT or _PORT or PORT must be provided.
        """

        try:
            return self.required(key)
        except MissingKey:
            if default:
                log_debug("default_used", **make_event(str(key), None))
                return default
            raise

    def with_target(self, target: str) -> Resolver:
        """Return a sibling sharing environment, prefix, and namespace but using ``target``.

        Subclasses are preserved because the copy goes through
        :func:`dataclasses.replace`.
        """

        return replace(self, target=target)


__all__ = [
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_TARGET",
    "Environment",
    "Resolution",
    "Resolver",
    "ResolverOptions",
]
