"""Process environment adapter.

Purpose
-------
Build :class:`~lib_env_resolver.domain.resolver.Resolver` instances backed by
the live process environment so applications do not wire ``os.environ`` and
the deployment target by hand.

Key behaviours
--------------
* Reads the target from a selector variable (``NODE_ENV`` by default) and falls
  back to :data:`~lib_env_resolver.domain.resolver.DEFAULT_TARGET` when unset.
* Accepts an explicit ``environ`` mapping for testability.
* Offers :func:`default_env_prefix` to turn package slugs into prefixes.
"""

from __future__ import annotations

import os
from typing import Final, Mapping, Optional

from ...domain.resolver import DEFAULT_TARGET, Resolver
from ...observability import log_debug

DEFAULT_TARGET_VARIABLE: Final[str] = "NODE_ENV"
"""Variable consulted for the deployment target when none is given explicitly."""


def default_env_prefix(slug: str) -> str:
    """Return the canonical environment prefix for *slug*.

    Examples
    --------
    >>> default_env_prefix('lib-env-resolver')
    'LIB_ENV_RESOLVER'
    """

    return slug.replace("-", "_").upper()


def target_from(environ: Mapping[str, Optional[str]], variable: str = DEFAULT_TARGET_VARIABLE) -> str:
    """Return the deployment target named by ``variable`` in *environ*.

    Examples
    --------
    >>> target_from({'NODE_ENV': 'test'})
    'test'
    >>> target_from({})
    'development'
    """

    value = environ.get(variable)
    return DEFAULT_TARGET if value is None else value


def from_process_env(
    *,
    prefix: str = "",
    namespace: str = "",
    environ: Mapping[str, Optional[str]] | None = None,
    target_variable: str = DEFAULT_TARGET_VARIABLE,
) -> Resolver:
    """Return a resolver over *environ* (default :data:`os.environ`).

    Why
    ----
    Most applications want the live process environment and a target picked
    by the usual selector variable. Keeping this in an adapter leaves the
    domain resolver free of process state.

    Parameters
    ----------
    prefix / namespace:
        Passed through to :class:`Resolver`.
    environ:
        Mapping to read from. Defaults to :data:`os.environ`.
    target_variable:
        Name of the variable selecting the deployment target.

    Side Effects
    ------------
    Emits a ``resolver_created`` debug event naming the chosen target.

    Examples
    --------
    >>> resolver = from_process_env(namespace='app', environ={'NODE_ENV': 'test', 'APP_TEST_URL': 'x'})
    >>> resolver.target, resolver.required('url')
    ('test', 'x')
    """

    source = os.environ if environ is None else environ
    target = target_from(source, target_variable)
    log_debug("resolver_created", key=None, candidate=None, target=target, target_variable=target_variable)
    return Resolver(environment=source, prefix=prefix, namespace=namespace, target=target)
