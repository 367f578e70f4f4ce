"""Process environment adapter tests.

Cover target selection from the selector variable, the ``os.environ``
default, and the slug-to-prefix helper.
"""

from __future__ import annotations

import pytest

from lib_env_resolver import DEFAULT_TARGET, MissingKey, Resolver, default_env_prefix, from_process_env
from lib_env_resolver.adapters.env.default import DEFAULT_TARGET_VARIABLE, target_from


def test_default_env_prefix() -> None:
    assert default_env_prefix("lib-env-resolver") == "LIB_ENV_RESOLVER"


def test_target_from_selector_variable() -> None:
    assert DEFAULT_TARGET_VARIABLE == "NODE_ENV"
    assert target_from({"NODE_ENV": "production"}) == "production"
    assert target_from({"APP_ENV": "staging"}, "APP_ENV") == "staging"


def test_target_defaults_when_selector_unset_or_none() -> None:
    assert target_from({}) == DEFAULT_TARGET
    assert target_from({"NODE_ENV": None}) == DEFAULT_TARGET


def test_from_process_env_uses_explicit_mapping() -> None:
    environ = {"NODE_ENV": "test", "ACME_BILLING_TEST_URL": "https://test", "URL": "https://default"}
    resolver = from_process_env(prefix="acme", namespace="billing", environ=environ)
    assert isinstance(resolver, Resolver)
    assert resolver.target == "test"
    assert resolver.environment is environ
    assert resolver.required("url") == "https://test"


def test_from_process_env_custom_target_variable() -> None:
    environ = {"APP_ENV": "production", "SVC_PRODUCTION_TOKEN": "t", "PRODUCTION_TOKEN": "unscoped"}
    resolver = from_process_env(namespace="svc", environ=environ, target_variable="APP_ENV")
    assert resolver.target == "production"
    assert resolver.optional("token") == "t"


def test_from_process_env_without_namespace_never_searches_bare_target_key() -> None:
    """Empty prefix and namespace still contribute a leading separator to target-scoped names."""

    environ = {"APP_ENV": "production", "PRODUCTION_TOKEN": "unscoped", "_PRODUCTION_TOKEN": "scoped"}
    resolver = from_process_env(environ=environ, target_variable="APP_ENV")
    assert "PRODUCTION_TOKEN" not in resolver.candidate_keys("token")
    assert resolver.required("token") == "scoped"


def test_from_process_env_reads_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NODE_ENV", "staging")
    monkeypatch.setenv("SHOP_STAGING_DB_URL", "postgres://staging")
    resolver = from_process_env(namespace="shop")
    assert resolver.target == "staging"
    assert resolver.required("db.url") == "postgres://staging"


def test_from_process_env_without_selector(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("NODE_ENV", raising=False)
    monkeypatch.delenv("LIB_ENV_RESOLVER_NOT_SET", raising=False)
    resolver = from_process_env()
    assert resolver.target == DEFAULT_TARGET
    with pytest.raises(MissingKey):
        resolver.required("lib_env_resolver.not_set")
