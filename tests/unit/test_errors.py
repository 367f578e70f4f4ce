from __future__ import annotations

from lib_env_resolver import MissingKey, ResolverError


def test_error_hierarchy() -> None:
    assert issubclass(MissingKey, ResolverError)
    assert isinstance(MissingKey("URL"), ResolverError)


def test_missing_key_message_joins_candidates() -> None:
    error = MissingKey("PROJECT_URL", "URL")
    assert error.keys == ("PROJECT_URL", "URL")
    assert str(error) == "PROJECT_URL or URL must be provided."


def test_missing_key_survives_pickling() -> None:
    import pickle

    error = MissingKey("PROJECT_URL", "URL")
    restored = pickle.loads(pickle.dumps(error))
    assert isinstance(restored, MissingKey)
    assert restored.keys == ("PROJECT_URL", "URL")
    assert str(restored) == "PROJECT_URL or URL must be provided."
