import importlib


def _reload_http_client(monkeypatch, **env):
    """Reload module and optionally set env vars."""
    for k, v in env.items():
        if v is None:
            monkeypatch.delenv(k, raising=False)
        else:
            monkeypatch.setenv(k, str(v))

    mod = importlib.import_module('twilio_lite.common.http_client')
    return importlib.reload(mod)


def test_get_session_is_singleton(monkeypatch):
    mod = _reload_http_client(monkeypatch, HTTP_POOL_CONN=None, HTTP_POOL_MAX=None)

    s1 = mod.get_session()
    s2 = mod.get_session()

    assert s1 is s2


def test_get_session_uses_env_pool_sizes_and_no_retries(monkeypatch):
    mod = _reload_http_client(monkeypatch, HTTP_POOL_CONN=7, HTTP_POOL_MAX=9)

    s = mod.get_session()

    https_adapter = s.adapters.get('https://')
    assert https_adapter is not None
    assert getattr(https_adapter, '_pool_connections') == 7
    assert getattr(https_adapter, '_pool_maxsize') == 9
    assert https_adapter.max_retries.total == 0


def test_close_session_builds_a_new_one(monkeypatch):
    mod = _reload_http_client(monkeypatch, HTTP_POOL_CONN=None, HTTP_POOL_MAX=None)

    s1 = mod.get_session()
    mod.close_session()
    s2 = mod.get_session()

    assert s1 is not s2
    # closing twice is harmless
    mod.close_session()
    mod.close_session()
