from weather_relay.clients.http_session import DEFAULT_USER_AGENT, configure_session


class DummySession:
    def __init__(self):
        self.headers = {}
        self.mounted = {}

    def mount(self, prefix, adapter):
        self.mounted[prefix] = adapter


def _configured(headers=None):
    sess = DummySession()

    def dummy_request(*args, **kwargs):
        return kwargs

    sess.request = dummy_request  # type: ignore[attr-defined]
    return configure_session(
        sess,
        headers=headers,
        timeout_seconds=5,
        retries=1,
        retry_backoff_seconds=0.1,
        allowed_methods=("GET",),
    )


def test_configure_session_sets_headers_and_timeout():
    configured = _configured({"X-Test": "1"})

    assert configured.headers["X-Test"] == "1"
    assert configured.headers["User-Agent"] == DEFAULT_USER_AGENT
    assert "https://" in configured.mounted
    assert "http://" in configured.mounted

    kwargs = configured.request("GET", "http://example.com")
    assert kwargs["timeout"] == 5


def test_explicit_timeout_and_user_agent_win():
    configured = _configured({"User-Agent": "custom"})

    assert configured.headers["User-Agent"] == "custom"
    assert configured.request("GET", "http://example.com", timeout=1)["timeout"] == 1
