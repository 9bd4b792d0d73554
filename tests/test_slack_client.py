import httpx
import pytest

from src.core.credentials import CredentialStatus
from src.core.slack import InvalidThreadReferenceError, SlackAPIError
from tests.conftest import THREAD_URL, RecordingTransport, make_slack_client


class TestFetchThread:
    async def test_returns_messages_in_order(self, slack_ok):
        client = make_slack_client(slack_ok)

        messages = await client.fetch_thread(THREAD_URL, "tok")

        assert len(slack_ok.requests) == 1
        assert [m.user for m in messages] == ["alice", "bob"]
        assert [m.text for m in messages] == ["hi", "yo"]
        assert [m.timestamp for m in messages] == ["1", "2"]

    async def test_sends_bearer_token_and_thread_params(self, slack_ok):
        client = make_slack_client(slack_ok)

        await client.fetch_thread(THREAD_URL, "tok")

        request = slack_ok.requests[0]
        assert request.method == "GET"
        assert request.url.path == "/api/conversations.replies"
        assert request.headers["Authorization"] == "Bearer tok"
        assert request.url.params["channel"] == "C1"
        assert request.url.params["ts"] == "0.000123"
        assert request.url.params["limit"] == "1000"

    async def test_timestamps_are_not_normalized(self):
        recorder = RecordingTransport(
            lambda request: httpx.Response(
                200,
                json={
                    "messages": [
                        {"user": "U1", "text": "a", "ts": "1700000000.000100"},
                        {"user": "U2", "text": "b", "ts": "1699999999.999999"},
                        {"user": "U3", "text": "c", "ts": "1700000001.000000"},
                    ]
                },
            )
        )
        client = make_slack_client(recorder)

        messages = await client.fetch_thread(THREAD_URL, "tok")

        assert [m.timestamp for m in messages] == [
            "1700000000.000100",
            "1699999999.999999",
            "1700000001.000000",
        ]

    async def test_ok_false_raises_slack_api_error(self):
        recorder = RecordingTransport(
            lambda request: httpx.Response(200, json={"ok": False, "error": "channel_not_found"})
        )
        client = make_slack_client(recorder)

        with pytest.raises(SlackAPIError) as exc_info:
            await client.fetch_thread(THREAD_URL, "tok")

        assert exc_info.value.error == "channel_not_found"
        assert exc_info.value.method == "conversations.replies"

    async def test_http_error_propagates(self):
        recorder = RecordingTransport(lambda request: httpx.Response(500))
        client = make_slack_client(recorder)

        with pytest.raises(httpx.HTTPStatusError):
            await client.fetch_thread(THREAD_URL, "tok")
        assert len(recorder.requests) == 1

    async def test_network_error_propagates(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = make_slack_client(RecordingTransport(handler))

        with pytest.raises(httpx.ConnectError):
            await client.fetch_thread(THREAD_URL, "tok")

    async def test_missing_messages_key_propagates(self):
        recorder = RecordingTransport(lambda request: httpx.Response(200, json={"ok": True}))
        client = make_slack_client(recorder)

        with pytest.raises(KeyError):
            await client.fetch_thread(THREAD_URL, "tok")

    async def test_invalid_url_makes_no_request(self, slack_ok):
        client = make_slack_client(slack_ok)

        with pytest.raises(InvalidThreadReferenceError):
            await client.fetch_thread("https://example.com/thread", "tok")
        assert slack_ok.requests == []

    async def test_empty_token_rejected(self, slack_ok):
        client = make_slack_client(slack_ok)

        with pytest.raises(ValueError):
            await client.fetch_thread(THREAD_URL, "")
        assert slack_ok.requests == []


def _network_error(request):
    raise httpx.ConnectError("connection refused", request=request)


class TestCheckToken:
    async def test_ok_true_is_valid(self):
        recorder = RecordingTransport(
            lambda request: httpx.Response(200, json={"ok": True, "team": "acme"})
        )
        client = make_slack_client(recorder)

        assert await client.check_token("xoxb-good") is CredentialStatus.VALID
        assert await client.validate_token("xoxb-good") is True

        request = recorder.requests[0]
        assert request.method == "POST"
        assert request.url.path == "/api/auth.test"
        assert request.headers["Authorization"] == "Bearer xoxb-good"

    async def test_ok_false_is_invalid(self):
        recorder = RecordingTransport(
            lambda request: httpx.Response(200, json={"ok": False, "error": "invalid_auth"})
        )
        client = make_slack_client(recorder)

        assert await client.check_token("xoxb-bad") is CredentialStatus.INVALID

    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(500),
            lambda request: httpx.Response(200, content=b"<html>not json</html>"),
            lambda request: httpx.Response(200, json=["unexpected"]),
            _network_error,
        ],
        ids=["server-error", "malformed-json", "wrong-shape", "network-error"],
    )
    async def test_failures_are_check_failed(self, handler):
        client = make_slack_client(RecordingTransport(handler))

        assert await client.check_token("xoxb") is CredentialStatus.CHECK_FAILED

    @pytest.mark.parametrize(
        "handler",
        [
            lambda request: httpx.Response(500),
            lambda request: httpx.Response(200, content=b"{not json"),
            _network_error,
            lambda request: httpx.Response(200, json={"ok": False, "error": "invalid_auth"}),
        ],
        ids=["server-error", "malformed-json", "network-error", "rejected"],
    )
    async def test_validate_token_collapses_failures_to_false(self, handler):
        client = make_slack_client(RecordingTransport(handler))

        assert await client.validate_token("xoxb") is False
