"""Tests for ApiClient and HttpxSender"""

import httpx
import pytest

from inspiration_list.client import ApiClient, ApiError, ApiRequest, HttpxSender

BASE_URL = "http://inspirations.test"


def make_sender(handler):
    return HttpxSender(BASE_URL, transport=httpx.MockTransport(handler))


class RecordingSend:
    """Send callable that records requests and replies with a fixed value"""

    def __init__(self, reply=None):
        self.reply = reply if reply is not None else {}
        self.requests = []

    def __call__(self, request):
        self.requests.append(request)
        return self.reply


class TestApiError:

    @pytest.mark.parametrize("status, network, client, server", [
        (0, True, False, False),
        (400, False, True, False),
        (404, False, True, False),
        (500, False, False, True),
        (503, False, False, True),
    ])
    def test_classification(self, status, network, client, server):
        error = ApiError("failed", status)

        assert error.is_network_error is network
        assert error.is_client_error is client
        assert error.is_server_error is server


class TestHttpxSender:

    def test_returns_json_body(self):
        captured = {}

        def handler(request):
            captured["request"] = request
            return httpx.Response(200, json={"status": "healthy"})

        sender = make_sender(handler)

        assert sender(ApiRequest("GET", "/api/health")) == {"status": "healthy"}
        assert str(captured["request"].url) == f"{BASE_URL}/api/health"
        sender.close()

    def test_error_uses_server_message(self):
        sender = make_sender(
            lambda request: httpx.Response(404, json={"error": "Not Found", "message": "Inspiration not found"})
        )

        with pytest.raises(ApiError) as exc_info:
            sender(ApiRequest("GET", "/api/inspirations/x"))

        assert exc_info.value.status == 404
        assert exc_info.value.message == "Inspiration not found"
        assert exc_info.value.data["error"] == "Not Found"

    def test_error_without_json_body(self):
        sender = make_sender(lambda request: httpx.Response(502, text="Bad gateway"))

        with pytest.raises(ApiError) as exc_info:
            sender(ApiRequest("GET", "/api/health"))

        assert exc_info.value.message == "HTTP 502"
        assert exc_info.value.data == "Bad gateway"

    def test_network_failure_is_status_zero(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        sender = make_sender(handler)

        with pytest.raises(ApiError) as exc_info:
            sender(ApiRequest("GET", "/api/health"))

        assert exc_info.value.is_network_error
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestApiClient:

    def test_create_inspiration(self):
        send = RecordingSend({"id": "inspiration_1_abcdef"})
        client = ApiClient(send=send)

        result = client.create_inspiration("新的想法", audio_data="UklGRg==")

        assert result == {"id": "inspiration_1_abcdef"}
        request = send.requests[0]
        assert request.method == "POST"
        assert request.path == "/api/inspirations"
        assert request.json == {"transcribedText": "新的想法", "audioData": "UklGRg=="}

    def test_list_inspirations_params(self):
        send = RecordingSend()
        client = ApiClient(send=send)

        client.list_inspirations(page=2, limit=10, category="技术创新", search="语音")

        assert send.requests[0].params == {"page": 2, "limit": 10, "category": "技术创新", "search": "语音"}

    def test_list_omits_all_category_and_empty_search(self):
        send = RecordingSend()
        client = ApiClient(send=send)

        client.list_inspirations(category="all", search="")

        assert send.requests[0].params == {"page": 1, "limit": 20}

    def test_get_and_delete_paths(self):
        send = RecordingSend()
        client = ApiClient(send=send)

        client.get_inspiration("inspiration_1_abcdef")
        client.delete_inspiration("inspiration_1_abcdef")

        assert [(r.method, r.path) for r in send.requests] == [
            ("GET", "/api/inspirations/inspiration_1_abcdef"),
            ("DELETE", "/api/inspirations/inspiration_1_abcdef"),
        ]

    def test_health_check_true(self):
        client = ApiClient(send=RecordingSend({"status": "healthy"}))

        assert client.health_check() is True

    def test_health_check_false_on_error(self):
        def failing(request):
            raise ApiError("Network request failed", 0)

        assert ApiClient(send=failing).health_check() is False

    def test_default_sender_over_httpx(self):
        client = ApiClient(BASE_URL)

        assert isinstance(client.send, HttpxSender)
        client.close()
