import threading
from concurrent.futures import Future

import httpx
import pytest
from pytest_httpx import HTTPXMock

from fluenthttp import (
    Either,
    Failure,
    Http,
    RawResponse,
    Response,
    Success,
    TransportError,
    gather,
)
from tests.utils.transports import RecordingTransport


class TestExecute:
    def test_success(self, httpx_mock: HTTPXMock, http: Http, base_url: str):
        httpx_mock.add_response(
            url=f"{base_url}/people/1",
            status_code=200,
            text='{"name":"Ada"}',
            headers={"X-Request-Id": "abc"},
        )

        result = http.get(f"{base_url}/people/1").execute()

        assert isinstance(result, Success)
        response = result.unwrap_success()
        assert response.get_status_code() == 200
        assert response.get_content() == '{"name":"Ada"}'
        assert response.get_header("X-Request-Id") == "abc"

    def test_error_status_is_still_a_success(
        self, httpx_mock: HTTPXMock, http: Http, base_url: str
    ):
        httpx_mock.add_response(url=f"{base_url}/missing", status_code=404)

        result = http.get(f"{base_url}/missing").execute()

        assert result.is_success()
        response = result.unwrap_success()
        assert response.is_client_error()
        assert not response.is_successful()

    def test_unreachable_host_is_a_failure(
        self, httpx_mock: HTTPXMock, http: Http, base_url: str
    ):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"))

        result = http.get(f"{base_url}/people").execute()

        assert isinstance(result, Failure)
        error = result.peek_failure()
        assert isinstance(error, TransportError)
        assert isinstance(error.__cause__, httpx.ConnectError)
        assert "Connection refused" in error.message
        assert f"GET {base_url}/people" in error.message

    def test_timeout_is_a_failure(
        self, httpx_mock: HTTPXMock, http: Http, base_url: str
    ):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = http.delete(f"{base_url}/people/1").execute()

        assert result.is_failure()
        assert isinstance(result.peek_failure().__cause__, httpx.ReadTimeout)

    def test_one_exchange_per_call(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        request = Http(recording_transport).get(base_url)

        request.execute()
        request.execute()

        assert len(recording_transport.specs) == 2

    def test_pattern_matching_on_result(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        result = Http(recording_transport).get(base_url).execute()

        match result:
            case Success(response):
                assert response.get_content() == "ok"
            case Failure(error):
                pytest.fail(f"Unexpected failure: {error}")


class TestExecuteOptional:
    def test_returns_response(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        response = Http(recording_transport).get(base_url).execute_optional()
        assert isinstance(response, Response)
        assert response.get_content() == "ok"

    def test_failure_becomes_none(
        self, unreachable_transport: RecordingTransport, base_url: str
    ):
        assert Http(unreachable_transport).get(base_url).execute_optional() is None
        assert len(unreachable_transport.specs) == 1


class TestExecuteDeferred:
    def test_returns_future_with_result(
        self, httpx_mock: HTTPXMock, http: Http, base_url: str
    ):
        httpx_mock.add_response(url=base_url + "/people", text="[]")

        future = http.get(f"{base_url}/people").execute_deferred()

        assert isinstance(future, Future)
        result = future.result(timeout=5)
        assert future.done()
        assert result.unwrap_success().get_content() == "[]"

    def test_failure_is_returned_not_raised(
        self, unreachable_transport: RecordingTransport, base_url: str
    ):
        with Http(unreachable_transport) as http:
            future = http.post(base_url).set_body("{}").execute_deferred()
            result = future.result(timeout=5)

        assert result.is_failure()
        assert future.exception() is None

    def test_runs_off_the_calling_thread(self, base_url: str):
        seen: list[str] = []

        class ThreadRecordingTransport(RecordingTransport):
            def exchange(self, spec):
                seen.append(threading.current_thread().name)
                return super().exchange(spec)

        with Http(ThreadRecordingTransport()) as http:
            http.get(base_url).execute_deferred().result(timeout=5)

        assert seen and seen[0].startswith("fluenthttp")

    def test_state_is_captured_when_scheduled(self, base_url: str):
        gate = threading.Event()

        class GatedTransport(RecordingTransport):
            def exchange(self, spec):
                gate.wait(timeout=5)
                return super().exchange(spec)

        transport = GatedTransport()
        with Http(transport) as http:
            request = http.get(f"{base_url}/people")
            future = request.execute_deferred()
            request.add_header("X-Late", "1").add_parameter("late", "1")
            gate.set()
            future.result(timeout=5)

        assert transport.specs[0].headers == []
        assert transport.specs[0].url == f"{base_url}/people"


class TestExecuteStream:
    def test_emits_one_response_then_completes(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        values: list[Response] = []
        errors: list[Exception] = []
        completed = threading.Event()

        producer = Http(recording_transport).get(base_url).execute_stream()
        producer.subscribe(values.append, errors.append, completed.set).result(
            timeout=5
        )

        assert len(values) == 1
        assert values[0].get_content() == "ok"
        assert errors == []
        assert completed.is_set()

    def test_is_cold(self, recording_transport: RecordingTransport, base_url: str):
        producer = Http(recording_transport).get(base_url).execute_stream()

        assert recording_transport.specs == []
        producer.to_list()
        producer.to_list()
        assert len(recording_transport.specs) == 2

    def test_failure_terminates_without_emission(
        self, unreachable_transport: RecordingTransport, base_url: str
    ):
        values: list[Response] = []
        errors: list[Exception] = []
        completed = threading.Event()

        producer = Http(unreachable_transport).get(base_url).execute_stream()
        producer.subscribe(values.append, errors.append, completed.set).result(
            timeout=5
        )

        assert values == []
        assert len(errors) == 1
        assert isinstance(errors[0], TransportError)
        assert not completed.is_set()

    def test_failure_without_handler_fails_the_subscription(
        self, unreachable_transport: RecordingTransport, base_url: str
    ):
        producer = Http(unreachable_transport).get(base_url).execute_stream()
        with pytest.raises(TransportError):
            producer.subscribe(lambda _: None).result(timeout=5)

    def test_failure_raises_from_iteration(
        self, unreachable_transport: RecordingTransport, base_url: str
    ):
        producer = Http(unreachable_transport).get(base_url).execute_stream()
        with pytest.raises(TransportError):
            list(producer)

    @pytest.mark.anyio
    async def test_async_iteration(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        producer = Http(recording_transport).get(base_url).execute_stream()

        values = [response async for response in producer]

        assert [response.get_content() for response in values] == ["ok"]


class TestAll:
    def test_emits_every_result(
        self, httpx_mock: HTTPXMock, http: Http, base_url: str
    ):
        httpx_mock.add_response(url=f"{base_url}/a", text="a")
        httpx_mock.add_response(url=f"{base_url}/b", text="b")
        httpx_mock.add_exception(
            httpx.ConnectError("Connection refused"), url=f"{base_url}/c"
        )

        results = http.all(
            http.get(f"{base_url}/a"),
            http.post(f"{base_url}/b").set_body("{}"),
            http.get(f"{base_url}/c"),
        ).to_list()

        assert len(results) == 3
        contents = sorted(
            result.unwrap_success().get_content()
            for result in results
            if result.is_success()
        )
        failures = [result.peek_failure() for result in results if result.is_failure()]
        assert contents == ["a", "b"]
        assert len(failures) == 1
        assert isinstance(failures[0], TransportError)

    def test_completes_after_all_results(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        values: list[Either[TransportError, Response]] = []
        completed = threading.Event()

        with Http(recording_transport) as http:
            requests = [http.get(f"{base_url}/{i}") for i in range(5)]
            http.all(*requests).subscribe(
                values.append, on_complete=completed.set
            ).result(timeout=5)

        assert len(values) == 5
        assert completed.is_set()
        assert sorted(spec.url for spec in recording_transport.specs) == sorted(
            f"{base_url}/{i}" for i in range(5)
        )

    def test_emits_in_completion_order(self, base_url: str):
        release_slow = threading.Event()

        class OrderedTransport(RecordingTransport):
            def exchange(self, spec):
                if spec.url.endswith("/slow"):
                    release_slow.wait(timeout=5)
                    return RawResponse(status_code=200, content=b"slow")
                return RawResponse(status_code=200, content=b"fast")

        with Http(OrderedTransport()) as http:
            results = iter(
                http.all(http.get(f"{base_url}/slow"), http.get(f"{base_url}/fast"))
            )
            first = next(results)
            release_slow.set()
            rest = list(results)

        assert first.unwrap_success().get_content() == "fast"
        assert [r.unwrap_success().get_content() for r in rest] == ["slow"]

    def test_no_requests_completes_empty(self, http: Http):
        assert http.all().to_list() == []

    def test_each_subscription_runs_again(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        with Http(recording_transport) as http:
            producer = http.all(http.get(base_url), http.delete(base_url))
            producer.to_list()
            producer.to_list()

        assert len(recording_transport.specs) == 4

    def test_gather_uses_default_http(
        self, recording_transport: RecordingTransport, base_url: str
    ):
        Http.set_default(Http(recording_transport))

        results = gather(
            Http.default().get(f"{base_url}/a"), Http.default().get(f"{base_url}/b")
        ).to_list()

        assert all(result.is_success() for result in results)
        assert len(recording_transport.specs) == 2
