"""
Unit tests for watch streams.
"""

import threading

import httpx
import pytest

from conftest import ApiResponse, status_response, watch_frame, watch_stream
from kubecreate.errors import EncodingError, TransportError
from kubecreate.modules.api import EventType, ListOptions, Namespace, Secret, SecretList, Status
from kubecreate.modules.client import CoreV1Client, RESTClient, ResourceClient, StreamWatcher

WATCH_PATH = "/api/v1/watch/namespaces/ns1/widgets"


def secret(name, resource_version):
    return {"kind": "Secret", "metadata": {"name": name, "resourceVersion": resource_version}}


@pytest.fixture
def widgets(rest_client):
    return ResourceClient(rest_client, "widgets", Secret, SecretList, "ns1")


def test_watch_path_and_params(api_server, widgets):
    api_server.register("GET", WATCH_PATH, watch_stream())

    with widgets.watch(ListOptions(label_selector="app=web", resource_version="10")) as watcher:
        assert isinstance(watcher, StreamWatcher)
        assert list(watcher) == []

    call = api_server.last_call
    assert call.path == WATCH_PATH
    assert call.params == [("labelSelector", "app=web"), ("resourceVersion", "10")]


def test_cluster_scoped_watch_path(api_server, rest_client):
    api_server.register(
        "GET",
        "/api/v1/watch/namespaces",
        watch_stream(("ADDED", {"kind": "Namespace", "metadata": {"name": "ns1"}})),
    )

    with CoreV1Client(rest_client).namespaces().watch() as watcher:
        events = list(watcher)

    assert events[0].type == EventType.ADDED
    assert isinstance(events[0].object, Namespace)


def test_events_decoded_in_order(api_server, widgets):
    api_server.register(
        "GET",
        WATCH_PATH,
        watch_stream(
            ("ADDED", secret("w1", "1")),
            ("MODIFIED", secret("w1", "2")),
            ("DELETED", secret("w1", "3")),
        ),
    )

    watcher = widgets.watch()
    events = [(event_type, obj.metadata.resource_version) for event_type, obj in watcher]

    assert events == [
        (EventType.ADDED, "1"),
        (EventType.MODIFIED, "2"),
        (EventType.DELETED, "3"),
    ]
    assert watcher.stopped is True


def test_error_event_carries_status(api_server, widgets):
    api_server.register(
        "GET",
        WATCH_PATH,
        watch_stream(("ERROR", {"kind": "Status", "message": "too old resource version", "code": 410})),
    )

    with widgets.watch() as watcher:
        event = next(iter(watcher))

    assert event.type == EventType.ERROR
    assert isinstance(event.object, Status)
    assert event.object.code == 410


def test_stop_ends_iteration(api_server, widgets):
    api_server.register(
        "GET",
        WATCH_PATH,
        watch_stream(("ADDED", secret("w1", "1")), ("ADDED", secret("w2", "2"))),
    )

    watcher = widgets.watch()
    stream = iter(watcher)
    first = next(stream)
    watcher.stop()

    assert first.object.name == "w1"
    assert list(stream) == []
    assert watcher.stopped is True


def test_stop_is_idempotent(api_server, widgets):
    api_server.register("GET", WATCH_PATH, watch_stream())

    watcher = widgets.watch()
    watcher.stop()
    watcher.stop()

    assert list(watcher) == []


def test_malformed_frame(api_server, widgets):
    api_server.register("GET", WATCH_PATH, ApiResponse(content=b'{"type": "ADDED"}\n'))

    with widgets.watch() as watcher:
        with pytest.raises(EncodingError):
            list(watcher)


def test_unknown_event_type(api_server, widgets):
    api_server.register("GET", WATCH_PATH, watch_stream(("BOOKMARKED", secret("w1", "1"))))

    with widgets.watch() as watcher:
        with pytest.raises(EncodingError):
            list(watcher)


def test_watch_rejected_by_server(api_server, widgets):
    api_server.register("GET", WATCH_PATH, status_response(403, "forbidden", "Forbidden"))

    with pytest.raises(TransportError) as exc_info:
        widgets.watch()

    assert exc_info.value.status_code == 403


def test_watch_request_has_no_read_timeout(api_server, widgets):
    api_server.register("GET", WATCH_PATH, watch_stream())
    api_server.register("GET", "/api/v1/namespaces/ns1/widgets", ApiResponse(json={"kind": "SecretList", "items": []}))

    widgets.watch().stop()
    watch_timeout = api_server.last_call.timeout
    widgets.list()
    list_timeout = api_server.last_call.timeout

    assert watch_timeout["read"] is None
    assert watch_timeout["connect"] == list_timeout["connect"]
    assert list_timeout["read"] is not None


class TestLiveStream:
    """Watches against a real socket."""

    @pytest.fixture
    def live_widgets(self, stream_server):
        rest = RESTClient(httpx.Client(base_url=stream_server.url, timeout=0.3))
        yield ResourceClient(rest, "widgets", Secret, SecretList, "ns1")
        rest.close()

    def test_idle_gap_longer_than_client_timeout(self, stream_server, live_widgets):
        stream_server.script = [
            (0, watch_frame("ADDED", secret("a", "1"))),
            (1.0, watch_frame("ADDED", secret("b", "2"))),
        ]

        with live_widgets.watch() as watcher:
            names = [event.object.name for event in watcher]

        assert names == ["a", "b"]
        assert stream_server.paths == [WATCH_PATH]

    def test_stop_from_another_thread_unblocks_consumer(self, stream_server, live_widgets):
        stream_server.script = [
            (0, watch_frame("ADDED", secret("a", "1"))),
            (10, watch_frame("ADDED", secret("b", "2"))),
        ]
        watcher = live_widgets.watch()
        seen = []
        errors = []
        first_event = threading.Event()

        def consume():
            try:
                for event in watcher:
                    seen.append(event.object.name)
                    first_event.set()
            except Exception as e:
                errors.append(e)

        consumer = threading.Thread(target=consume, daemon=True)
        consumer.start()
        assert first_event.wait(5)

        watcher.stop()
        consumer.join(3)

        assert not consumer.is_alive()
        assert seen == ["a"]
        assert errors == []
        assert watcher.stopped is True
