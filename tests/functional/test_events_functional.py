from designcheck.logic.events import (
    VALIDATION_STARTED,
    get_buffered_events,
    publish,
    start_buffering,
    stop_buffering,
)


def test_nothing_is_kept_when_buffering_is_off():
    stop_buffering()
    for n in range(50):
        publish(VALIDATION_STARTED, {"validation_id": n})
    assert get_buffered_events() == []


def test_buffer_keeps_only_the_most_recent_events():
    start_buffering(limit=3)
    for n in range(10):
        publish(VALIDATION_STARTED, {"validation_id": n})
    assert [e["payload"]["validation_id"] for e in get_buffered_events()] == [7, 8, 9]
    assert get_buffered_events() == []


def test_requests_do_not_accumulate_events_without_a_consumer(client, project):
    stop_buffering()
    for _ in range(20):
        assert client.post(f"/api/projects/{project['id']}/validations").status_code == 201
    start_buffering()
    assert get_buffered_events() == []
