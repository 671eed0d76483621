import pytest

from fieldops.services import order_payloads
from fieldops.services.order_payloads import (
    normalize_empty_to_null,
    notes_for_create,
    notes_for_update,
    prepare_create_payload,
    prepare_update_payload,
)

NOW = "2025-02-10T08:00:00+00:00"


def test_empty_strings_become_null():
    out = normalize_empty_to_null({"pm": "", "client": "  ", "week": "2025-07", "callout": False})
    assert out == {"pm": None, "client": None, "week": "2025-07", "callout": False}


def test_notes_for_create():
    assert notes_for_create(None, NOW) == []
    assert notes_for_create("  ", NOW) == []
    assert notes_for_create("gate code 1234", NOW) == [{"text": "gate code 1234", "timestamp": NOW}]
    assert notes_for_create([{"text": "a", "timestamp": "t0"}, "b"], NOW) == [
        {"text": "a", "timestamp": "t0"},
        {"text": "b", "timestamp": NOW},
    ]


def test_string_note_is_appended_on_update():
    existing = [{"text": "first", "timestamp": "t0"}]
    out = notes_for_update("second", existing, NOW)
    assert out == [{"text": "first", "timestamp": "t0"}, {"text": "second", "timestamp": NOW}]
    # de opgeslagen lijst blijft onaangeroerd
    assert len(existing) == 1


def test_list_note_replaces_on_update():
    out = notes_for_update([{"text": "only"}], [{"text": "old", "timestamp": "t0"}], NOW)
    assert out == [{"text": "only", "timestamp": NOW}]


def test_create_payload_derives_quote_no(db, openserve_client):
    data = prepare_create_payload(
        db,
        {"client_id": openserve_client.id, "week": "2025/7", "pm": ""},
    )
    assert data["week"] == "2025-07"
    assert data["quote_no"] == "OSV-Q01007"
    assert data["pm"] is None
    assert data["notes"] == []


def test_create_payload_uses_client_text_without_client_row(db):
    data = prepare_create_payload(db, {"client": "Vumatel Gauteng", "week": "2025-12"})
    assert data["quote_no"] == "VUM-Q01012"


def test_unknown_client_leaves_quote_no_alone(db):
    data = prepare_create_payload(db, {"client": "Acme Fibre", "week": "2025-12"})
    assert "quote_no" not in data


def test_known_client_without_week_clears_quote_no(db, openserve_client):
    data = prepare_create_payload(db, {"client_id": openserve_client.id})
    assert data["quote_no"] is None


def test_update_regenerates_from_merged_record(db, openserve_client):
    existing = {"id": "x", "client_id": openserve_client.id, "week": "2025-07", "quote_no": "OSV-Q01007"}
    data = prepare_update_payload(db, {"week": "9"}, existing)

    assert data["week"].endswith("-09")
    assert data["quote_no"] == "OSV-Q01009"


def test_update_without_quote_inputs_keeps_quote_no(db, openserve_client):
    existing = {"id": "x", "client_id": openserve_client.id, "week": "2025-07", "quote_no": "OSV-Q01007"}
    data = prepare_update_payload(db, {"status": "survey_scheduled"}, existing)
    assert "quote_no" not in data


class _RecordingLogger:
    def __init__(self):
        self.events = []

    def info(self, event, **fields):
        self.events.append((event, fields))


@pytest.fixture
def log_events(monkeypatch):
    recorder = _RecordingLogger()
    monkeypatch.setattr(order_payloads, "logger", recorder)
    return recorder.events


def test_quote_no_event_only_when_a_number_is_produced(db, openserve_client, log_events):
    prepare_create_payload(db, {"client_id": openserve_client.id})
    assert log_events == []

    prepare_create_payload(db, {"client_id": openserve_client.id, "week": "2025-07"})
    assert log_events == [("quote_no_generated", {"quote_no": "OSV-Q01007", "week": "2025-07"})]


def test_update_without_week_logs_nothing(db, openserve_client, log_events):
    existing = {"id": "x", "client_id": None, "week": None, "quote_no": None}
    data = prepare_update_payload(db, {"client_id": openserve_client.id}, existing)

    assert data["quote_no"] is None
    assert log_events == []
