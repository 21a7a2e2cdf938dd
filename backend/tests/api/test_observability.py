"""Observability — request ids and structured log records.

Invariants:
    - Every response carries X-Request-ID, echoing the caller's when supplied
    - Non-probe requests write one access-log line with method, path and status
    - The JSON formatter copies known extras and never invents keys
"""

import json
import logging

from scholarlog.infrastructure.observability import JSONFormatter, REQUEST_ID_HEADER


async def test_response_carries_generated_request_id(client):
    res = await client.get("/api/courses")
    assert res.headers[REQUEST_ID_HEADER]


async def test_request_id_is_echoed(client):
    res = await client.get("/api/courses", headers={REQUEST_ID_HEADER: "trace-123"})
    assert res.headers[REQUEST_ID_HEADER] == "trace-123"


async def test_access_log_line_per_request(client, caplog):
    with caplog.at_level(logging.INFO, logger="scholarlog.access"):
        await client.get("/api/books")

    access = [r for r in caplog.records if r.name == "scholarlog.access"]
    assert len(access) == 1
    assert access[0].status == 200
    assert access[0].path == "/api/books"


async def test_probes_are_not_access_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="scholarlog.access"):
        await client.get("/api/health/")

    assert not [r for r in caplog.records if r.name == "scholarlog.access"]


def test_json_formatter_copies_known_extras():
    record = logging.LogRecord(
        "scholarlog.test", logging.WARNING, __file__, 1, "Authentication failed", (), None,
    )
    record.reason = "secret_mismatch"
    record.unrelated = "ignored"

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "Authentication failed"
    assert entry["level"] == "WARNING"
    assert entry["reason"] == "secret_mismatch"
    assert "unrelated" not in entry
