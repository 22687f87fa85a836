import logging
from typing import List

import pytest

from app.shared.utils.logging import JSONFormatter, RequestContextFilter, request_id_var


class CapturingHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.records: List[logging.LogRecord] = []
        self.addFilter(RequestContextFilter())
        self.setFormatter(JSONFormatter())

    def emit(self, record: logging.LogRecord) -> None:
        self.format(record)
        self.records.append(record)


@pytest.fixture
def access_log():
    handler = CapturingHandler()
    logger = logging.getLogger("app.api.middleware.logging")
    logger.addHandler(handler)
    previous_level = logger.level
    logger.setLevel(logging.INFO)
    yield handler
    logger.removeHandler(handler)
    logger.setLevel(previous_level)


def test_access_line_carries_request_id(client, access_log) -> None:
    resp = client.get("/share/article", params={"id": "abc"}, headers={"X-Request-ID": "req-42"})

    assert resp.status_code == 200
    assert resp.headers["x-request-id"] == "req-42"

    access = [r for r in access_log.records if r.getMessage().startswith("HTTP GET /share/article")]
    assert len(access) == 1
    assert access[0].request_id == "req-42"
    assert access[0].status_code == 200
    assert request_id_var.get() == ""


def test_generated_request_id_is_logged(client, access_log) -> None:
    resp = client.get("/share/article", params={"id": "abc"})

    generated = resp.headers["x-request-id"]
    assert generated
    assert [r.request_id for r in access_log.records if r.getMessage().startswith("HTTP GET")] == [generated]


def test_filter_falls_back_to_context() -> None:
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "hello", None, None)
    token = request_id_var.set("ctx-7")
    try:
        RequestContextFilter().filter(record)
    finally:
        request_id_var.reset(token)

    assert record.request_id == "ctx-7"
    assert record.service == "petskub-share-api"
