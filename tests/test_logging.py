import json
import logging

from my_garden.shared.utils.logging import JSONFormatter, get_logger, log_context


class CaptureHandler(logging.Handler):
    def __init__(self):
        super().__init__()
        self.setFormatter(JSONFormatter("%(message)s"))
        self.lines = []

    def emit(self, record):
        self.lines.append(self.format(record))


def capture(name: str) -> CaptureHandler:
    handler = CaptureHandler()
    stdlib_logger = logging.getLogger(name)
    stdlib_logger.addHandler(handler)
    stdlib_logger.setLevel(logging.DEBUG)
    return handler


def test_structured_fields_are_nested_under_extra():
    handler = capture("tests.structured")

    get_logger("tests.structured").info("Plant added 🌿", plant_id="p1", persisted=True)

    record = json.loads(handler.lines[-1])
    assert record["message"] == "Plant added 🌿"
    assert record["level"] == "INFO"
    assert record["service"] == "my-garden-api"
    assert record["extra"] == {"plant_id": "p1", "persisted": True}


def test_log_context_binds_request_id():
    handler = capture("tests.context")
    logger = get_logger("tests.context")

    with log_context(request_id="req-42"):
        logger.info("inside")
    logger.info("outside")

    inside, outside = (json.loads(line) for line in handler.lines[-2:])
    assert inside["request_id"] == "req-42"
    assert "request_id" not in outside


def test_business_event_fields():
    handler = capture("tests.business")

    get_logger("tests.business").log_business_event(
        "plant_added", "Plant Fern added", entity_id="p1", entity_type="plant", extra={"persisted": False}
    )

    extra = json.loads(handler.lines[-1])["extra"]
    assert extra["event_type"] == "business_event"
    assert extra["business_event_type"] == "plant_added"
    assert extra["entity_id"] == "p1"
    assert extra["persisted"] is False


def test_get_logger_is_cached():
    assert get_logger("tests.cached") is get_logger("tests.cached")
