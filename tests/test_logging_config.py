import json
import logging

import pytest

from transit_line.config import ObservabilityConfig
from transit_line.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_plain_text_logging(capsys):
    configure_logging(ObservabilityConfig(level="debug", format="%(levelname)s|%(message)s"))

    logging.getLogger("transit_line.test").debug("Segment added")

    assert "DEBUG|Segment added" in capsys.readouterr().out
    assert logging.getLogger().level == logging.DEBUG


def test_structured_logging_renders_json(capsys):
    configure_logging(ObservabilityConfig(level="INFO", structured=True))

    logging.getLogger("transit_line.test").info("Line created", extra={"line_id": 7})

    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["event"] == "Line created"
    assert payload["level"] == "info"
    assert payload["logger"] == "transit_line.test"
    assert payload["line_id"] == 7


def test_unknown_level_falls_back_to_info():
    configure_logging(ObservabilityConfig(level="chatty"))

    assert logging.getLogger().level == logging.INFO
