import logging

from graphlp.graph.solver import solve
from graphlp.logging_config import setup_logging


def test_dropped_lines_are_logged(tmp_path):
    log_file = tmp_path / "graphlp.log"
    logger = setup_logging(logging.DEBUG, str(log_file))
    try:
        solve(1, 1, ["x <= 3", "not a constraint"])
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

    text = log_file.read_text(encoding="utf-8")
    assert "Dropping constraint line 'not a constraint'" in text
    assert "graphlp.graph.parser - DEBUG" in text


def test_setup_is_idempotent():
    logger = setup_logging(logging.INFO)
    setup_logging(logging.INFO)
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.INFO
    finally:
        logger.handlers.clear()
