import logging

from hexboard.logging_config import setup_logging


def test_setup_logging_is_repeatable(tmp_path):
    log_file = tmp_path / "hexboard.log"
    setup_logging(logging.DEBUG)
    logger = setup_logging(logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "hexboard"
        assert len(logger.handlers) == 2

        logging.getLogger("hexboard.server.engine").debug("selected 1,0,-1")
        for handler in logger.handlers:
            handler.flush()
        assert "hexboard.server.engine - DEBUG - selected 1,0,-1" in log_file.read_text()
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
