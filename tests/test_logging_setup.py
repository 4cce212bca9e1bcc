import logging

from setbreaker.logging_setup import setup_logger


def test_setup_logger_is_idempotent(tmp_path):
    log_file = tmp_path / "logs" / "app.log"
    logger = setup_logger(logging.DEBUG, log_file=str(log_file))
    try:
        setup_logger(logging.DEBUG, log_file=str(log_file))
        assert len(logger.handlers) == 1
        logging.getLogger("SetBreaker.timer").info("hello")
        logger.handlers[0].flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
