import logging

from icolattice.lattice import IcoLattice
from icolattice.logging_config import setup_logging


def test_setup_logging_writes_package_records(tmp_path) -> None:
    log_file = tmp_path / "run.log"
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "icolattice"
        assert len(logger.handlers) == 2

        IcoLattice(3)
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized." in text
        assert "icolattice.lattice.geometry - DEBUG" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_setup_logging_replaces_handlers() -> None:
    setup_logging()
    logger = setup_logging(level=logging.WARNING)
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
