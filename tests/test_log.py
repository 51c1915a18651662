import io
import logging

from connectfour.log import configure_logging


def test_configure_logging_installs_one_handler():
    stream = io.StringIO()
    logger = configure_logging("DEBUG", stream=stream)
    configure_logging("INFO", stream=stream)
    ours = [h for h in logger.handlers if h.get_name() == "connectfour"]
    assert len(ours) == 1
    assert logger.level == logging.INFO


def test_engine_logs_through_package_logger(caplog):
    from connectfour.game.actions import new_game
    from conftest import play

    with caplog.at_level(logging.INFO, logger="connectfour"):
        play(new_game(), [0, 1, 0, 1, 0, 1, 0])
    assert any("first wins" in r.getMessage() for r in caplog.records)


def test_handler_is_found_by_name_not_by_position():
    logger = logging.getLogger("connectfour")
    stranger = logging.NullHandler()
    logger.addHandler(stranger)
    try:
        configure_logging("WARNING", stream=io.StringIO())
        configure_logging("WARNING", stream=io.StringIO())
        names = [h.get_name() for h in logger.handlers]
        assert names.count("connectfour") == 1
        assert stranger in logger.handlers
    finally:
        logger.removeHandler(stranger)
