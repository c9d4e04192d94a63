import logging

import pytest

from ustore.__main__ import main, parse_args


def test_main_prints_counts(capsys):
    main([])

    assert capsys.readouterr().out.splitlines() == [
        "State: 0",
        "State: 2",
        "State: 1",
        "State: 0"
    ]


def test_parse_args_default_log_level():
    assert parse_args([]).log_level == "WARNING"


def test_parse_args_rejects_unknown_level():
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="ustore"):
        main(["--log-level", "DEBUG"])

    assert any("Dispatched" in r.getMessage() for r in caplog.records)
