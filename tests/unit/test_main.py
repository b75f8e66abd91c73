"""Tests for the python -m adhoc_flight entry point."""

from __future__ import annotations

import logging
from unittest.mock import patch

from adhoc_flight.__main__ import main
from adhoc_flight.arrow_ipc import write_to_binary_file


class TestMain:
    def test_prints_saved_results(self, tmp_path, results_table, capsys):
        path = tmp_path / "results.arrows"
        write_to_binary_file(results_table, path)

        with patch.dict("os.environ", {}, clear=True):
            code = main([str(path)])

        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("[INFO] Printing query results.\n")
        assert "------------------ Query results ------------------" in out
        assert "id\tname\n1\ta\n" in out
        assert out.endswith(
            "================== Number of records retrieved: 3 ==================\n"
        )

    def test_missing_file_exits_1(self, tmp_path, capsys, caplog):
        with patch.dict("os.environ", {}, clear=True):
            code = main([str(tmp_path / "nope.arrows")])

        assert code == 1
        captured = capsys.readouterr()
        assert captured.out.count("[ERROR]") == 1
        assert captured.err.count("FileNotFoundError") == 1
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_corrupt_file_exits_1(self, tmp_path, capsys):
        path = tmp_path / "garbage.arrows"
        path.write_bytes(b"definitely not an arrow stream")

        with patch.dict("os.environ", {}, clear=True):
            code = main([str(path)])

        assert code == 1
        assert "[ERROR]" in capsys.readouterr().out

    def test_invalid_config_exits_2(self, tmp_path, capsys):
        with patch.dict("os.environ", {"ADHOC_FLIGHT_LOG_LEVEL": "loud"}, clear=True):
            code = main([str(tmp_path / "results.arrows")])

        assert code == 2
        assert "ADHOC_FLIGHT_LOG_LEVEL" in capsys.readouterr().err
