"""
End-to-end tests for the mean-rank command line.
"""

import io
import logging

import pandas as pd
import pytest

from mean_rank.cli import main, run
from mean_rank.errors import ArgumentError
from mean_rank.utils import setup_logging


def _stdout_lines(capsys):
    return capsys.readouterr().out.splitlines()


class TestMainSuccess:
    """Tests for successful runs."""

    def test_example_scenario(self, write_log, capsys):
        path = write_log("t,a,10", "t,a,20", "t,b,15")
        assert main([str(path)]) == 0
        assert _stdout_lines(capsys) == ["rank,player_id,mean_score", "1,a,15", "1,b,15"]

    def test_rounds_means_half_away_from_zero(self, write_log, capsys):
        path = write_log("t,up,2", "t,up,3", "t,down,-2", "t,down,-3")
        assert main([str(path)]) == 0
        assert _stdout_lines(capsys)[1:] == ["1,up,3", "2,down,-3"]

    def test_eleven_players_prints_ten(self, write_log, capsys):
        rows = [f"t,player{i:02d},{100 - i}" for i in range(11)]
        path = write_log(*rows)
        assert main([str(path)]) == 0
        lines = _stdout_lines(capsys)
        assert len(lines) == 11
        assert lines[-1] == "10,player09,91"
        assert not any("player10" in line for line in lines)

    def test_header_only_file(self, write_log, capsys):
        path = write_log()
        assert main([str(path)]) == 0
        assert _stdout_lines(capsys) == ["rank,player_id,mean_score"]

    def test_same_output_twice(self, write_log, capsys):
        path = write_log("t,c,1", "t,a,5", "t,b,5", "t,a,6")
        main([str(path)])
        first = capsys.readouterr().out
        main([str(path)])
        assert capsys.readouterr().out == first

    def test_output_file(self, write_log, tmp_path, capsys):
        path = write_log("t,a,10", "t,b,20")
        out_path = tmp_path / "out" / "ranking.csv"
        assert main([str(path), "--output", str(out_path)]) == 0

        df = pd.read_csv(out_path)
        assert list(df.columns) == ["rank", "player_id", "mean_score"]
        assert df.values.tolist() == [[1, "b", 20], [2, "a", 10]]
        assert _stdout_lines(capsys)[1:] == ["1,b,20", "2,a,10"]

    def test_verbose_flag(self, write_log, capsys, restore_log_level):
        path = write_log("t,a,1")
        assert main([str(path), "--verbose"]) == 0
        assert _stdout_lines(capsys)[1:] == ["1,a,1"]


class TestMainErrors:
    """Tests for fatal errors: non-zero exit and no ranking output."""

    def test_missing_argument(self, capsys, caplog):
        assert main([]) == 1
        assert capsys.readouterr().out == ""
        assert "specify the game-play log CSV file" in caplog.text

    def test_run_without_path_raises(self):
        with pytest.raises(ArgumentError):
            run(None)

    def test_missing_file(self, tmp_path, capsys, caplog):
        assert main([str(tmp_path / "nope.csv")]) == 1
        assert capsys.readouterr().out == ""
        assert "cannot access" in caplog.text

    def test_bad_header(self, write_log, capsys, caplog):
        path = write_log("t,a,1", header="player_id,create_timestamp,score")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "invalid CSV file" in caplog.text

    def test_bad_score_anywhere(self, write_log, capsys, caplog):
        path = write_log("t,a,1", "t,b,2", "t,c,abc", "t,d,4")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "failed to read score" in caplog.text

    def test_malformed_row(self, write_log, capsys, caplog):
        path = write_log("t,a,1", "t,b,2,3")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "failed to read CSV file" in caplog.text

    def test_output_not_written_on_error(self, write_log, tmp_path):
        path = write_log("t,a,x")
        out_path = tmp_path / "ranking.csv"
        assert main([str(path), "--output", str(out_path)]) == 1
        assert not out_path.exists()

    def test_score_above_int64_max(self, write_log, capsys, caplog):
        path = write_log("t,a,1", "t,b,9223372036854775808")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "failed to read score" in caplog.text

    def test_score_with_hundreds_of_digits(self, write_log, capsys, caplog):
        path = write_log("t,a," + "9" * 400)
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "failed to read score" in caplog.text

    def test_short_row(self, write_log, capsys, caplog):
        path = write_log("t,a,1", "t,b")
        assert main([str(path)]) == 1
        assert capsys.readouterr().out == ""
        assert "failed to read CSV file" in caplog.text


class TestMainInputEdges:
    """Tests for inputs at the edges of the accepted format."""

    def test_large_scores_accepted(self, write_log, capsys):
        path = write_log("t,hi,4611686018427387904", "t,lo,-9223372036854775808")
        assert main([str(path)]) == 0
        assert _stdout_lines(capsys)[1:] == [
            "1,hi,4611686018427387904",
            "2,lo,-9223372036854775808",
        ]

    def test_extra_arguments_ignored(self, write_log, capsys):
        path = write_log("t,a,1")
        assert main([str(path), "extra.csv", "more"]) == 0
        assert _stdout_lines(capsys) == ["rank,player_id,mean_score", "1,a,1"]

    def test_latin1_player_id_written_as_original_bytes(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes(b"create_timestamp,player_id,score\nt,caf\xe9,5\nt,bob,7\n")
        out_path = tmp_path / "ranking.csv"
        raw = io.BytesIO()
        stream = io.TextIOWrapper(raw, encoding="utf-8", errors="surrogateescape", newline="")

        run(str(path), output=str(out_path), stream=stream)
        stream.flush()

        assert raw.getvalue() == b"rank,player_id,mean_score\n1,bob,7\n2,caf\xe9,5\n"
        assert b"caf\xe9" in out_path.read_bytes()


class TestVerbose:
    """Tests for --verbose log levels."""

    def test_verbose_survives_output_write(self, write_log, tmp_path, restore_log_level):
        path = write_log("t,a,1")
        assert main([str(path), "--verbose", "--output", str(tmp_path / "r.csv")]) == 0
        assert logging.getLogger("mean_rank.utils").level == logging.DEBUG
        assert logging.getLogger("mean_rank.cli").level == logging.DEBUG

    def test_verbose_applies_to_new_loggers(self, write_log, restore_log_level):
        path = write_log("t,a,1")
        assert main([str(path), "--verbose"]) == 0
        assert setup_logging("mean_rank.later").level == logging.DEBUG
