# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""CLI tests: report output, error handling, and export dispatch."""
import csv
import json
import sys
from datetime import date

import pytest

from meridian.cli import format_report, main, parse_clock, parse_date, run

_GOLDEN_ARGS = [
    'meridian', '--lat', '39.742476', '--lon', '-105.1786',
    '--date', '2003-10-17', '--time', '12:30:30', '--utc-offset', '-7',
]


class TestParsers:

    def test_clock_with_seconds(self):
        assert parse_clock('12:30:30') == (12, 30, 30.0)

    def test_clock_without_seconds(self):
        assert parse_clock('06:05') == (6, 5, 0.0)

    @pytest.mark.parametrize("text", ['12', 'noon', '12:xx', '1:2:3:4'])
    def test_bad_clock(self, text):
        with pytest.raises(ValueError, match="Invalid time"):
            parse_clock(text)

    def test_date(self):
        assert parse_date('2003-10-17') == date(2003, 10, 17)

    def test_bad_date(self):
        with pytest.raises(ValueError, match="Invalid date"):
            parse_date('17/10/2003')


class TestReport:

    def test_report_lines(self):
        sunlight = run(39.742476, -105.1786, date(2003, 10, 17), (12, 30, 30.0), -7.0)
        report = format_report(sunlight)
        assert "Azimuth:" in report
        assert "194.34" in report
        assert "Solar noon:        11:46:04" in report
        assert "Sunrise:           06:12:43" in report
        assert "Sunset:            17:18:51" in report
        assert "Day length:        11h 06m" in report

    def test_polar_report(self):
        sunlight = run(69.6492, 18.9553, date(2026, 6, 21), (12, 0, 0.0), 1.0)
        report = format_report(sunlight)
        assert "polar day" in report
        assert "Day length:        24h 00m" in report


class TestCliMain:

    def test_prints_report(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', _GOLDEN_ARGS)
        main()
        out = capsys.readouterr().out
        assert "Sunrise:           06:12:43" in out

    def test_dst_flag(self, capsys, monkeypatch):
        monkeypatch.setattr(sys, 'argv', _GOLDEN_ARGS + ['--dst'])
        main()
        out = capsys.readouterr().out
        assert "Solar noon:        12:46:04" in out

    def test_invalid_latitude(self, capsys, monkeypatch):
        argv = list(_GOLDEN_ARGS)
        argv[2] = '95'
        monkeypatch.setattr(sys, 'argv', argv)
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_date(self, capsys, monkeypatch):
        argv = list(_GOLDEN_ARGS)
        argv[6] = '2003-02-30'
        monkeypatch.setattr(sys, 'argv', argv)
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err

    def test_invalid_time(self, capsys, monkeypatch):
        argv = list(_GOLDEN_ARGS)
        argv[8] = '25:00'
        monkeypatch.setattr(sys, 'argv', argv)
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "hour" in capsys.readouterr().err

    def test_missing_required_argument(self, monkeypatch):
        monkeypatch.setattr(sys, 'argv', ['meridian', '--lat', '10'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 2


class TestCliExport:

    def test_json_export(self, tmp_path, capsys, monkeypatch):
        path = str(tmp_path / "report.json")
        monkeypatch.setattr(sys, 'argv', _GOLDEN_ARGS + ['--json', path])
        main()
        assert f"Wrote report to {path}" in capsys.readouterr().out
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
        assert data["events"]["sunset"]["local_time"] == "17:18:51"

    def test_almanac_csv_export(self, tmp_path, capsys, monkeypatch):
        path = str(tmp_path / "almanac.csv")
        monkeypatch.setattr(sys, 'argv', _GOLDEN_ARGS + ['--almanac-csv', path, '--days', '7'])
        main()
        assert f"Exported 7 days to {path}" in capsys.readouterr().out
        with open(path, newline='') as f:
            rows = list(csv.reader(f))
        assert len(rows) == 8
        assert rows[1][0] == '2003-10-17'

    def test_almanac_bad_days(self, tmp_path, capsys, monkeypatch):
        path = str(tmp_path / "almanac.csv")
        monkeypatch.setattr(sys, 'argv', _GOLDEN_ARGS + ['--almanac-csv', path, '--days', '0'])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "days must be positive" in capsys.readouterr().err

    def test_unwritable_path(self, tmp_path, capsys, monkeypatch):
        path = str(tmp_path / "missing_dir" / "report.json")
        monkeypatch.setattr(sys, 'argv', _GOLDEN_ARGS + ['--json', path])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
        assert "Error" in capsys.readouterr().err
