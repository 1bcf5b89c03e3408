"""Tests for reading recorded tracks (infra/track_file.py)."""

from __future__ import annotations

from pathlib import Path

import pytest

from simple_location.core.models import Position
from simple_location.exceptions import TrackFileError
from simple_location.infra.track_file import parse_track_row, read_track


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "track.csv"
    path.write_text(text, encoding="utf-8")
    return path


class TestParseRow:
    def test_minimal_row(self) -> None:
        assert parse_track_row(["52.52", "13.405"], 1) == Position(52.52, 13.405)

    def test_full_row(self) -> None:
        pos = parse_track_row(["1", "2", "3.5", "40", "1000"], 1)
        assert pos == Position(1.0, 2.0, speed=3.5, altitude=40.0, timestamp_millis=1000)

    def test_empty_optional_cells_use_defaults(self) -> None:
        pos = parse_track_row(["1", "2", "", " ", ""], 1)
        assert pos.speed == 0.0
        assert pos.altitude == 0.0
        assert pos.timestamp_millis is None

    @pytest.mark.parametrize("cells", [["1"], ["1", "2", "3", "4", "5", "6"]])
    def test_wrong_column_count(self, cells: list[str]) -> None:
        with pytest.raises(TrackFileError, match="Line 7"):
            parse_track_row(cells, 7)

    def test_non_numeric(self) -> None:
        with pytest.raises(TrackFileError, match="Line 3"):
            parse_track_row(["north", "13.4"], 3)


class TestReadTrack:
    def test_reads_rows_skipping_comments_blank_lines_and_header(
        self, tmp_path: Path,
    ) -> None:
        path = _write(
            tmp_path,
            "latitude,longitude,speed,altitude,timestamp_millis\n"
            "# recorded on foot\n"
            "52.5200,13.4050,0.0,34.0,0\n"
            "\n"
            "52.5203,13.4061,1.4,34.5,60000\n",
        )
        track = read_track(path)
        assert [p.point.latitude for p in track] == [52.52, 52.5203]
        assert track[1].timestamp_millis == 60_000

    def test_header_after_leading_comment_is_skipped(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "# recorded 2024\n\nlatitude,longitude\n52.52,13.405\n")
        assert read_track(path) == [Position(52.52, 13.405)]

    def test_header_like_row_after_a_fix_is_an_error(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "52.52,13.405\nlatitude,longitude\n")
        with pytest.raises(TrackFileError, match="Line 2"):
            read_track(path)

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "1,2\n")
        assert read_track(str(path)) == [Position(1.0, 2.0)]

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(TrackFileError, match="Cannot read"):
            read_track(tmp_path / "absent.csv")

    def test_error_reports_line_number(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "1,2\n3,4\nbad,row\n")
        with pytest.raises(TrackFileError, match="Line 3"):
            read_track(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        assert read_track(_write(tmp_path, "")) == []
