"""Tests for the command-line entry point."""

import pytest

from milestone.cli import main


def test_next_prints_milestone_and_distance(capsys):
    """Test that `next` prints the milestone and how far away it is."""
    assert main(["next", "2025-01-01", "--now", "2025-04-10T12:00"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["100 days on 2025-04-11T00:00:00+00:00", "in 12 hours"]


def test_next_with_timezone_base_and_unit(capsys):
    """Test that --tz, --base and --unit narrow the search."""
    code = main(
        [
            "next",
            "2025-01-01",
            "--now",
            "2025-04-10 12:00",
            "--tz",
            "Europe/Berlin",
            "--base",
            "hex",
            "--unit",
            "hours",
        ]
    )

    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "0x999 hours on 2025-04-13T09:00:00+02:00"


def test_next_with_now_in_another_zone(capsys):
    """Test that a --now in another zone still yields an upcoming milestone."""
    code = main(
        ["next", "2025-01-01", "--tz", "Europe/Berlin", "--now", "2025-03-30T12:17Z"]
    )

    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[1].startswith("in ")


def test_next_reports_missing_milestone(capsys, caplog):
    """Test that `next` exits 1 when no milestone exists."""
    assert main(["next", "9999-06-01", "--now", "0001-01-01"]) == 1
    assert capsys.readouterr().out == ""
    assert "no milestone could be computed" in caplog.text


def test_patterns_lists_every_pattern(capsys):
    """Test that `patterns` lists every finder's result."""
    assert main(["patterns", "100", "--base", "10"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["100 -> 100", "100 -> 111", "100 -> 123", "100 -> 321"]


def test_patterns_accepts_hex_input(capsys):
    """Test that `patterns` accepts 0x-prefixed numbers."""
    assert main(["patterns", "0x954", "--base", "16"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == ["2388 -> 0x999", "2388 -> 0xa00", "2388 -> 0x1234", "2388 -> 0x4321"]


@pytest.mark.parametrize(
    "argv",
    [
        ["patterns", "5", "--base", "8"],
        ["patterns", "0"],
        ["next", "not a date"],
        ["next", "2025-01-01", "--unit", "fortnight"],
        ["next", "2025-01-01", "--tz", "Mars/Olympus"],
    ],
)
def test_invalid_arguments_exit_with_usage_error(argv):
    """Test that bad arguments exit with argparse's usage error."""
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2
