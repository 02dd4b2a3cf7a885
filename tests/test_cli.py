"""Tests for the command-line entry point."""

import logging
from argparse import Namespace
from pathlib import Path

import pytest

from conftest import write_jpeg
from media_organizer.cli import build_parser, main, prompt_missing


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    root = logging.getLogger("media_organizer")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


def _answers(*values):
    it = iter(values)
    return lambda prompt: next(it)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.source is None
    assert args.destination is None
    assert args.dry_run is False


def test_prompt_fills_everything():
    args = Namespace(source=None, destination=None, dry_run=False)
    prompt_missing(args, ask=_answers("YES", " /in ", "/out"))
    assert args.dry_run is True
    assert args.source == Path("/in")
    assert args.destination == Path("/out")


def test_prompt_anything_but_yes_is_real_run():
    args = Namespace(source=None, destination=None, dry_run=False)
    prompt_missing(args, ask=_answers("y", "/in", "/out"))
    assert args.dry_run is False


def test_no_prompt_when_paths_given():
    args = Namespace(source=Path("/in"), destination=Path("/out"), dry_run=False)
    prompt_missing(args, ask=_answers())
    assert args.dry_run is False


def test_missing_target_exits(source_dir, tmp_path, log_dir):
    with pytest.raises(SystemExit) as info:
        main([
            "--source", str(source_dir),
            "--destination", str(tmp_path / "nope"),
            "--log-dir", str(log_dir),
        ])
    assert "Target directory does not exist" in str(info.value.code)


def test_dry_run_end_to_end(source_dir, dest_dir, log_dir):
    write_jpeg(source_dir / "a.jpg", taken="2023:05:01 10:00:00")

    with pytest.raises(SystemExit) as info:
        main([
            "--source", str(source_dir),
            "--destination", str(dest_dir),
            "--dry-run",
            "--log-dir", str(log_dir),
        ])

    assert info.value.code == 0
    assert (source_dir / "a.jpg").exists()
    assert list(dest_dir.iterdir()) == []
    logs = list(log_dir.glob("media-organizer_*.log"))
    assert len(logs) == 1
    assert "Dry-run: File would be moved and renamed" in logs[0].read_text(encoding="utf-8")


def test_real_run_end_to_end(source_dir, dest_dir, log_dir):
    write_jpeg(source_dir / "a.jpg", taken="2023:05:01 10:00:00")

    with pytest.raises(SystemExit) as info:
        main([
            "--source", str(source_dir),
            "--destination", str(dest_dir),
            "--log-dir", str(log_dir),
        ])

    assert info.value.code == 0
    assert (dest_dir / "images" / "2023" / "05" / "01-05-2023-10-00-00.jpg").exists()


def test_run_id_names_log_file_and_summary(source_dir, dest_dir, log_dir):
    with pytest.raises(SystemExit):
        main([
            "--source", str(source_dir),
            "--destination", str(dest_dir),
            "--dry-run",
            "--log-dir", str(log_dir),
        ])

    (log_file,) = log_dir.glob("media-organizer_*.log")
    text = log_file.read_text(encoding="utf-8")
    assert f"Summary ({log_file.stem}):" in text
    assert f"Log file:         {log_dir.resolve() / log_file.name}" in text
