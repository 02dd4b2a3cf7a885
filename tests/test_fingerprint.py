"""Tests for content fingerprints."""

import hashlib

import pytest

from media_organizer.fingerprint import ContentFingerprinter, sha256_file


def test_matches_hashlib(tmp_path):
    f = tmp_path / "a.jpg"
    f.write_bytes(b"hello world")
    assert sha256_file(f) == hashlib.sha256(b"hello world").hexdigest()


def test_identical_content_same_digest(tmp_path):
    a = tmp_path / "a.jpg"
    b = tmp_path / "sub_b.png"
    a.write_bytes(b"\xff\xd8" + b"\x00" * 1000)
    b.write_bytes(b"\xff\xd8" + b"\x00" * 1000)
    assert sha256_file(a) == sha256_file(b)


def test_last_byte_difference_changes_digest(tmp_path):
    """The whole file is read, not a prefix sample."""
    a = tmp_path / "a.bin"
    b = tmp_path / "b.bin"
    body = b"\x00" * 200_000
    a.write_bytes(body + b"\x01")
    b.write_bytes(body + b"\x02")
    assert sha256_file(a) != sha256_file(b)


def test_digest_is_fixed_length_hex(tmp_path):
    f = tmp_path / "empty.jpg"
    f.write_bytes(b"")
    digest = ContentFingerprinter().fingerprint(f)
    assert len(digest) == 64
    int(digest, 16)


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        ContentFingerprinter().fingerprint(tmp_path / "gone.jpg")
