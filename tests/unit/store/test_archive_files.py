"""Unit tests for local archive file operations."""

from __future__ import annotations

import gzip

from store.archive_files import concatenate_files, decompress_concatenate, gzip_file


def test_concatenate_files_preserves_order(tmp_path) -> None:
    """Concatenation should append inputs byte-for-byte in order."""
    first = tmp_path / "a.ndjson"
    second = tmp_path / "b.ndjson"
    first.write_bytes(b'{"n": 1}\n')
    second.write_bytes(b'{"n": 2}\n{"n": 3}\n')

    merged = concatenate_files([second, first], tmp_path / "merged.ndjson")

    assert merged.read_bytes() == b'{"n": 2}\n{"n": 3}\n{"n": 1}\n'


def test_gzip_file_writes_decompressible_output(tmp_path) -> None:
    """Compressed output should decompress to the source bytes."""
    source = tmp_path / "data.ndjson"
    source.write_bytes(b'{"n": 1}\n' * 100)

    compressed = gzip_file(source, tmp_path / "data.ndjson.gz")

    assert gzip.decompress(compressed.read_bytes()) == source.read_bytes()


def test_decompress_concatenate_joins_gzip_members(tmp_path) -> None:
    """Decompressed content should be concatenated in input order."""
    first = tmp_path / "m1.ndjson.gz"
    second = tmp_path / "m2.ndjson.gz"
    first.write_bytes(gzip.compress(b"alpha\n"))
    second.write_bytes(gzip.compress(b"beta\n"))

    merged = decompress_concatenate([first, second], tmp_path / "y.ndjson")

    assert merged.read_bytes() == b"alpha\nbeta\n"


def test_outputs_leave_no_temporary_files(tmp_path) -> None:
    """Only the final artifact should remain after a write."""
    source = tmp_path / "only.ndjson"
    source.write_bytes(b"x\n")

    gzip_file(source, tmp_path / "only.ndjson.gz")

    assert sorted(path.name for path in tmp_path.iterdir()) == ["only.ndjson", "only.ndjson.gz"]
