"""Local archive file operations.

This module merges and compresses NDJSON archive files. Each output is
written to a temporary sibling and renamed into place once complete.
"""

from __future__ import annotations

from contextlib import contextmanager
import gzip
import os
from pathlib import Path
import shutil
import tempfile
from typing import BinaryIO, Iterator, Sequence

from core.constants import COPY_CHUNK_SIZE, GZIP_COMPRESSION_LEVEL


def concatenate_files(sources: Sequence[Path], destination: Path) -> Path:
    """Concatenate files byte-for-byte in the given order.

    Args:
        sources: Input files in output order.
        destination: Output file path.

    Returns:
        Destination path.
    """
    with _atomic_output(destination) as output:
        for source in sources:
            with source.open("rb") as handle:
                shutil.copyfileobj(handle, output, COPY_CHUNK_SIZE)
    return destination


def gzip_file(source: Path, destination: Path) -> Path:
    """Compress a file with maximum gzip compression.

    Args:
        source: Uncompressed input file.
        destination: Compressed output path.

    Returns:
        Destination path.
    """
    with _atomic_output(destination) as output:
        with source.open("rb") as handle, gzip.GzipFile(
            filename=source.name,
            mode="wb",
            fileobj=output,
            compresslevel=GZIP_COMPRESSION_LEVEL,
        ) as compressed:
            shutil.copyfileobj(handle, compressed, COPY_CHUNK_SIZE)
    return destination


def decompress_concatenate(sources: Sequence[Path], destination: Path) -> Path:
    """Decompress gzip files and concatenate their content in order.

    Args:
        sources: Gzip input files in output order.
        destination: Uncompressed output path.

    Returns:
        Destination path.
    """
    with _atomic_output(destination) as output:
        for source in sources:
            with gzip.open(source, "rb") as handle:
                shutil.copyfileobj(handle, output, COPY_CHUNK_SIZE)
    return destination


@contextmanager
def _atomic_output(destination: Path) -> Iterator[BinaryIO]:
    """Yield a temporary binary handle renamed onto destination on success."""
    file_descriptor, temp_name = tempfile.mkstemp(
        prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
    )
    try:
        with os.fdopen(file_descriptor, "wb") as handle:
            yield handle
        os.replace(temp_name, destination)
    except BaseException:
        Path(temp_name).unlink(missing_ok=True)
        raise
