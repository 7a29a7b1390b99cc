"""Conversion between compressed .wbox/.wbax containers and JSON text.

A container is a plain zlib stream (default compression level) holding UTF-8
text, usually JSON. There is no header or magic number: whether a file is
compressed is decided by trying to decompress it.
"""

from __future__ import annotations

import json
import os
import zlib
from dataclasses import dataclass

ALLOWED_EXTENSIONS = ('wbox', 'wbax', 'json')


class WboxError(Exception):
    """Base class for errors that abort a conversion."""


class InputNotFoundError(WboxError):
    pass


class UnsupportedExtensionError(WboxError):
    pass


class ReadError(WboxError):
    pass


class SizeQueryError(WboxError):
    pass


class DecodeError(WboxError):
    pass


class WriteError(WboxError):
    pass


@dataclass(frozen=True)
class SourceFile:
    path: str
    data: bytes
    size: int
    compressed: bool


@dataclass(frozen=True)
class TranscodeResult:
    compressed: bool
    input_size: int
    output_size: int
    output_path: str


def check_extension(path):
    """Raise UnsupportedExtensionError unless path ends in an allowed extension."""
    ext = os.path.splitext(path)[1]
    if ext[1:].lower() not in ALLOWED_EXTENSIONS:
        allowed = ', '.join('.' + e for e in ALLOWED_EXTENSIONS)
        raise UnsupportedExtensionError(
            f"Unsupported file extension: {ext or '(none)'!r}. Allowed extensions are {allowed}"
        )


def decompress(data: bytes) -> str:
    try:
        return zlib.decompress(data).decode('utf-8')
    except zlib.error as e:
        raise DecodeError(f"Error decompressing data: {e}") from e
    except UnicodeDecodeError as e:
        raise DecodeError(f"Decompressed data is not valid UTF-8: {e}") from e


def is_compressed(data: bytes) -> bool:
    """Detection probe: the data counts as compressed if it decompresses cleanly."""
    try:
        decompress(data)
    except DecodeError:
        return False
    return True


def compress(text: str) -> bytes:
    return zlib.compress(text.encode('utf-8'), zlib.Z_DEFAULT_COMPRESSION)


def _reject_constant(name):
    raise ValueError(f"{name} is not valid JSON")


def format_json(text: str) -> str:
    """Pretty-print text if it is JSON, otherwise return it unchanged."""
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
    except ValueError:
        return text

    # Out-of-range numbers parse as inf and escaped lone surrogates have no UTF-8 form.
    try:
        pretty = json.dumps(parsed, indent=2, ensure_ascii=False, allow_nan=False)
        pretty.encode('utf-8')
    except (ValueError, UnicodeEncodeError):
        return text
    return pretty


def suggested_output_name(path, compressed: bool) -> str:
    stem = os.path.splitext(os.path.basename(path))[0]
    return f"{stem}.{'json' if compressed else 'wbox'}"


def read_source(path) -> SourceFile:
    """Validate and read the input file, then classify it."""
    check_extension(path)

    try:
        size = os.path.getsize(path)
    except OSError as e:
        raise SizeQueryError(f"Failed to get the file size {path}: {e}") from e

    try:
        with open(path, 'rb') as file:
            data = file.read()
    except OSError as e:
        raise ReadError(f"File reading error {path}: {e}") from e

    return SourceFile(path=path, data=data, size=size, compressed=is_compressed(data))


def transcode(source: SourceFile) -> bytes:
    """Apply the inverse of the source's current form."""
    if source.compressed:
        return format_json(decompress(source.data)).encode('utf-8')

    try:
        text = source.data.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecodeError(f"File {source.path} is not valid UTF-8 text: {e}") from e
    return compress(text)


def write_output(path, payload: bytes) -> int:
    """Write payload to path, replacing any existing file, and return its size on disk."""
    try:
        with open(path, 'wb') as file:
            file.write(payload)
    except OSError as e:
        raise WriteError(f"File writing error in {path}: {e}") from e

    try:
        return os.path.getsize(path)
    except OSError as e:
        raise SizeQueryError(f"Failed to verify file size {path}: {e}") from e


def convert_file(input_path, output_path) -> TranscodeResult:
    if not os.path.exists(input_path):
        raise InputNotFoundError(f"Input file does not exist: {input_path}")

    source = read_source(input_path)
    output_size = write_output(output_path, transcode(source))
    return TranscodeResult(
        compressed=source.compressed,
        input_size=source.size,
        output_size=output_size,
        output_path=str(output_path),
    )
