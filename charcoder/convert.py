"""Convert text files between UTF-8 and the system (typically GBK) encoding."""

from __future__ import annotations

import codecs
import locale
import os
from enum import Enum
from pathlib import Path


class ConversionError(OSError):
    """Raised when the input cannot be read or the output cannot be written."""


class TargetEncoding(str, Enum):
    """Encodings a file can be converted to."""

    UTF8 = "UTF-8"
    GBK = "GBK"


_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def output_path(input_path: str | os.PathLike[str], encoding: TargetEncoding | str) -> Path:
    """Return ``<dir>/<base>-<encoding>.txt`` next to the input file.

    The base name is everything before the first dot of the file name.
    """
    target = TargetEncoding(encoding)
    path = Path(os.path.abspath(input_path))
    base = path.name.split(".", 1)[0]
    return path.parent / f"{base}-{target.value}.txt"


def _decode(data: bytes, fallback: str) -> str:
    for bom, codec in _BOMS:
        if data.startswith(bom):
            return data.decode(codec, "replace")
    return data.decode(fallback, "replace")


def convert_file(
    input_path: str | os.PathLike[str],
    encoding: TargetEncoding | str,
    system_encoding: str | None = None,
) -> Path:
    """Re-encode a text file and return the path of the written copy.

    Converting to UTF-8 reads the input in the system encoding; converting
    to GBK reads it as UTF-8 and writes it in the system encoding.  A byte
    order mark in the input overrides the assumed source encoding.
    """
    target = TargetEncoding(encoding)
    system = system_encoding or locale.getpreferredencoding(False)
    if target is TargetEncoding.UTF8:
        source_codec, target_codec = system, "utf-8"
    else:
        source_codec, target_codec = "utf-8", system

    try:
        data = Path(input_path).read_bytes()
    except OSError as exc:
        raise ConversionError(f"无法打开文件: {input_path}") from exc
    content = _decode(data, source_codec).replace("\r\n", "\n")

    destination = output_path(input_path, target)
    try:
        with open(destination, "w", encoding=target_codec, errors="replace") as out:
            out.write(content)
    except OSError as exc:
        raise ConversionError(f"无法创建输出文件: {destination}") from exc
    return destination