# wpai/packaging/assembler.py
"""
Archive assembler: packages rendered files into a single zip.

Every entry is stored under one top-level folder, with a fixed timestamp and
fixed permissions so the same files always produce the same bytes.

Usage:
    from wpai.packaging import ZipArchiveAssembler

    data = ZipArchiveAssembler().assemble("my-bot", {"my-bot.php": "<?php ..."})
"""

from __future__ import annotations

import io
import zipfile
from pathlib import PurePosixPath
from typing import Mapping, Protocol, runtime_checkable

from wpai.core.exceptions import AssemblyError
from wpai.logging.logger import get_logger
from wpai.logging.tags import PACKAGING

logger = get_logger(__name__)

# Earliest timestamp the zip format can store
FIXED_DATE_TIME = (1980, 1, 1, 0, 0, 0)
FILE_MODE = 0o644


@runtime_checkable
class ArchiveAssembler(Protocol):
    """Packages named text entries into one downloadable archive."""

    def assemble(self, folder_name: str, entries: Mapping[str, str]) -> bytes:
        """
        Package ``entries`` (relative path -> text) under ``folder_name``.

        Raises:
            AssemblyError: If packaging fails
        """
        ...


def _check_relative(path: str, what: str) -> PurePosixPath:
    if not path or "\\" in path:
        raise AssemblyError(f"Invalid {what}: {path!r}")

    pure = PurePosixPath(path)
    if not pure.parts or pure.is_absolute() or any(part in ("", ".", "..") for part in pure.parts):
        raise AssemblyError(f"Invalid {what}: {path!r}")

    return pure


class ZipArchiveAssembler:
    """
    Zip implementation of ArchiveAssembler.

    Args:
        compression: zipfile compression constant (default: deflate)
    """

    def __init__(self, compression: int = zipfile.ZIP_DEFLATED):
        self.compression = compression

    def assemble(self, folder_name: str, entries: Mapping[str, str]) -> bytes:
        folder = _check_relative(folder_name, "folder name")
        if len(folder.parts) != 1:
            raise AssemblyError(f"Folder name must be a single path segment: {folder_name!r}")
        if not entries:
            raise AssemblyError("Nothing to package: no entries given")

        arcnames = [str(folder / _check_relative(path, "entry path")) for path in entries]

        buffer = io.BytesIO()
        try:
            with zipfile.ZipFile(buffer, "w", self.compression) as zf:
                for arcname, content in zip(arcnames, entries.values()):
                    info = zipfile.ZipInfo(arcname, date_time=FIXED_DATE_TIME)
                    info.compress_type = self.compression
                    info.external_attr = FILE_MODE << 16
                    zf.writestr(info, content.encode("utf-8"))
        except (OSError, RuntimeError, ValueError, zipfile.BadZipFile) as e:
            raise AssemblyError(f"Failed to build archive for {folder_name}: {e}") from e

        data = buffer.getvalue()
        logger.debug(
            f"{PACKAGING} Packaged {len(arcnames)} entries under {folder_name}/ ({len(data)} bytes)"
        )
        return data


__all__ = [
    "ArchiveAssembler",
    "ZipArchiveAssembler",
    "FIXED_DATE_TIME",
]
