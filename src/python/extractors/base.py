"""Base extractor with common helpers."""

import io
import logging
import zipfile
from abc import ABC, abstractmethod
from typing import Iterator

from errors import UnsupportedOperation
from models import Files, Format

logger = logging.getLogger(__name__)


def open_archive(data: bytes) -> zipfile.ZipFile:
    """Open an in-memory ZIP archive for random access."""
    return zipfile.ZipFile(io.BytesIO(data), 'r')


class BaseExtractor(ABC):
    """Abstract base class for format extractors."""

    @abstractmethod
    def extract(self, format: Format, archive: zipfile.ZipFile) -> Files:
        """Select the archive entries that belong to a format.

        Args:
            format: The Format whose match/ignore rules apply.
            archive: An open ZIP archive.

        Returns:
            Mapping of archive path to entry bytes.
        """
        ...

    def _matching_entries(self, format: Format,
                          archive: zipfile.ZipFile) -> Iterator[tuple[str, zipfile.ZipInfo]]:
        """Yield (path, info) for non-directory entries matching the format."""
        for info in archive.infolist():
            if info.is_dir():
                continue
            path = info.filename.replace('\\', '/')
            if format.matches(path):
                logger.debug("%s: keeping %s", format.ecad, path)
                yield path, info
            else:
                logger.debug("%s: skipping %s", format.ecad, path)


class UnsupportedExtractor(BaseExtractor):
    """Placeholder for formats that never go through extraction."""

    def extract(self, format: Format, archive: zipfile.ZipFile) -> Files:
        raise UnsupportedOperation(format.ecad, "extract")
