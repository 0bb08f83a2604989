"""Base processor and shared helpers."""

import posixpath
import re
from abc import ABC, abstractmethod

from errors import UnsupportedOperation
from models import Files, Format

# Characters not allowed in file/folder names
_SANITIZE_RE = re.compile(r'[/\\:*?"<>|]')


def sanitize_name(name: str) -> str:
    """Replace filesystem-unsafe characters with underscores."""
    return _SANITIZE_RE.sub('_', name)


def generic_processor(output_files: Files, file_path: str, data: bytes) -> None:
    """Store `data` under `file_path`, replacing any earlier entry."""
    output_files[file_path] = bytes(data)


def renamed(format: Format, file_path: str) -> str:
    """Output name for a file renamed after the library: "<name><suffix>".

    Without a library name the file keeps its own name.
    """
    stem, suffix = posixpath.splitext(posixpath.basename(file_path))
    return f"{sanitize_name(format.name) or stem}{suffix}"


class BaseProcessor(ABC):
    """Abstract base class for format processors."""

    @abstractmethod
    def process(self, format: Format, output_files: Files,
                file_path: str, data: bytes) -> None:
        """Fold one extracted file into the output mapping.

        Args:
            format: The Format being processed.
            output_files: Output mapping, updated in place.
            file_path: Archive path of the extracted file.
            data: The file's bytes.
        """
        ...


class UnsupportedProcessor(BaseProcessor):
    """Placeholder for formats that never go through processing."""

    def process(self, format: Format, output_files: Files,
                file_path: str, data: bytes) -> None:
        raise UnsupportedOperation(format.ecad, "process")
