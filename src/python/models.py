"""Data models for the Library Loader format pipeline."""

import posixpath
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from errors import EcadNotFound

# Output of extraction and processing: relative path -> content.
# Keys ending in "/" are folders.
Files = dict[str, bytes]


class ECAD(Enum):
    D3 = "3d"
    DESIGNSPARK = "designspark"
    EAGLE = "eagle"
    EASYEDA = "easyeda"
    KICAD = "kicad"
    ZIP = "zip"

    @classmethod
    def parse(cls, label: str) -> "ECAD":
        """Parse a case-insensitive format label such as "KiCad" or "3D"."""
        if not isinstance(label, str):
            raise EcadNotFound(label)
        try:
            return cls(label.lower())
        except ValueError:
            raise EcadNotFound(label) from None

    try_from = parse

    def to_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SingleFile:
    name: str


@dataclass(frozen=True)
class Folder:
    name: str


OutputArtifact = Union[SingleFile, Folder]


@dataclass(frozen=True)
class FormatPolicy:
    match_path: tuple[str, ...] = ("",)
    ignore: tuple[str, ...] = ()
    create_folder: bool = False
    output: tuple[OutputArtifact, ...] = ()


# One row per ECAD format (test_models checks it stays complete)
FORMAT_POLICIES: dict[ECAD, FormatPolicy] = {
    ECAD.D3: FormatPolicy(match_path=("3D",), create_folder=True),
    ECAD.DESIGNSPARK: FormatPolicy(match_path=("DesignSpark PCB",)),
    ECAD.EAGLE: FormatPolicy(match_path=("EAGLE",), ignore=("Readme.html",)),
    ECAD.EASYEDA: FormatPolicy(match_path=("EasyEDA",), ignore=("Readme.html",)),
    ECAD.KICAD: FormatPolicy(
        match_path=("KiCad",),
        output=(
            SingleFile("LibraryLoader.lib"),
            SingleFile("LibraryLoader.dcm"),
            Folder("LibraryLoader.pretty"),
        ),
    ),
    ECAD.ZIP: FormatPolicy(),
}


def _segments(path: str) -> list[str]:
    return [part for part in path.split("/") if part]


@dataclass(frozen=True)
class Format:
    """Extraction job configuration, built once per ECAD format."""
    output_path: Path
    name: str
    ecad: ECAD
    create_folder: bool = False
    match_path: tuple[str, ...] = ("",)
    ignore: tuple[str, ...] = ()
    output: tuple[OutputArtifact, ...] = field(default_factory=tuple)

    @classmethod
    def build(cls, name: str, ecad: Union[ECAD, str],
              output_path: Union[str, Path]) -> "Format":
        """Build a Format for `ecad`, taking match/ignore/output rules from
        FORMAT_POLICIES.

        Args:
            name: Library name, used by processors to name output files.
            ecad: An ECAD member or a label such as "eagle".
            output_path: Destination root, persisted by the caller.
        """
        if not isinstance(ecad, ECAD):
            ecad = ECAD.parse(ecad)
        policy = FORMAT_POLICIES[ecad]
        return cls(
            output_path=Path(output_path),
            name=name,
            ecad=ecad,
            create_folder=policy.create_folder,
            match_path=policy.match_path,
            ignore=policy.ignore,
            output=policy.output,
        )

    from_ecad = build

    def matches(self, path: str) -> bool:
        """Check whether an archive entry belongs to this format."""
        if posixpath.basename(path) in self.ignore:
            return False
        segments = _segments(path)
        for prefix in self.match_path:
            wanted = _segments(prefix)
            if len(segments) > len(wanted) and segments[:len(wanted)] == wanted:
                return True
        return False


@dataclass
class ProcessingResult:
    """Result of converting one archive through the full pipeline."""
    status: str  # "success" or "error"
    ecad: Optional[str] = None
    name: Optional[str] = None
    output_path: Optional[str] = None
    files: list[str] = field(default_factory=list)
    error: Optional[str] = None
    warnings: list[str] = field(default_factory=list)
