"""KiCad processor: folds the fragments of a KiCad bundle into one library.

Output (names come from the Format's output artifacts):
    LibraryLoader.lib       every DEF ... ENDDEF symbol of every .lib fragment
    LibraryLoader.dcm       every $CMP ... $ENDCMP entry of every .dcm fragment
    LibraryLoader.pretty/   one <footprint name>.kicad_mod per footprint

The merged documents in output_files are the accumulator: each call parses
them back, adds the fragment's entries (a name seen again replaces the
earlier entry) and renders them again. After every call all declared
artifacts exist, so a job is complete once its last fragment is folded.
"""

import logging
import posixpath
from dataclasses import dataclass

from kiutils.footprint import Footprint
from kiutils.utils import sexpr

from errors import MalformedFragment
from models import Files, Folder, Format, SingleFile
from extractors.kicad import fragment_kind
from processors.base import BaseProcessor, generic_processor, sanitize_name

logger = logging.getLogger(__name__)

# Vendor files are not always UTF-8; surrogateescape keeps their bytes intact.
_ENCODING = 'utf-8'
_ERRORS = 'surrogateescape'


@dataclass(frozen=True)
class LegacyDocument:
    """Layout of a legacy KiCad (v5) library document."""
    suffix: str
    header: tuple[str, ...]
    footer: tuple[str, ...]
    start: str
    end: str
    titled: bool = False

    def parse(self, data: bytes, path: str) -> dict[str, list[str]]:
        """Split a document into its entries, keyed by entry name."""
        blocks = {}
        name = None
        lines = []
        for line in data.decode(_ENCODING, _ERRORS).splitlines():
            stripped = line.strip()
            if name is None:
                if stripped.split(maxsplit=1)[:1] == [self.start]:
                    parts = stripped.split()
                    if len(parts) < 2:
                        raise MalformedFragment(path, f"{self.start} without a name")
                    name = parts[1]
                    lines = [line.rstrip()]
            else:
                lines.append(line.rstrip())
                if stripped == self.end:
                    blocks[name] = lines
                    name = None
        if name is not None:
            raise MalformedFragment(path, f"{self.start} {name} has no {self.end}")
        return blocks

    def render(self, blocks: dict[str, list[str]]) -> bytes:
        lines = list(self.header)
        for name, block in blocks.items():
            lines.append('#')
            if self.titled:
                lines += [f'# {name}', '#']
            lines += block
        lines += self.footer
        return ('\n'.join(lines) + '\n').encode(_ENCODING, _ERRORS)


SYMBOL_LIBRARY = LegacyDocument(
    suffix='.lib',
    header=('EESchema-LIBRARY Version 2.4', '#encoding utf-8'),
    footer=('#', '#End Library'),
    start='DEF',
    end='ENDDEF',
    titled=True,
)

DOC_LIBRARY = LegacyDocument(
    suffix='.dcm',
    header=('EESchema-DOCLIB  Version 2.0',),
    footer=('#', '#End Doc Library'),
    start='$CMP',
    end='$ENDCMP',
)

_DOCUMENTS = {
    'symbols': SYMBOL_LIBRARY,
    'docs': DOC_LIBRARY,
}


def _artifact_name(format: Format, kind: type, suffix: str) -> str:
    for artifact in format.output:
        if isinstance(artifact, kind) and artifact.name.endswith(suffix):
            return artifact.name
    raise ValueError(f"{format.ecad} format declares no {suffix} output")


def footprint_name(file_path: str, data: bytes) -> str:
    """Read the footprint name from a .kicad_mod file, falling back to the
    file name when the footprint has none."""
    footprint = Footprint.from_sexpr(sexpr.parse_sexp(data.decode(_ENCODING, _ERRORS)))
    if footprint.entryName:
        return footprint.entryName
    return posixpath.splitext(posixpath.basename(file_path))[0]


class KiCadProcessor(BaseProcessor):

    def process(self, format: Format, output_files: Files,
                file_path: str, data: bytes) -> None:
        kind = fragment_kind(file_path)
        if kind == 'footprint':
            self._add_footprint(format, output_files, file_path, data)
        elif kind in _DOCUMENTS:
            self._merge(format, output_files, file_path, data, _DOCUMENTS[kind])
        else:
            logger.info("Skipping %s: not a legacy library, doc or footprint file", file_path)
        self._ensure_artifacts(format, output_files)

    def _merge(self, format: Format, output_files: Files, file_path: str,
               data: bytes, document: LegacyDocument) -> None:
        target = _artifact_name(format, SingleFile, document.suffix)
        fragment = document.parse(data, file_path)
        if not fragment:
            logger.warning("No %s entries in %s", document.start, file_path)

        blocks = {}
        if target in output_files:
            blocks = document.parse(output_files[target], target)
        for name in fragment:
            if name in blocks:
                logger.info("%s: replacing %s from %s", target, name, file_path)
        blocks.update(fragment)
        output_files[target] = document.render(blocks)

    def _add_footprint(self, format: Format, output_files: Files,
                       file_path: str, data: bytes) -> None:
        folder = _artifact_name(format, Folder, '.pretty')
        name = sanitize_name(footprint_name(file_path, data))
        generic_processor(output_files, f"{folder}/{name}.kicad_mod", data)

    def _ensure_artifacts(self, format: Format, output_files: Files) -> None:
        for artifact in format.output:
            if isinstance(artifact, Folder):
                output_files.setdefault(f"{artifact.name}/", b'')
            elif artifact.name not in output_files:
                for document in _DOCUMENTS.values():
                    if artifact.name.endswith(document.suffix):
                        output_files[artifact.name] = document.render({})
                        break
                else:
                    output_files[artifact.name] = b''
