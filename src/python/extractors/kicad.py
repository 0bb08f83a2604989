"""KiCad extractor (SamacSys / Component Search Engine bundles).

ZIP structure:
    KiCad/<PART>.lib                      legacy symbol library
    KiCad/<PART>.dcm                      symbol documentation
    KiCad/<FOOTPRINT>.kicad_mod           (or KiCad/<LIB>.pretty/<FOOTPRINT>.kicad_mod)
    KiCad/<PART>.kicad_sym, KiCad/*.mod   newer/older variants, not merged

A bundle can carry several fragments of each kind (one per part or
footprint variant). They are returned keyed by their full archive path and
sorted, so the KiCad processor always folds them in the same order.
"""

import logging
import posixpath
import zipfile
from typing import Optional

from models import Files, Format
from extractors.base import BaseExtractor

logger = logging.getLogger(__name__)

FRAGMENT_KINDS = {
    '.lib': 'symbols',
    '.dcm': 'docs',
    '.kicad_mod': 'footprint',
}


def fragment_kind(path: str) -> Optional[str]:
    """Return the fragment kind of a KiCad archive path, or None."""
    ext = posixpath.splitext(path)[1].lower()
    return FRAGMENT_KINDS.get(ext)


class KiCadExtractor(BaseExtractor):

    def extract(self, format: Format, archive: zipfile.ZipFile) -> Files:
        files = {}
        # Sort on path alone: entries sharing a path keep archive order, last one wins
        entries = sorted(self._matching_entries(format, archive), key=lambda item: item[0])
        for path, info in entries:
            kind = fragment_kind(path)
            if kind is None:
                logger.debug("Unrecognized KiCad fragment: %s", path)
            else:
                logger.debug("KiCad %s fragment: %s", kind, path)
            files[path] = archive.read(info)
        return files
