"""Format extractors — each returns the archive entries relevant to one ECAD format."""

from models import ECAD
from extractors.base import BaseExtractor, UnsupportedExtractor, open_archive
from extractors.generic import GenericExtractor
from extractors.kicad import KiCadExtractor

# Every ECAD member is listed explicitly, get_extractor has no fallback.
EXTRACTOR_MAP: dict[ECAD, type[BaseExtractor]] = {
    ECAD.D3: GenericExtractor,
    ECAD.DESIGNSPARK: GenericExtractor,
    ECAD.EAGLE: GenericExtractor,
    ECAD.EASYEDA: GenericExtractor,
    ECAD.KICAD: KiCadExtractor,
    ECAD.ZIP: UnsupportedExtractor,
}


def get_extractor(ecad: ECAD) -> BaseExtractor:
    """Factory to get the extractor for an ECAD format."""
    return EXTRACTOR_MAP[ecad]()
