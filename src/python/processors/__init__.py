"""Format processors — each folds extracted files into the normalized output layout."""

from models import ECAD
from processors.base import BaseProcessor, UnsupportedProcessor, generic_processor, sanitize_name
from processors.d3 import D3Processor
from processors.eagle import EagleProcessor
from processors.easyeda import EasyEDAProcessor
from processors.kicad import KiCadProcessor

# Every ECAD member is listed explicitly, get_processor has no fallback.
PROCESSOR_MAP: dict[ECAD, type[BaseProcessor]] = {
    ECAD.D3: D3Processor,
    ECAD.DESIGNSPARK: EagleProcessor,
    ECAD.EAGLE: EagleProcessor,
    ECAD.EASYEDA: EasyEDAProcessor,
    ECAD.KICAD: KiCadProcessor,
    ECAD.ZIP: UnsupportedProcessor,
}


def get_processor(ecad: ECAD) -> BaseProcessor:
    """Factory to get the processor for an ECAD format."""
    return PROCESSOR_MAP[ecad]()
