"""Dispatches extraction and processing by ECAD format.

Steps for one archive: extract the relevant entries once, then process
each extracted (path, bytes) pair into a single output mapping.
"""

import logging
import zipfile

from models import ECAD, Files, Format
from extractors import get_extractor, open_archive
from processors import get_processor, sanitize_name

logger = logging.getLogger(__name__)


def extract(format: Format, archive: zipfile.ZipFile) -> Files:
    """Return the archive entries that belong to `format`.

    Raises UnsupportedOperation for ZIP formats.
    """
    return get_extractor(format.ecad).extract(format, archive)


def process(format: Format, output_files: Files, file_path: str, data: bytes) -> None:
    """Fold one extracted file into `output_files`.

    Raises UnsupportedOperation for ZIP formats.
    """
    get_processor(format.ecad).process(format, output_files, file_path, data)


def convert(format: Format, data: bytes) -> Files:
    """Run a whole job over raw archive bytes and return the output mapping.

    A ZIP format keeps the downloaded archive as "<name>.zip" instead of
    going through extract/process.
    """
    if format.ecad is ECAD.ZIP:
        return {f"{sanitize_name(format.name) or 'archive'}.zip": bytes(data)}

    with open_archive(data) as archive:
        extracted = extract(format, archive)
    logger.info("%s: %d matching entries", format.ecad, len(extracted))

    output_files: Files = {}
    for file_path, item in extracted.items():
        process(format, output_files, file_path, item)
    return output_files
