"""3D model processor.

STEP/WRL models keep their filenames; with `create_folder` set they are
grouped in a folder named after the library ("3D" when it has no name).
"""

import posixpath

from models import Files, Format
from processors.base import BaseProcessor, generic_processor, sanitize_name

DEFAULT_FOLDER = "3D"


class D3Processor(BaseProcessor):

    def process(self, format: Format, output_files: Files,
                file_path: str, data: bytes) -> None:
        filename = posixpath.basename(file_path)
        if format.create_folder:
            folder = sanitize_name(format.name) or DEFAULT_FOLDER
            filename = f"{folder}/{filename}"
        generic_processor(output_files, filename, data)
