"""EasyEDA processor. The JSON library document is renamed after the library,
anything else is copied under its own filename."""

import posixpath

from models import Files, Format
from processors.base import BaseProcessor, generic_processor, renamed


class EasyEDAProcessor(BaseProcessor):

    def process(self, format: Format, output_files: Files,
                file_path: str, data: bytes) -> None:
        filename = posixpath.basename(file_path)
        stem, suffix = posixpath.splitext(filename)
        if suffix.lower() == '.json':
            filename = renamed(format, f"{stem}.json")
        generic_processor(output_files, filename, data)
