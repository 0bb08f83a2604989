"""Eagle and DesignSpark processor.

Both bundles hold one file per library kind (Eagle .lbr/.scr, DesignSpark
.psl/.ssl/.cml), so each is renamed to "<name><suffix>".
"""

import posixpath

from models import Files, Format
from processors.base import BaseProcessor, generic_processor, renamed


class EagleProcessor(BaseProcessor):

    def process(self, format: Format, output_files: Files,
                file_path: str, data: bytes) -> None:
        filename = posixpath.basename(file_path)
        if posixpath.splitext(filename)[1]:
            filename = renamed(format, filename)
        generic_processor(output_files, filename, data)
