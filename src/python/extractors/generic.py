"""Generic extractor — keeps every entry under the format's folder."""

import zipfile

from models import Files, Format
from extractors.base import BaseExtractor


class GenericExtractor(BaseExtractor):

    def extract(self, format: Format, archive: zipfile.ZipFile) -> Files:
        return {path: archive.read(info)
                for path, info in self._matching_entries(format, archive)}
