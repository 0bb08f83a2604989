"""Lists the ECAD formats a vendor archive contains."""

import zipfile

from models import ECAD, Format


def detect_formats(archive: zipfile.ZipFile) -> list[ECAD]:
    """Return the ECAD formats with at least one entry in `archive`.

    ZIP is never reported since every archive is one.
    """
    names = [info.filename.replace('\\', '/') for info in archive.infolist()
             if not info.is_dir()]
    found = []
    for ecad in ECAD:
        if ecad is ECAD.ZIP:
            continue
        fmt = Format.build("", ecad, ".")
        if any(fmt.matches(name) for name in names):
            found.append(ecad)
    return found


def detect_formats_in_file(filepath: str) -> list[ECAD]:
    """Detect formats in a ZIP file on disk; [] if it is missing or not a ZIP."""
    try:
        with zipfile.ZipFile(filepath, 'r') as zf:
            return detect_formats(zf)
    except (zipfile.BadZipFile, FileNotFoundError):
        return []
