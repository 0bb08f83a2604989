import io
import sys
import os
import zipfile
import pytest

# Add src/python to the path so tests can import modules directly
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src', 'python'))

SYMBOL_LIB = """EESchema-LIBRARY Version 2.3
#encoding utf-8
#
# {name}
#
DEF {name} U 0 40 Y Y 1 F N
F0 "U" 0 100 50 H V C CNN
F1 "{name}" 0 -100 50 H V C CNN
DRAW
S -200 200 200 -200 0 1 0 N
X IN 1 -300 0 100 R 50 50 1 1 I
ENDDRAW
ENDDEF
#
#End Library
"""

DOC_LIB = """EESchema-DOCLIB  Version 2.0
#
$CMP {name}
D {description}
$ENDCMP
#
#End Doc Library
"""

FOOTPRINT = """(footprint "{name}" (version 20211014) (generator pcbnew)
  (layer "F.Cu")
)
"""


def make_zip_bytes(entries: dict) -> bytes:
    """Build a ZIP archive in memory. Values may be str or bytes."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, 'w') as zf:
        for name, content in entries.items():
            zf.writestr(name, content)
    return buf.getvalue()


@pytest.fixture
def make_zip():
    return make_zip_bytes


@pytest.fixture
def samacsys_bundle():
    """A SamacSys-style download with every ECAD folder."""
    return make_zip_bytes({
        "3D/LM358.stp": "ISO-10303-21;",
        "3D/LM358.wrl": "#VRML V2.0 utf8",
        "DesignSpark PCB/LM358.psl": "psl",
        "DesignSpark PCB/LM358.ssl": "ssl",
        "EAGLE/LM358.lbr": "<eagle/>",
        "EAGLE/Readme.html": "<html/>",
        "EasyEDA/LM358.json": "{}",
        "EasyEDA/Readme.html": "<html/>",
        "KiCad/LM358.lib": SYMBOL_LIB.format(name="LM358"),
        "KiCad/LM358.dcm": DOC_LIB.format(name="LM358", description="Dual op-amp"),
        "KiCad/SOIC127P600X175-8N.kicad_mod": FOOTPRINT.format(name="SOIC127P600X175-8N"),
        "KiCad/LM358.kicad_sym": "(kicad_symbol_lib)",
        "unrelated/file.txt": "nope",
    })
