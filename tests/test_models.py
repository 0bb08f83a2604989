"""Tests for ECAD labels and Format construction."""

import dataclasses
from pathlib import Path

import pytest
from errors import EcadNotFound, LibraryLoaderError
from models import ECAD, FORMAT_POLICIES, Folder, Format, SingleFile

LABELS = ["3d", "designspark", "eagle", "easyeda", "kicad", "zip"]


class TestECAD:
    @pytest.mark.parametrize("label", LABELS)
    def test_round_trip(self, label):
        assert str(ECAD.parse(label)) == label
        assert ECAD.parse(label).to_string() == label

    @pytest.mark.parametrize("label", ["KiCad", "EAGLE", "EasyEDA", "DesignSpark", "3D", "ZIP"])
    def test_case_insensitive(self, label):
        assert str(ECAD.parse(label)) == label.lower()

    def test_every_member_round_trips(self):
        for ecad in ECAD:
            assert ECAD.parse(ecad.to_string()) is ecad
        assert sorted(str(e) for e in ECAD) == sorted(LABELS)

    @pytest.mark.parametrize("label", ["", "kicad6", "eagl", " kicad", "altium", "designspark pcb"])
    def test_unknown_label(self, label):
        with pytest.raises(EcadNotFound) as exc:
            ECAD.parse(label)
        assert exc.value.label == label

    def test_not_a_string(self):
        with pytest.raises(EcadNotFound):
            ECAD.parse(None)

    def test_try_from_alias(self):
        assert ECAD.try_from("Eagle") is ECAD.EAGLE

    def test_error_hierarchy(self):
        with pytest.raises(LibraryLoaderError):
            ECAD.parse("nope")
        with pytest.raises(ValueError):
            ECAD.parse("nope")


class TestFormatBuild:
    def test_policy_covers_every_ecad(self):
        assert set(FORMAT_POLICIES) == set(ECAD)

    def test_d3(self):
        fmt = Format.build("LM358", ECAD.D3, "/tmp/out")
        assert fmt.create_folder is True
        assert fmt.match_path == ("3D",)
        assert fmt.ignore == ()
        assert fmt.output == ()

    def test_designspark(self):
        fmt = Format.build("LM358", ECAD.DESIGNSPARK, "/tmp/out")
        assert fmt.create_folder is False
        assert fmt.match_path == ("DesignSpark PCB",)

    @pytest.mark.parametrize("ecad,prefix", [(ECAD.EAGLE, "EAGLE"), (ECAD.EASYEDA, "EasyEDA")])
    def test_readme_ignored(self, ecad, prefix):
        fmt = Format.build("LM358", ecad, "/tmp/out")
        assert fmt.match_path == (prefix,)
        assert fmt.ignore == ("Readme.html",)
        assert fmt.create_folder is False

    def test_kicad_outputs(self):
        fmt = Format.build("LM358", ECAD.KICAD, "/tmp/out")
        assert fmt.match_path == ("KiCad",)
        assert fmt.output == (
            SingleFile("LibraryLoader.lib"),
            SingleFile("LibraryLoader.dcm"),
            Folder("LibraryLoader.pretty"),
        )

    def test_zip(self):
        fmt = Format.build("LM358", ECAD.ZIP, "/tmp/out")
        assert fmt.match_path == ("",)
        assert fmt.create_folder is False
        assert fmt.output == ()

    def test_from_label(self):
        fmt = Format.build("LM358", "KiCad", "/tmp/out")
        assert fmt.ecad is ECAD.KICAD
        assert fmt.output_path == Path("/tmp/out")
        assert fmt.name == "LM358"

    def test_from_bad_label(self):
        with pytest.raises(EcadNotFound):
            Format.build("LM358", "orcad", "/tmp/out")

    def test_from_ecad_alias(self):
        assert Format.from_ecad("x", ECAD.EAGLE, "o") == Format.build("x", ECAD.EAGLE, "o")

    def test_immutable(self):
        fmt = Format.build("LM358", ECAD.EAGLE, "/tmp/out")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fmt.name = "other"


class TestFormatMatches:
    def test_prefix_match(self):
        fmt = Format.build("x", ECAD.EAGLE, "o")
        assert fmt.matches("EAGLE/part.lbr")
        assert fmt.matches("EAGLE/sub/part.lbr")

    def test_case_sensitive(self):
        fmt = Format.build("x", ECAD.EAGLE, "o")
        assert not fmt.matches("eagle/part.lbr")

    def test_whole_segment(self):
        fmt = Format.build("x", ECAD.EAGLE, "o")
        assert not fmt.matches("EAGLE2/part.lbr")
        assert not fmt.matches("other/EAGLE/part.lbr")

    def test_prefix_itself_is_not_an_entry(self):
        fmt = Format.build("x", ECAD.D3, "o")
        assert not fmt.matches("3D")

    def test_prefix_with_space(self):
        fmt = Format.build("x", ECAD.DESIGNSPARK, "o")
        assert fmt.matches("DesignSpark PCB/part.psl")
        assert not fmt.matches("DesignSpark/part.psl")

    def test_ignore_by_filename(self):
        fmt = Format.build("x", ECAD.EASYEDA, "o")
        assert not fmt.matches("EasyEDA/Readme.html")
        assert not fmt.matches("EasyEDA/Docs/Readme.html")
        assert fmt.matches("EasyEDA/readme.html")

    def test_empty_prefix_matches_everything(self):
        fmt = Format.build("x", ECAD.ZIP, "o")
        assert fmt.matches("anything/at/all.txt")
        assert fmt.matches("top.txt")
