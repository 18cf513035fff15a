"""Shared fixtures: small pattern dictionaries written from inline text."""

from pathlib import Path

import pytest

from hyphen_split.dictionary import HyphDict


def make_dict(*patterns: str, encoding: str = "UTF-8") -> HyphDict:
    """Build a dictionary from pattern lines, with an encoding header."""
    return HyphDict.from_text("\n".join((encoding,) + patterns) + "\n", name="test")


def write_dic(folder: Path, name: str, *patterns: str) -> Path:
    """Write a UTF-8 hyph_<name>.dic file into folder."""
    path = folder / f"hyph_{name}.dic"
    path.write_text("\n".join(("UTF-8",) + patterns) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def dic_folder(tmp_path):
    """A folder with four dictionaries, two languages with two regions each."""
    write_dic(tmp_path, "de_CH", "b1c")
    write_dic(tmp_path, "de_DE", "b1c", "c1k/k=k,1,2")
    write_dic(tmp_path, "en_GB", "d1e")
    write_dic(tmp_path, "en_US", "LEFTHYPHENMIN 2", "RIGHTHYPHENMIN 2", "b1c", "d1e")
    return tmp_path
