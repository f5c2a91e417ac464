"""Unit tests for the FileIdentifier class."""

import os

from codeclip.file_system_tree.file_identifier import FileIdentifier


def test_file_identifier():
    """Test equality, hashing and repr."""
    id1 = FileIdentifier(123, 456)
    id2 = FileIdentifier(123, 456)
    id3 = FileIdentifier(789, 456)

    assert id1 == id2
    assert id1 != id3
    assert id1 != "not an identifier"

    assert hash(id1) == hash(id2)

    id_set = {id1, id3}
    assert len(id_set) == 2
    assert id2 in id_set

    assert repr(id1) == "FileIdentifier(device_id=123, inode_number=456)"


def test_for_path_matches_stat(tmp_path):
    stat_info = os.stat(tmp_path)

    assert FileIdentifier.for_path(tmp_path) == FileIdentifier(stat_info.st_dev, stat_info.st_ino)


def test_for_path_follows_symlinks(tmp_path):
    target = tmp_path / "target"
    target.mkdir()
    link = tmp_path / "link"
    try:
        os.symlink(target, link)
    except (OSError, NotImplementedError):
        return

    assert FileIdentifier.for_path(link) == FileIdentifier.for_path(target)


def test_for_missing_path_is_none(tmp_path):
    assert FileIdentifier.for_path(tmp_path / "missing") is None
