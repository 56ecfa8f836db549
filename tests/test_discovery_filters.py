import pytest

from config import EXCLUDED_FOLDERS
from core.discovery_filters import is_excluded_name, should_skip


@pytest.mark.parametrize("token", EXCLUDED_FOLDERS)
def test_every_excluded_token_is_skipped_in_any_case(token):
    assert should_skip(f"/home/user/Documents/{token}")
    assert should_skip(f"/home/user/Documents/{token.upper()}")
    assert should_skip(f"/home/user/Documents/{token.lower()}")


@pytest.mark.parametrize(
    "path",
    [
        "/home/user/Documents/Taxes",
        "/home/user/Pictures/Holiday 2021",
        "C:\\Users\\ann\\Documents\\Invoices",
        "/home/user/Desktop/projects/",
    ],
)
def test_ordinary_folders_are_kept(path):
    assert not should_skip(path)


def test_substring_match_inside_leaf_name():
    assert should_skip("/home/user/Documents/MyOneDriveNotes")
    assert should_skip("/home/user/Documents/Inbox")
    assert should_skip("/home/user/Videos/node_modules_backup")


@pytest.mark.parametrize("marker", ["OneDrive", "Google Drive", "Dropbox"])
def test_cloud_marker_anywhere_in_path(marker):
    assert should_skip(f"/home/user/{marker}/Work/Reports")
    assert should_skip(f"C:\\Users\\ann\\{marker} - Shared\\Work\\Reports")


def test_windows_leaf_name_extracted():
    assert should_skip("C:\\Users\\ann\\AppData")
    assert should_skip("C:\\Users\\ann\\Documents\\.git\\")
    assert not should_skip("C:\\Users\\ann\\Documents\\Letters")


def test_excluded_token_in_ancestor_only_does_not_skip():
    assert not should_skip("/data/packages/Letters")
    assert not is_excluded_name("Letters")
    assert is_excluded_name("__PYCACHE__")
