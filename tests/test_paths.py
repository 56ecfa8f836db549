import os

from core.paths import is_within, resolve_search_roots, same_device


def test_windows_roots_under_profile(tmp_path):
    home = str(tmp_path)
    roots = resolve_search_roots(home=home, platform="win32")
    assert list(roots) == ["documents", "pictures", "videos", "desktop", "downloads"]
    assert roots["documents"] == os.path.join(home, "Documents")
    assert roots["videos"] == os.path.join(home, "Videos")
    assert roots["downloads"] == os.path.join(home, "Downloads")


def test_windows_profile_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("USERPROFILE", str(tmp_path))
    roots = resolve_search_roots(platform="win32")
    assert roots["desktop"] == os.path.join(str(tmp_path), "Desktop")


def test_macos_uses_movies(tmp_path):
    roots = resolve_search_roots(home=str(tmp_path), platform="darwin")
    assert roots["videos"] == os.path.join(str(tmp_path), "Movies")
    assert roots["pictures"] == os.path.join(str(tmp_path), "Pictures")


def test_linux_honours_user_dirs(tmp_path):
    home = str(tmp_path)
    cfg = tmp_path / ".config"
    cfg.mkdir()
    (cfg / "user-dirs.dirs").write_text(
        "# generated\n"
        'XDG_DOCUMENTS_DIR="$HOME/Dokumente"\n'
        'XDG_DESKTOP_DIR="$HOME/"\n'
        'XDG_DOWNLOAD_DIR="/data/incoming"\n'
    )

    roots = resolve_search_roots(home=home, platform="linux")

    assert roots["documents"] == f"{home}/Dokumente"
    assert roots["downloads"] == "/data/incoming"
    assert roots["desktop"] == os.path.join(home, "Desktop")
    assert roots["videos"] == os.path.join(home, "Videos")


def test_linux_without_user_dirs_uses_defaults(tmp_path):
    roots = resolve_search_roots(home=str(tmp_path), platform="linux")
    assert roots["pictures"] == os.path.join(str(tmp_path), "Pictures")


def test_same_device_and_is_within(tmp_path):
    inner = tmp_path / "inner"
    inner.mkdir()
    assert same_device(str(tmp_path), str(inner))
    assert not same_device(str(tmp_path / "missing"), str(inner))
    assert is_within(str(inner), str(tmp_path))
    assert is_within(str(tmp_path), str(tmp_path))
    assert not is_within(str(tmp_path), str(inner))
