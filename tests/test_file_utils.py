from utils.file_utils import format_file_size, get_file_size


def test_get_file_size(tmp_path):
    file_path = tmp_path / "example.txt"
    file_path.write_text("content")

    assert get_file_size(str(file_path)) == 7
    assert get_file_size(str(tmp_path / "gone.txt")) == 0


def test_format_file_size():
    assert format_file_size(0) == "0 B"
    assert format_file_size(1023) == "1023 B"
    assert format_file_size(1536) == "1.5 KB"
    assert format_file_size(5 * 1024 * 1024) == "5.0 MB"
    assert format_file_size(3 * 1024**6) == "3072.0 PB"


def test_format_file_size_rejects_bad_input():
    assert format_file_size("junk") == "0 B"
    assert format_file_size(None) == "0 B"
    assert format_file_size(-10) == "0 B"
    assert format_file_size(float("nan")) == "0 B"
