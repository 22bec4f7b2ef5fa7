import pytest

from linuxplay.ls import list_directory, main


@pytest.fixture
def sample_dir(tmp_path):
    directory = tmp_path / "ls_test_dir"
    directory.mkdir()
    (directory / "file_z.txt").touch()
    (directory / "file_a.txt").touch()
    (directory / "subdir_b").mkdir()
    return directory


def test_lists_directory_contents_sorted(sample_dir):
    assert list_directory(sample_dir) == ["file_a.txt", "file_z.txt", "subdir_b"]


def test_lists_empty_directory(sample_dir):
    empty = sample_dir / "empty_subdir"
    empty.mkdir()
    assert list_directory(empty) == []


def test_lists_single_file(sample_dir):
    assert list_directory(sample_dir / "file_a.txt") == ["file_a.txt"]


def test_handles_nonexistent_path(tmp_path):
    with pytest.raises(FileNotFoundError, match="Path does not exist."):
        list_directory(tmp_path / "non_existent_dir_12345")


def test_main_prints_entries(sample_dir, capsys):
    assert main([str(sample_dir)]) == 0
    assert capsys.readouterr().out == "file_a.txt\nfile_z.txt\nsubdir_b\n"


def test_main_nonexistent_path(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert capsys.readouterr().out == "Error: Path does not exist.\n"


def test_main_too_many_arguments(capsys):
    assert main(["a", "b"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_defaults_to_current_directory(sample_dir, monkeypatch, capsys):
    monkeypatch.chdir(sample_dir)
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["file_a.txt", "file_z.txt", "subdir_b"]