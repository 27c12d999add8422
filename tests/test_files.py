import pytest

from moeassets.files import (
    FileEntry,
    clear_folder,
    concat_path,
    create_folder,
    exists,
    list_files,
    write_file,
)


def test_concat_path_inserts_slash():
    assert concat_path("build", "res") == "build/res"


def test_concat_path_keeps_existing_slash():
    assert concat_path("build/", "res") == "build/res"
    assert concat_path("build\\", "res") == "build\\res"


def test_concat_path_many_parts():
    assert concat_path("out", "build", "res", "rc.rc") == "out/build/res/rc.rc"


def test_concat_path_no_parts():
    assert concat_path("out") == "out"


def test_write_and_exists(tmp_path):
    base = str(tmp_path)
    assert not exists(base, "a.txt")
    write_file(base, "a.txt", "hello\n")
    assert exists(base, "a.txt")
    assert (tmp_path / "a.txt").read_text() == "hello\n"


def test_write_file_overwrites(tmp_path):
    base = str(tmp_path)
    write_file(base, "a.txt", "first")
    write_file(base, "a.txt", "second")
    assert exists(base, "a.txt") is True
    assert [entry.relative for entry in list_files(base)] == ["a.txt"]
    assert (tmp_path / "a.txt").read_text() == "second"


def test_create_folder_idempotent(tmp_path):
    base = str(tmp_path)
    create_folder(base, "build")
    create_folder(base, "build")
    assert exists(base, "build") is True
    assert list_files(base) == []
    assert [p.name for p in tmp_path.iterdir()] == ["build"]


def test_clear_folder_removes_tree(tmp_path):
    base = str(tmp_path)
    create_folder(base, "build")
    create_folder(concat_path(base, "build"), "res")
    write_file(concat_path(base, "build", "res"), "rc.rc", "x")
    clear_folder(base, "build")
    assert not exists(base, "build")


def test_clear_folder_missing_is_noop(tmp_path):
    clear_folder(str(tmp_path), "nothing")
    assert list(tmp_path.iterdir()) == []


def test_list_files_recursive(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "img").mkdir()
    (tmp_path / "img" / "logo.png").write_bytes(b"\x89PNG")
    (tmp_path / "img" / "deep").mkdir()
    (tmp_path / "img" / "deep" / "b.bin").write_bytes(b"\x00")
    root = str(tmp_path).replace("\\", "/")

    files = list_files(str(tmp_path))

    assert sorted(entry.relative for entry in files) == ["a.txt", "img/deep/b.bin", "img/logo.png"]
    for entry in files:
        assert isinstance(entry, FileEntry)
        assert entry.path == f"{root}/{entry.relative}"
        assert "\\" not in entry.relative


def test_list_files_skips_empty_directories(tmp_path):
    (tmp_path / "empty").mkdir()
    assert list_files(str(tmp_path)) == []


def test_list_files_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        list_files(str(tmp_path / "absent"))