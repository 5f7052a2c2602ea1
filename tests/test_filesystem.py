import pytest

from moosekernel.filesystem import (
    MAX_CONTENT,
    AlreadyExistsError,
    FileSystem,
    FileSystemError,
    InvalidContentError,
    InvalidNameError,
    LimitReachedError,
    NodeType,
    NotEmptyError,
    NotFoundError,
)


def test_empty_root_listing():
    fs = FileSystem()
    assert fs.listing() == ["Contents of /:", " (empty)"]
    assert fs.pwd() == "/"


def test_listing_shows_kinds_in_creation_order():
    fs = FileSystem()
    fs.mkdir("docs")
    fs.mkfile("notes.txt", "hi")
    assert fs.listing() == ["Contents of /:", " [DIR] docs", " [FILE] notes.txt"]


def test_cd_and_pwd_round_trip():
    fs = FileSystem()
    fs.mkdir("docs")
    fs.cd("docs")
    fs.mkdir("inner")
    fs.cd("inner")
    assert fs.pwd() == "/docs/inner"
    fs.cd("..")
    fs.cd("..")
    assert fs.pwd() == "/"
    fs.cd("..")
    assert fs.cwd is fs.root


def test_cd_missing_and_into_file():
    fs = FileSystem()
    fs.mkfile("a", "")
    with pytest.raises(NotFoundError):
        fs.cd("a")
    with pytest.raises(NotFoundError):
        fs.cd("nothing")


@pytest.mark.parametrize("name", ["", None, "x" * 128])
def test_invalid_names(name):
    fs = FileSystem()
    with pytest.raises(InvalidNameError):
        fs.mkdir(name)
    with pytest.raises(InvalidNameError):
        fs.mkfile(name, "")


def test_longest_name_accepted():
    fs = FileSystem()
    name = "x" * 127
    fs.mkdir(name)
    assert fs.root.children[0].name == name


def test_duplicates_are_per_kind():
    fs = FileSystem()
    fs.mkdir("same")
    fs.mkfile("same", "")
    with pytest.raises(AlreadyExistsError):
        fs.mkdir("same")
    with pytest.raises(AlreadyExistsError):
        fs.mkfile("same", "x")
    assert [c.type for c in fs.root.children] == [NodeType.FOLDER, NodeType.FILE]


def test_content_limits():
    fs = FileSystem()
    with pytest.raises(InvalidContentError):
        fs.mkfile("big", "a" * MAX_CONTENT)
    with pytest.raises(InvalidContentError):
        fs.mkfile("none", None)
    fs.mkfile("ok", "a" * (MAX_CONTENT - 1))
    assert len(fs.cat("ok")) == MAX_CONTENT - 1


def test_children_limit():
    fs = FileSystem(max_children=2)
    fs.mkdir("a")
    fs.mkfile("b", "")
    with pytest.raises(LimitReachedError):
        fs.mkdir("c")


def test_node_pool_is_not_reclaimed():
    fs = FileSystem(max_nodes=2)
    fs.mkfile("a", "")
    with pytest.raises(LimitReachedError):
        fs.mkfile("b", "")
    fs.rm("a")
    with pytest.raises(LimitReachedError):
        fs.mkfile("b", "")


def test_cat_and_edit():
    fs = FileSystem()
    fs.mkfile("f", "old")
    assert fs.cat("f") == "old"
    fs.edit_file("f", "new text")
    assert fs.cat("f") == "new text"
    fs.edit_file("f", "z" * (MAX_CONTENT + 10))
    assert len(fs.cat("f")) == MAX_CONTENT - 1
    with pytest.raises(NotFoundError):
        fs.edit_file("g", "x")
    with pytest.raises(NotFoundError):
        fs.cat("g")


def test_rm_only_removes_files():
    fs = FileSystem()
    fs.mkdir("d")
    with pytest.raises(NotFoundError):
        fs.rm("d")
    fs.mkfile("f", "")
    fs.rm("f")
    assert [c.name for c in fs.root.children] == ["d"]


def test_rmdir():
    fs = FileSystem()
    fs.mkfile("f", "")
    with pytest.raises(NotFoundError):
        fs.rmdir("f")
    fs.mkdir("d")
    fs.cd("d")
    fs.mkfile("inside", "")
    fs.cd("..")
    with pytest.raises(NotEmptyError):
        fs.rmdir("d")
    fs.cd("d")
    fs.rm("inside")
    fs.cd("..")
    fs.rmdir("d")
    assert [c.name for c in fs.root.children] == ["f"]


def test_pwd_is_bounded_to_name_length():
    fs = FileSystem()
    for name in ("a" * 100, "b" * 100):
        fs.mkdir(name)
        fs.cd(name)
    path = fs.pwd()
    assert len(path) == 127
    assert path.startswith("/" + "a" * 100 + "/")


def test_errors_share_a_base():
    fs = FileSystem()
    with pytest.raises(FileSystemError):
        fs.cat("missing")