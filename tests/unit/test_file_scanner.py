"""Unit tests for source file discovery."""

from pathlib import Path

from antisync.services.file_scanner import FileSet


def make_tree(root: Path) -> None:
    (root / "posts" / "2024").mkdir(parents=True)
    (root / "posts" / "b.txt").write_text("b")
    (root / "posts" / "a.txt").write_text("a")
    (root / "posts" / "2024" / "c.txt").write_text("c")
    (root / "posts" / ".hidden.txt").write_text("h")
    (root / "posts" / ".git").mkdir()
    (root / "posts" / ".git" / "config").write_text("g")


class TestFileSet:
    """Test FileSet."""

    def test_recursive_sorted(self, tmp_path):
        """Test recursive discovery in sorted order."""
        make_tree(tmp_path)

        files = list(FileSet([tmp_path / "posts"]))

        assert files == [
            tmp_path / "posts" / "2024" / "c.txt",
            tmp_path / "posts" / "a.txt",
            tmp_path / "posts" / "b.txt",
        ]

    def test_skips_hidden_entries(self, tmp_path):
        """Test that dot files and dot directories are skipped."""
        make_tree(tmp_path)

        names = {p.name for p in FileSet([tmp_path])}

        assert ".hidden.txt" not in names
        assert "config" not in names

    def test_explicit_file(self, tmp_path):
        """Test that a file given directly is listed."""
        make_tree(tmp_path)
        path = tmp_path / "posts" / "a.txt"

        assert list(FileSet([path])) == [path]

    def test_duplicates_listed_once(self, tmp_path):
        """Test overlapping paths."""
        make_tree(tmp_path)
        posts = tmp_path / "posts"

        files = FileSet([posts / "a.txt", posts, posts / "2024"])

        assert len(files) == 3
        assert list(files)[0] == posts / "a.txt"

    def test_empty(self):
        """Test a set built from no paths."""
        assert len(FileSet()) == 0
