"""Unit tests for relative path and containment calculations."""

from pathkit.core.relative import (
    contains_path,
    relative_path,
    relative_path_components,
    relative_path_from_directory,
)


class TestRelativePath:
    """Tests for relative_path function."""

    def test_descendant(self) -> None:
        """A descendant is reached with a './' prefix."""
        assert relative_path("/a/b/c", "/a/b/c/d/e/f") == "./d/e/f"

    def test_sibling_tree(self) -> None:
        """Leaving 'from' produces '..' segments and no './'."""
        assert relative_path("/a", "/b/c/d") == "../b/c/d"

    def test_ancestor(self) -> None:
        """Reaching an ancestor is only '..' segments."""
        assert relative_path("/a/b/c", "/a") == "../.."

    def test_identical(self) -> None:
        """Identical paths give '.'."""
        assert relative_path("/a/b", "/a/b/") == "."

    def test_unreduced_input(self) -> None:
        """Both paths are reduced before comparison."""
        assert relative_path("/a/x/../b", "/a/b/./c") == "./c"

    def test_different_roots(self) -> None:
        """Unrelated roots return the normalized target."""
        assert relative_path("c:/a", "d:\\b\\c") == "d:/b/c"
        assert relative_path("/a", "c:/b") == "c:/b"

    def test_drive_letter_case_ignored(self) -> None:
        """Drive roots compare case-insensitively."""
        assert relative_path("C:/a", "c:/a/b") == "./b"

    def test_ignore_case(self) -> None:
        """Segments may compare case-insensitively."""
        assert relative_path("/A/B", "/a/b/c", ignore_case=True) == "./c"

    def test_case_sensitive_by_default(self) -> None:
        """Differently cased segments are different directories."""
        assert relative_path("/A/B", "/a/b/c") == "../../a/b/c"


class TestRelativePathComponents:
    """Tests for relative_path_components function."""

    def test_components(self) -> None:
        """Components start with an empty root."""
        assert relative_path_components("/a/b", "/a/c") == ["", "..", "c"]

    def test_identical(self) -> None:
        """Identical paths yield only the empty root."""
        assert relative_path_components("/a", "/a") == [""]

    def test_different_roots(self) -> None:
        """Different roots yield the target's components."""
        assert relative_path_components("/a", "c:/b") == ["c:/", "b"]


class TestRelativePathFromDirectory:
    """Tests for relative_path_from_directory function."""

    def test_descendant(self) -> None:
        """No './' marker is added."""
        assert relative_path_from_directory("/a", "/a/b/c/d") == "b/c/d"

    def test_parent(self) -> None:
        """Climbing out still uses '..'."""
        assert relative_path_from_directory("/a/b", "/a/c/d") == "../c/d"

    def test_identical(self) -> None:
        """Identical paths give an empty string."""
        assert relative_path_from_directory("/a/b", "/a/b") == ""

    def test_ignore_case(self) -> None:
        """Case can be ignored."""
        assert relative_path_from_directory("/A", "/a/b", ignore_case=True) == "b"


class TestContainsPath:
    """Tests for contains_path function."""

    def test_ignore_case(self) -> None:
        """Case-insensitive containment."""
        assert contains_path("/a", "/A/B", ignore_case=True)

    def test_case_sensitive(self) -> None:
        """Case-sensitive containment by default."""
        assert not contains_path("/a", "/A/B")

    def test_self(self) -> None:
        """A path contains itself."""
        assert contains_path("/a/b", "/a/b")
        assert contains_path("/a/b", "/a/b/")

    def test_component_boundary(self) -> None:
        """Containment is on whole segments, not string prefixes."""
        assert not contains_path("/user", "/username")

    def test_child_shorter_than_parent(self) -> None:
        """An ancestor is not contained by its descendant."""
        assert not contains_path("/a/b", "/a")

    def test_unreduced_input(self) -> None:
        """Both paths are reduced first."""
        assert contains_path("/a/d/../b", "/a/b/c")

    def test_drive_roots(self) -> None:
        """Drive letters compare case-insensitively."""
        assert contains_path("C:\\x", "c:/x/y")
        assert not contains_path("c:/x", "d:/x/y")

    def test_root_contains_everything(self) -> None:
        """The POSIX root contains every absolute POSIX path."""
        assert contains_path("/", "/a/b")

    def test_relative_vs_absolute(self) -> None:
        """A relative path never contains an absolute one."""
        assert not contains_path("a", "/a/b")
