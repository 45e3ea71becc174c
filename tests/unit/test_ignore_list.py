"""
Unit tests for the ignore-word list.
"""
from commit_spell.services.ignore_list import is_ignored, load_ignore_words


class TestLoadIgnoreWords:
    """Tests for load_ignore_words()."""

    def test_loads_lowercase_words(self, tmp_path):
        """Words are trimmed and lowercased."""
        path = tmp_path / ".spellignore"
        path.write_text("SymSpell\n  pydantic  \nCLI\n", encoding="utf-8")

        assert load_ignore_words(path) == {"symspell", "pydantic", "cli"}

    def test_skips_blank_lines(self, tmp_path):
        """Empty and whitespace-only lines are not words."""
        path = tmp_path / ".spellignore"
        path.write_text("\n   \nrepo\n\n", encoding="utf-8")

        assert load_ignore_words(path) == {"repo"}

    def test_missing_file_gives_empty_set(self, tmp_path):
        """A repository without an ignore file ignores nothing."""
        assert load_ignore_words(tmp_path / ".spellignore") == set()

    def test_directory_gives_empty_set(self, tmp_path):
        """A directory in place of the file is treated as missing."""
        assert load_ignore_words(tmp_path) == set()

    def test_undecodable_file_gives_empty_set(self, tmp_path):
        """Unreadable content degrades to an empty set."""
        path = tmp_path / ".spellignore"
        path.write_bytes(b"\xff\xfe\xfa\n")

        assert load_ignore_words(path) == set()


class TestIsIgnored:
    """Tests for is_ignored()."""

    def test_case_insensitive(self):
        """Any casing of an ignored word matches."""
        ignore = {"kubectl"}
        assert is_ignored("kubectl", ignore) is True
        assert is_ignored("Kubectl", ignore) is True
        assert is_ignored("KUBECTL", ignore) is True

    def test_other_words_not_ignored(self):
        """Words outside the set are not ignored."""
        assert is_ignored("helm", {"kubectl"}) is False
