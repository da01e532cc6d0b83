"""
Unit tests for the statusline formatting helpers.
"""

import pytest

from dotclaude.formatters import build_bar, default_home, format_tokens, shorten_path


class TestFormatTokens:
    """Tests for format_tokens function."""

    def test_small_counts_plain(self):
        """Counts under 1000 render as integers."""
        assert format_tokens(0) == "0"
        assert format_tokens(999) == "999"

    def test_thousands(self):
        """Counts from 1000 render with K and one decimal."""
        assert format_tokens(1000) == "1.0K"
        assert format_tokens(45200) == "45.2K"
        assert format_tokens(12100) == "12.1K"

    def test_millions(self):
        """Counts from a million render with M."""
        assert format_tokens(1_000_000) == "1.0M"
        assert format_tokens(1_500_000) == "1.5M"

    def test_decimal_is_truncated(self):
        """The decimal is cut, never rounded up."""
        assert format_tokens(45_250) == "45.2K"
        assert format_tokens(1_999) == "1.9K"
        assert format_tokens(999_999) == "999.9K"
        assert format_tokens(2_999_999) == "2.9M"


class TestBuildBar:
    """Tests for build_bar function."""

    def test_empty_bar(self):
        assert build_bar(0) == "░" * 10

    def test_full_bar(self):
        assert build_bar(100) == "█" * 10

    def test_floor_rounding(self):
        """Partially filled cells are not drawn."""
        assert build_bar(58) == "█████░░░░░"
        assert build_bar(9) == "░" * 10
        assert build_bar(99) == "█" * 9 + "░"

    def test_clamps_out_of_range(self):
        assert build_bar(-5) == "░" * 10
        assert build_bar(250) == "█" * 10

    def test_custom_width_and_glyphs(self):
        assert build_bar(50, width=4, filled="#", empty="-") == "##--"


class TestShortenPath:
    """Tests for shorten_path function."""

    def test_home_prefix_replaced(self):
        assert shorten_path("/Users/alice/project", "/Users/alice") == "~/project"

    def test_home_itself(self):
        assert shorten_path("/Users/alice", "/Users/alice") == "~"

    def test_outside_home_unchanged(self):
        assert shorten_path("/opt/work", "/Users/alice") == "/opt/work"

    def test_sibling_with_common_prefix_unchanged(self):
        """Only whole path components match."""
        assert shorten_path("/Users/alice2/x", "/Users/alice") == "/Users/alice2/x"

    def test_trailing_slash_on_home(self):
        assert shorten_path("/Users/alice/p", "/Users/alice/") == "~/p"

    @pytest.mark.parametrize("home", [None, "", "/"])
    def test_no_usable_home(self, home):
        assert shorten_path("/Users/alice/p", home) == "/Users/alice/p"


class TestDefaultHome:
    """Tests for default_home function."""

    def test_uses_home_env(self):
        assert default_home({"HOME": "/Users/alice"}) == "/Users/alice"

    def test_empty_home_falls_back_to_user(self, monkeypatch):
        monkeypatch.setattr("dotclaude.formatters.sys.platform", "darwin")
        assert default_home({"HOME": "", "USER": "alice"}) == "/Users/alice"

    def test_linux_fallback(self, monkeypatch):
        monkeypatch.setattr("dotclaude.formatters.sys.platform", "linux")
        assert default_home({"USER": "bob"}) == "/home/bob"

    def test_login_name_when_user_unset(self, monkeypatch):
        monkeypatch.setattr("dotclaude.formatters.sys.platform", "linux")
        monkeypatch.setattr("dotclaude.formatters.getpass.getuser", lambda: "carol")
        assert default_home({}) == "/home/carol"

    def test_none_when_nothing_known(self, monkeypatch):
        def no_user():
            raise OSError("no username")

        monkeypatch.setattr("dotclaude.formatters.getpass.getuser", no_user)
        assert default_home({}) is None
