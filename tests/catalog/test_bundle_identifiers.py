"""Tests for the bundle identifier catalog."""

import pytest

from axtract.catalog import BUNDLE_IDENTIFIERS, IDE, Browser, Terminal, bundle_id_for


class TestLookup:
    """Test name lookups."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("mail", "com.apple.mail"),
            ("Mail", "com.apple.mail"),
            ("VS Code", "com.microsoft.VSCode"),
            ("android-studio", "com.google.android.studio"),
            ("teams2", "com.microsoft.teams2"),
            ("not an app", None),
        ],
    )
    def test_bundle_id_for(self, name, expected):
        """Test loose name spellings."""
        assert bundle_id_for(name) == expected

    def test_table_is_read_only(self):
        """Test that the merged table cannot be modified."""
        with pytest.raises(TypeError):
            BUNDLE_IDENTIFIERS["mail"] = "x"


class TestEnums:
    """Test the browser, terminal and IDE enums."""

    def test_browser_round_trip(self):
        """Test identifier lookups for browsers."""
        assert Browser.from_bundle_id("com.google.Chrome") is Browser.CHROME
        assert Browser.from_bundle_id("com.apple.mail") is None
        assert Browser.from_bundle_id(None) is None
        assert Browser.SAFARI.display_name == "Safari"

    def test_terminal_lookup(self):
        """Test identifier lookups for terminals."""
        assert Terminal.from_bundle_id("com.googlecode.iterm2") is Terminal.ITERM
        assert Terminal.ITERM.display_name == "iTerm2"

    def test_ide_names(self):
        """Test IDE identifiers and names."""
        assert IDE.XCODE.bundle_id == BUNDLE_IDENTIFIERS["xcode"]
        assert IDE.VS_CODE.display_name == "VS Code"

    @pytest.mark.parametrize("member", [*Browser, *Terminal, *IDE])
    def test_members_are_catalogued(self, member):
        """Test that every enum identifier is also in the lookup table."""
        assert member.bundle_id in BUNDLE_IDENTIFIERS.values()
