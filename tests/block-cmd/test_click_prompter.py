"""Tests for ClickPrompter against simulated terminal input."""

import io

import pytest
from click.testing import CliRunner

from parkour.block_cmd.block_spec import ICONS, validate_block_name
from parkour.block_cmd.prompter import ClickPrompter
from parkour.menu import MenuConfig


def _run_with_input(stdin, fn):
    """Call fn() with stdin/stdout redirected the way CliRunner does."""
    with CliRunner().isolation(input=stdin) as streams:
        value = fn()
    return value, streams[0].getvalue().decode()


class TestAskText:

    def test_returns_typed_value_trimmed(self):
        value, _ = _run_with_input("  Big Hero \n", lambda: ClickPrompter().ask_text("Title"))
        assert value == "Big Hero"

    def test_empty_input_takes_default(self):
        value, output = _run_with_input(
            "\n", lambda: ClickPrompter().ask_text("Title", default="Hero Section")
        )
        assert value == "Hero Section"
        assert "[Hero Section]" in output

    def test_optional_prompt_accepts_empty_input(self):
        value, _ = _run_with_input("\n", lambda: ClickPrompter().ask_text("Description"))
        assert value == ""

    def test_required_prompt_repeats_on_empty_input(self):
        value, output = _run_with_input(
            "\nhero\n", lambda: ClickPrompter().ask_text("Name", required=True)
        )
        assert value == "hero"
        assert "A value is required" in output

    def test_validator_message_shown_and_prompt_repeated(self):
        value, output = _run_with_input(
            "bad name\nhero-section\n",
            lambda: ClickPrompter().ask_text("Name", required=True, validate=validate_block_name),
        )
        assert value == "hero-section"
        assert "lowercase letters, numbers, and hyphens only" in output


class TestYesNo:

    @pytest.mark.parametrize("answer,expected", [("y\n", True), ("n\n", False), ("\n", False)])
    def test_ask_yes_no(self, answer, expected):
        value, _ = _run_with_input(answer, lambda: ClickPrompter().ask_yes_no("Include CSS file?"))
        assert value is expected

    def test_confirm_defaults_to_yes(self):
        value, _ = _run_with_input("\n", lambda: ClickPrompter().confirm("Create this block?"))
        assert value is True


class TestAskChoice:

    def test_delegates_to_numbered_menu(self):
        output = io.StringIO()
        prompter = ClickPrompter(MenuConfig(input_fn=lambda _: "4", output=output))

        icon = prompter.ask_choice("Choose an icon", ICONS, default="admin-customizer")

        assert icon == "columns"
        assert "4) Columns (columns)" in output.getvalue()

    def test_info_echoes(self):
        _, output = _run_with_input("", lambda: ClickPrompter().info("Block Summary:"))
        assert "Block Summary:" in output
