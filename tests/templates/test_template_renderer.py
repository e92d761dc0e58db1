"""Tests for the shared template renderer."""

import pytest

BLOCK_PACKAGE = "parkour.block_cmd"


@pytest.mark.unit
class TestRenderTemplate:

    def test_loads_and_renders_template(self):
        """Should load a .j2 file from {package}.templates and render variables."""
        from parkour.templates.template_renderer import render_template

        result = render_template("block.js.j2", package=BLOCK_PACKAGE, name="faq", title="FAQ")

        assert result.startswith("/**\n * FAQ block script.\n */\n")
        assert "'.block-faq'" in result

    def test_keeps_trailing_newline(self):
        from parkour.templates.template_renderer import render_template

        result = render_template("block.js.j2", package=BLOCK_PACKAGE, name="faq", title="FAQ")

        assert result.endswith("} );\n")

    def test_missing_variable_raises_error(self):
        """Should refuse to render a template with an undefined variable."""
        import jinja2

        from parkour.templates.template_renderer import render_template

        with pytest.raises(jinja2.UndefinedError):
            render_template("block.js.j2", package=BLOCK_PACKAGE, name="faq")

    def test_missing_template_raises_error(self):
        """Should raise FileNotFoundError for a nonexistent template."""
        from parkour.templates.template_renderer import render_template

        with pytest.raises(FileNotFoundError):
            render_template("nonexistent.j2", package=BLOCK_PACKAGE)
