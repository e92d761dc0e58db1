"""Render a BlockSpec into block files inside a theme directory."""

import json
from pathlib import Path
from typing import Callable

from parkour.block_cmd.block_spec import BlockSpec
from parkour.block_cmd.errors import BlockGenerationError
from parkour.templates.template_renderer import render_template


def render_block_json(spec: BlockSpec) -> str:
    keywords = json.dumps(list(spec.keywords)) if spec.keywords else ""
    return render_template(
        "block.json.j2",
        package=__package__,
        name=spec.name,
        title=spec.title,
        description=spec.description,
        category=spec.category,
        icon=spec.icon,
        keywords=keywords,
        theme_slug=spec.theme_slug,
        function_name=spec.function_name,
        supports_anchor=spec.supports_anchor,
        supports_class_name=spec.supports_class_name,
    )


def render_callback(spec: BlockSpec) -> str:
    return render_template(
        "callback.php.j2",
        package=__package__,
        name=spec.name,
        title=spec.title,
        theme_slug=spec.theme_slug,
        function_name=spec.function_name,
        class_prefix=spec.class_prefix,
        include_script=spec.include_script,
        include_style=spec.include_style,
    )


def render_view(spec: BlockSpec) -> str:
    return render_template(
        "block.twig.j2",
        package=__package__,
        name=spec.name,
        title=spec.title,
        theme_slug=spec.theme_slug,
    )


def render_script(spec: BlockSpec) -> str:
    return render_template("block.js.j2", package=__package__, name=spec.name, title=spec.title)


def render_style(spec: BlockSpec) -> str:
    return render_template(
        "block.css.j2",
        package=__package__,
        name=spec.name,
        title=spec.title,
        theme_slug=spec.theme_slug,
    )


def block_files(spec: BlockSpec) -> list[tuple[str, Callable[[BlockSpec], str]]]:
    """Return (theme-relative path, renderer) pairs for every file of ``spec``."""
    block_dir = f"blocks/{spec.name}"
    files = [
        (f"{block_dir}/block.json", render_block_json),
        (f"{block_dir}/callback.php", render_callback),
        (f"views/blocks/{spec.name}.twig", render_view),
    ]
    if spec.include_script:
        files.append((f"{block_dir}/{spec.name}.js", render_script))
    if spec.include_style:
        files.append((f"{block_dir}/{spec.name}.css", render_style))
    return files


class BlockGenerator:
    """Writes the files of a block into a theme directory.

    Existing files are overwritten. A failure leaves files written before
    it in place.
    """

    def __init__(self, theme_path):
        self.theme_path = Path(theme_path)

    def block_dir(self, spec: BlockSpec) -> Path:
        return self.theme_path / "blocks" / spec.name

    @property
    def views_dir(self) -> Path:
        return self.theme_path / "views" / "blocks"

    def create(self, spec: BlockSpec) -> list[str]:
        """Create the block's directories and files.

        Returns:
            Theme-relative paths of the written files, in creation order.

        Raises:
            BlockGenerationError: If a directory or file cannot be written.
        """
        for directory in (self.block_dir(spec), self.views_dir):
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise BlockGenerationError(
                    f"Could not create directory {directory}: {exc}"
                ) from exc

        written = []
        for relative_path, render in block_files(spec):
            self._write(relative_path, render(spec))
            written.append(relative_path)
        return written

    def _write(self, relative_path, content):
        destination = self.theme_path / relative_path
        try:
            destination.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise BlockGenerationError(f"Could not write {destination}: {exc}") from exc
