"""Options dataclass for the create command."""

import os
from dataclasses import dataclass

import click

THEME_DIR_ENV = "PARKOUR_THEME_DIR"


@dataclass
class CreateOpts:
    """All options for the create command."""

    name: str | None = None
    theme: str | None = None
    theme_dir: str | None = None
    skip_prompts: bool = False

    @property
    def theme_path(self) -> str:
        """The theme root: --theme-dir, then $PARKOUR_THEME_DIR, then the cwd."""
        return os.path.abspath(self.theme_dir or os.environ.get(THEME_DIR_ENV) or os.getcwd())

    @property
    def theme_slug(self) -> str:
        """The --theme override, or the theme directory's name."""
        return self.theme or os.path.basename(os.path.normpath(self.theme_path))

    def validate(self):
        """Raise click.UsageError for option values that can never work."""
        if self.theme is not None and not self.theme.strip():
            raise click.UsageError("--theme must not be empty")
