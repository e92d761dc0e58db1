"""Exceptions raised while creating a block."""


class BlockNameError(ValueError):
    """The block name is missing or malformed."""


class ThemeNotFoundError(FileNotFoundError):
    """The theme directory blocks are created in does not exist."""

    def __init__(self, theme_path):
        super().__init__(f"Theme directory not found: {theme_path}")
        self.theme_path = theme_path


class BlockCreationCancelled(Exception):
    """The user declined the confirmation prompt."""


class BlockGenerationError(RuntimeError):
    """A directory or file could not be written."""
