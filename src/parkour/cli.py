"""Top-level Click group for the parkour CLI."""

import click

from parkour.block_cmd.cli import create_cmd


@click.group()
def main():
    """parkour - scaffold ACF blocks for Timber themes."""


main.add_command(create_cmd)
