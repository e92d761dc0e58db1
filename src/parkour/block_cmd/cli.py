"""Click command for creating ACF blocks."""

import os
import sys

import click

from parkour.block_cmd.collector import collect_block_spec
from parkour.block_cmd.create_opts import THEME_DIR_ENV, CreateOpts
from parkour.block_cmd.errors import (
    BlockCreationCancelled,
    BlockGenerationError,
    BlockNameError,
    ThemeNotFoundError,
)
from parkour.block_cmd.generator import BlockGenerator
from parkour.block_cmd.prompter import ClickPrompter, Prompter


def create_block(opts: CreateOpts, prompter: Prompter) -> list[str]:
    """Collect the block details and write its files.

    Returns the theme-relative paths of the created files.
    """
    opts.validate()
    theme_path = opts.theme_path
    if not os.path.isdir(theme_path):
        raise ThemeNotFoundError(theme_path)

    spec = collect_block_spec(
        opts.name,
        opts.theme_slug,
        skip_prompts=opts.skip_prompts,
        prompter=prompter,
    )
    created = BlockGenerator(theme_path).create(spec)

    click.echo("")
    click.echo("Block created successfully!")
    click.echo("")
    click.echo("Files created:")
    for path in created:
        click.echo(f"  - {path}")
    click.echo("")
    click.echo(f"PARKOUR! Block '{spec.title}' is ready to use!")
    return created


@click.command("create")
@click.argument("name", required=False)
@click.option("--theme", default=None, help="Theme slug. Defaults to the theme directory name.")
@click.option(
    "--theme-dir",
    default=None,
    help=f"Theme root directory. Defaults to ${THEME_DIR_ENV} or the current directory.",
)
@click.option("--skip-prompts", is_flag=True, default=False, help="Use defaults instead of prompting.")
def create_cmd(name, theme, theme_dir, skip_prompts):
    """Create a new ACF block with all necessary files.

    NAME is the block name in kebab-case, e.g. hero-section. When omitted
    you are prompted for it.
    """
    opts = CreateOpts(name=name, theme=theme, theme_dir=theme_dir, skip_prompts=skip_prompts)
    click.echo("PARKOUR! Let's create a block...")
    try:
        create_block(opts, ClickPrompter())
    except BlockCreationCancelled as exc:
        click.echo(str(exc))
    except (BlockNameError, ThemeNotFoundError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    except BlockGenerationError as exc:
        click.echo(f"Failed to create block: {exc}", err=True)
        sys.exit(1)
