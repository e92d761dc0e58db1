"""Collect the details of a new block, interactively or from defaults."""

from parkour.block_cmd.block_spec import (
    DEFAULT_ICON,
    ICONS,
    BlockSpec,
    name_to_title,
    normalize_block_name,
    parse_keywords,
    validate_block_name,
)
from parkour.block_cmd.errors import BlockCreationCancelled, BlockNameError
from parkour.block_cmd.prompter import Prompter


def resolve_block_name(name, *, skip_prompts, prompter: Prompter) -> str:
    """Return the validated, normalized block name.

    Prompts for the name when it was not supplied and prompts are allowed.

    Raises:
        BlockNameError: If the name is missing under --skip-prompts or breaks
            the naming rule.
    """
    if not name:
        if skip_prompts:
            raise BlockNameError("Block name is required when using --skip-prompts")
        name = prompter.ask_text(
            "What is the block name? (e.g. hero-section)",
            required=True,
            validate=validate_block_name,
        )

    error = validate_block_name(name)
    if error:
        raise BlockNameError(f"{error}: {name!r}")
    return normalize_block_name(name)


def _prompt_for_details(block_name, theme_slug, prompter: Prompter):
    title = prompter.ask_text(
        "Block title (human-readable)",
        default=name_to_title(block_name),
        required=True,
    )
    description = prompter.ask_text("Block description (optional)")
    category = prompter.ask_text(
        "Block category (e.g. herdpress, custom, layout)",
        default=theme_slug,
    )
    icon = prompter.ask_choice("Choose an icon", ICONS, default=DEFAULT_ICON)
    keywords = prompter.ask_text("Keywords (comma-separated, optional, e.g. accordion, faq, toggle)")
    include_script = prompter.ask_yes_no("Include JavaScript file?", default=False)
    include_style = prompter.ask_yes_no("Include CSS file?", default=False)

    return BlockSpec(
        name=block_name,
        theme_slug=theme_slug,
        title=title,
        description=description,
        category=category,
        icon=icon,
        keywords=parse_keywords(keywords),
        include_script=include_script,
        include_style=include_style,
    )


def _confirm(spec, prompter: Prompter):
    prompter.info("")
    prompter.info("Block Summary:")
    prompter.info(f"  Name: {spec.name}")
    prompter.info(f"  Title: {spec.title}")
    prompter.info(f"  Function: {spec.function_name}")
    if not prompter.confirm("Create this block?", default=True):
        raise BlockCreationCancelled("Block creation cancelled.")


def collect_block_spec(name, theme_slug, *, skip_prompts, prompter: Prompter) -> BlockSpec:
    """Gather everything needed to generate a block.

    With ``skip_prompts`` every descriptive field takes its default: empty
    description, the theme slug as category, the default icon, no keywords and
    neither script nor style. Otherwise the user is asked for each field and
    must confirm a summary before the BlockSpec is returned.

    Raises:
        BlockNameError: If the name is missing or invalid.
        BlockCreationCancelled: If the user declines the confirmation.
    """
    block_name = resolve_block_name(name, skip_prompts=skip_prompts, prompter=prompter)

    if skip_prompts:
        return BlockSpec(name=block_name, theme_slug=theme_slug)

    spec = _prompt_for_details(block_name, theme_slug, prompter)
    _confirm(spec, prompter)
    return spec
