"""Numbered single-choice menu for interactive prompts."""

import sys
from dataclasses import dataclass, field
from typing import Callable, Mapping, TextIO


@dataclass
class MenuConfig:
    """I/O configuration for menu display and input."""

    input_fn: Callable[[str], str] = field(default_factory=lambda: input)
    output: TextIO = field(default_factory=lambda: sys.stderr)


def _display_options(prompt, labels, default_index, output):
    print("", file=output)
    print(prompt, file=output)
    for i, label in enumerate(labels, start=1):
        line = f"  {i}) {label}"
        if i == default_index:
            line += " [default]"
        print(line, file=output)
    print("", file=output)


def _read_choice(prompt_text, config):
    try:
        return config.input_fn(prompt_text)
    except EOFError:
        print("", file=config.output)
        print("Input closed. Exiting.", file=config.output)
        sys.exit(0)


def _parse_choice(raw_input, values, default_index):
    raw_input = raw_input.strip()
    if raw_input == "":
        return default_index
    if raw_input.isdigit() and 1 <= int(raw_input) <= len(values):
        return int(raw_input)
    if raw_input in values:
        return values.index(raw_input) + 1
    return None


def choose(prompt, options: Mapping[str, str], default: str, *, config=None) -> str:
    """Display ``options`` as a numbered list and return the chosen key.

    Args:
        prompt: Header text displayed above the options.
        options: Ordered mapping of option value to display label.
        default: The option value selected on empty input.
        config: MenuConfig with input_fn and output stream (defaults apply).

    The user may answer with the option number or the option value itself.

    Raises:
        ValueError: If ``default`` is not one of the option values.
        SystemExit(0): On EOF (e.g. piped input closed).
    """
    if config is None:
        config = MenuConfig()

    values = list(options)
    if default not in options:
        raise ValueError(f"Default option not found: {default}")
    default_index = values.index(default) + 1

    labels = [f"{options[value]} ({value})" for value in values]
    _display_options(prompt, labels, default_index, config.output)
    prompt_text = f"Enter your choice (1-{len(values)}) [default: {default_index}]: "

    while True:
        parsed = _parse_choice(_read_choice(prompt_text, config), values, default_index)
        if parsed is not None:
            return values[parsed - 1]
        print(
            f"Invalid choice. Please enter a number between 1 and {len(values)}.",
            file=config.output,
        )
