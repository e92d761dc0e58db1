"""Terminal prompts used while collecting block details."""

from typing import Callable, Mapping, Protocol

import click

from parkour.menu import MenuConfig, choose


class Prompter(Protocol):
    """The interactive I/O the block collector needs."""

    def info(self, message: str) -> None: ...

    def ask_text(
        self,
        label: str,
        *,
        default: str = "",
        required: bool = False,
        validate: Callable[[str], str | None] | None = None,
    ) -> str: ...

    def ask_choice(self, label: str, options: Mapping[str, str], *, default: str) -> str: ...

    def ask_yes_no(self, label: str, *, default: bool = False) -> bool: ...

    def confirm(self, label: str, *, default: bool = True) -> bool: ...


def _value_proc(required, validate):
    def process(value):
        value = value.strip()
        if required and not value:
            raise click.UsageError("A value is required")
        if validate is not None:
            error = validate(value)
            if error:
                raise click.UsageError(error)
        return value

    return process


class ClickPrompter:
    """Prompter backed by click prompts and the numbered menu."""

    def __init__(self, menu_config: MenuConfig | None = None):
        self.menu_config = menu_config

    def info(self, message):
        click.echo(message)

    def ask_text(self, label, *, default="", required=False, validate=None):
        return click.prompt(
            label,
            default=default,
            show_default=bool(default),
            value_proc=_value_proc(required, validate),
        )

    def ask_choice(self, label, options, *, default):
        return choose(label, options, default, config=self.menu_config)

    def ask_yes_no(self, label, *, default=False):
        return click.confirm(label, default=default)

    def confirm(self, label, *, default=True):
        return click.confirm(label, default=default)
