"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROG_NAME = "json_schema_to_ts"


def _display_value(param: click.Parameter, value) -> str:
    """File paths are shown as their file name, everything else as-is."""
    if isinstance(param.type, click.Path):
        return Path(str(value)).name
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct the command line from the current Click context, for the
    generation comment of the output file.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string
    """
    try:
        ctx = click.get_current_context()
    except RuntimeError:
        # No active context (e.g. library use)
        return PROG_NAME

    cli_args = ctx.params
    arguments: list[str] = []
    options: list[str] = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if value is None or value == () or value is False:
            continue

        if isinstance(param, click.Argument):
            arguments.append(_display_value(param, value))
            continue

        if not isinstance(param, click.Option) or value == param.default:
            continue

        flag = param.opts[0] if param.opts else f"--{param.name}"
        if param.is_flag:
            options.append(flag)
        elif param.multiple:
            for item in value:
                options.extend([flag, _display_value(param, item)])
        else:
            options.extend([flag, _display_value(param, value)])

    return " ".join([PROG_NAME, *arguments, *options])
