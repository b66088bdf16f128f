"""
CLI utilities for command line reconstruction and introspection.
"""

from pathlib import Path

import click

PROGRAM_NAME = "builder_gen"


def _format_value(value) -> str:
    # File paths are shortened to their names for a stable generation comment
    if isinstance(value, (str, Path)):
        path_obj = Path(str(value))
        return path_obj.name if path_obj.exists() else str(value)
    return str(value)


def reconstruct_command_line(click_command: click.Command) -> str:
    """
    Reconstruct the command line from the current Click context.

    Args:
        click_command: Click command object for introspection

    Returns:
        Reconstructed command line string, just the program name when no
        command is running
    """
    try:
        ctx = click.get_current_context()
    except RuntimeError:
        return PROGRAM_NAME

    cli_args = ctx.params
    if not cli_args:
        return PROGRAM_NAME

    arguments = []
    options = []

    for param in click_command.params:
        value = cli_args.get(param.name)
        if not value:
            continue

        values = value if isinstance(value, (list, tuple)) else [value]

        if isinstance(param, click.Argument):
            arguments.extend(_format_value(v) for v in values)

        elif isinstance(param, click.Option):
            if value == param.default:
                continue
            flag = param.opts[0] if param.opts else f"--{param.name}"
            if param.is_flag:
                options.append(flag)
            else:
                for v in values:
                    options.extend([flag, _format_value(v)])

    return " ".join([PROGRAM_NAME, *arguments, *options])
