import sys
from typing import IO, List, Optional

from .config import get_config
from .options import OptionDescriptor, OptionTable

MAX_OPTION_COLUMN = 30
MIN_DESCRIPTION_WIDTH = 20


def _option_string(option: OptionDescriptor) -> str:
    if option.short_name and option.long_name:
        result = f"  -{option.short_name}, --{option.long_name}"
    elif option.short_name:
        result = f"  -{option.short_name}"
    else:
        result = f"      --{option.long_name}"

    if option.takes_argument:
        result += f" {option.arg_help or 'arg'}"
    return result


def _description(option: OptionDescriptor) -> str:
    desc = option.description
    if option.takes_argument and option.default_value is not None:
        desc += f" (default: {option.default_value})"
    return desc


def _wrap_text(text: str, width: int) -> List[str]:
    lines = []
    current_line = ""
    for word in text.split():
        if current_line and len(current_line) + 1 + len(word) > width:
            lines.append(current_line)
            current_line = word
        elif current_line:
            current_line += " " + word
        else:
            current_line = word
    if current_line or not lines:
        lines.append(current_line)
    return lines


def usage_line(table: OptionTable) -> str:
    usage = f"Usage: {table.program} [OPTIONS]"
    if table.usage_args:
        usage += f" {table.usage_args}"
    return usage


def render_help(table: OptionTable, width: Optional[int] = None) -> str:
    """Render the program banner, usage line and one entry per option.

    Options appear in declaration order. Descriptions are wrapped to ``width``
    columns (``RuntimeConfig.help_width`` when not given).
    """
    if width is None:
        width = get_config().help_width

    result = table.program
    if table.description:
        result += f" - {table.description}"
    result += "\n\n" + usage_line(table) + "\n"

    if not len(table):
        return result

    option_strings = [_option_string(option) for option in table]
    longest = min(max(len(s) for s in option_strings), MAX_OPTION_COLUMN)
    column = longest + 2
    desc_width = max(width - column, MIN_DESCRIPTION_WIDTH)

    result += "\nOptions:\n"
    for option, option_str in zip(table, option_strings):
        desc_lines = _wrap_text(_description(option), desc_width)
        if len(option_str) > longest:
            # too wide to share a line with its description
            result += option_str + "\n"
            first = " " * column + desc_lines[0]
        else:
            first = option_str.ljust(column) + desc_lines[0]
        result += first.rstrip() + "\n"
        for line in desc_lines[1:]:
            result += " " * column + line + "\n"

    return result


def print_help(table: OptionTable, file: Optional[IO[str]] = None) -> None:
    if file is None:
        file = sys.stdout
    file.write(render_help(table))
