"""Static package metadata surfaced to CLI commands and documentation.

The version line is kept in sync with ``pyproject.toml`` on release; the
layered-config identifiers decide where configuration files are searched.
"""

from __future__ import annotations

name = "datenorm"
title = "Strict date/time parsing, UTC conversion, and canonical formatting"
version = "1.0.0"
homepage = "https://github.com/bitranox/datenorm"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "datenorm"

#: Vendor, application and slug used by lib_layered_config for config paths.
LAYEREDCONF_VENDOR = "bitranox"
LAYEREDCONF_APP = "Date Normalizer"
LAYEREDCONF_SLUG = "datenorm"


def print_info() -> None:
    """Print the summarised metadata block used by the ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for datenorm:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
