# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 CodeStory
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, you can contact us at support@codestory.build
#  */
# -----------------------------------------------------------------------------

from dataclasses import fields

import typer
from colorama import Fore, Style
from rich.console import Console
from rich.table import Table

from patchaudit.constants import GLOBAL_CONFIG_FILE, LOCAL_CONFIG_FILE
from patchaudit.context import GlobalConfig, GlobalContext
from patchaudit.core.exceptions import ConfigurationError, handle_patchaudit_exception


def main(
    ctx: typer.Context,
    key: str | None = typer.Argument(None, help="Only show this configuration key."),
) -> None:
    """Show the effective configuration and where it came from.

    Priority order: program arguments > custom config > local config > environment variables > global config

    Examples:
        # Show all configuration
        patchaudit config

        # Show a single value
        patchaudit --path-filter /views/ config path_filter
    """
    with handle_patchaudit_exception():
        global_context: GlobalContext = ctx.obj
        config = global_context.config
        names = [f.name for f in fields(GlobalConfig)]

        if key is not None:
            if key not in names:
                raise ConfigurationError(
                    f"Unknown configuration key: {key}",
                    f"Available keys: {', '.join(names)}",
                )
            typer.echo(getattr(config, key))
            return

        table = Table(title="patchaudit configuration")
        table.add_column("Key", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")
        table.add_column("Description")
        for name in names:
            table.add_row(
                name, repr(getattr(config, name)), GlobalConfig.descriptions.get(name, "")
            )
        Console().print(table)

        sources = ", ".join(global_context.used_config_sources) or "defaults only"
        print(f"{Fore.WHITE}{Style.BRIGHT}Sources:{Style.RESET_ALL} {sources}")
        print(f"{Fore.WHITE}{Style.BRIGHT}Local config:{Style.RESET_ALL} {LOCAL_CONFIG_FILE}")
        print(f"{Fore.WHITE}{Style.BRIGHT}Global config:{Style.RESET_ALL} {GLOBAL_CONFIG_FILE}")
