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

import inspect
from pathlib import Path

import typer
from colorama import init
from dotenv import load_dotenv
from loguru import logger

from patchaudit.commands import config, extract
from patchaudit.constants import APP_NAME
from patchaudit.context import GlobalConfig, GlobalContext
from patchaudit.core.config.config_loader import ConfigLoader, ConfigResolution
from patchaudit.core.exceptions import handle_patchaudit_exception
from patchaudit.core.logging.logging import setup_logger
from patchaudit.runtimeutil import (
    ensure_utf8_output,
    get_log_dir_callback,
    setup_signal_handlers,
    version_callback,
)

init(autoreset=True)

app = typer.Typer(
    help=f"{APP_NAME}: audit which files a range of commits touched",
    pretty_exceptions_show_locals=False,
    pretty_exceptions_enable=False,
    add_completion=False,
)

app.command(name="extract")(extract.main)
app.command(name="config")(config.main)


def resolve_config(custom_config: str | None, overrides: dict) -> ConfigResolution:
    """Unset options arrive as None and fall through to files and environment."""
    return ConfigLoader.get_full_config(
        GlobalConfig,
        {key: value for key, value in overrides.items() if value is not None},
        custom_config_path=Path(custom_config) if custom_config else None,
    )


def build_global_context(
    command: str, custom_config: str | None, overrides: dict
) -> GlobalContext:
    resolution = resolve_config(custom_config, overrides)
    global_config: GlobalConfig = resolution.config

    setup_logger(command, debug=global_config.verbose, silent=global_config.silent)

    logger.debug(
        "Config for {command} from {sources} (defaults used: {defaults})",
        command=command,
        sources=resolution.used_sources or "defaults only",
        defaults=resolution.used_defaults,
    )
    return GlobalContext.from_global_config(global_config, resolution.used_sources)


def with_config_options(callback):
    """
    Replace the **overrides catch-all of `callback` with one keyword option
    per GlobalConfig field, since typer builds the CLI from the signature.
    """
    sig = inspect.signature(callback)
    params = [p for p in sig.parameters.values() if p.kind is not p.VAR_KEYWORD]
    for name, (annotation, option) in GlobalConfig.get_cli_params().items():
        params.append(
            inspect.Parameter(
                name,
                inspect.Parameter.KEYWORD_ONLY,
                default=option,
                annotation=annotation,
            )
        )
    callback.__signature__ = sig.replace(parameters=params)
    return callback


@app.callback(invoke_without_command=True)
@with_config_options
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    log_path: bool = typer.Option(
        False,
        "--log-dir",
        "-LD",
        callback=get_log_dir_callback,
        is_eager=True,
        help="Show log path (where logs for patchaudit live) and exit",
    ),
    custom_config: str | None = typer.Option(
        None,
        "--custom-config",
        help="Path to a custom config file",
    ),
    **overrides,
) -> None:
    """
    Resolve the configuration once and hand commands a GlobalContext.
    """
    with handle_patchaudit_exception(exit_on_fail=True):
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

        # `<command> --help` is answered by the command itself, no config needed
        if any(arg in ctx.help_option_names for arg in ctx.args):
            return

        ctx.obj = build_global_context(ctx.invoked_subcommand, custom_config, overrides)


def run_app():
    """Entry point of the `patchaudit` script."""
    ensure_utf8_output()
    setup_signal_handlers()
    # PATCHAUDIT_* values may come from a .env file
    load_dotenv()
    app(prog_name=APP_NAME)


if __name__ == "__main__":
    run_app()
