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

import typer
from loguru import logger

from patchaudit.context import ExtractContext, GlobalContext
from patchaudit.core.assembly.changeset_assembler import row_fields
from patchaudit.core.exceptions import handle_patchaudit_exception
from patchaudit.core.io.input_reader import read_input
from patchaudit.core.io.output_writer import (
    render_csv,
    render_json,
    render_table,
    write_output,
)
from patchaudit.core.logging.utils import log_changesets, time_block


def render(global_context: GlobalContext, changesets) -> str:
    output_format = global_context.config.output_format
    assembler = global_context.create_assembler()

    if output_format == "csv":
        return render_csv(
            [assembler.to_row(c) for c in changesets],
            row_fields(global_context.config.commit_attribution),
        )
    if output_format == "table":
        return render_table(changesets)
    return render_json([assembler.to_record(c) for c in changesets])


def main(
    ctx: typer.Context,
    input_path: str | None = typer.Argument(
        None,
        help="Patch file to read (e.g. from 'git format-patch --stdout'). Reads standard input when omitted or '-'.",
    ),
    output_path: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write the records to. Writes to standard output when omitted.",
    ),
) -> None:
    """Extract per-file changesets from a multi-commit patch and emit them as records.

    Examples:
        # Changes under /dbo/ across a commit range, as JSON
        git format-patch --stdout main..feature | patchaudit extract

        # Every file, CSV, into a file
        patchaudit --path-filter "" --output-format csv extract changes.patch -o changes.csv
    """
    with handle_patchaudit_exception():
        global_context: GlobalContext = ctx.obj
        extract_context = ExtractContext(input_path=input_path, output_path=output_path)

        logger.debug(
            "Extract command started: input={input} output={output} filter={filter}",
            input=extract_context.input_path or "<stdin>",
            output=extract_context.output_path or "<stdout>",
            filter=global_context.config.path_filter,
        )

        # the text must stay alive until rendering is done, changesets point into it
        text = read_input(extract_context.input_path)

        pipeline = global_context.create_pipeline()
        with time_block("Changeset extraction"):
            changesets = list(pipeline.run(text))

        log_changesets("extraction", changesets)
        logger.debug(
            "Path filter admitted {admitted} files and rejected {rejected}",
            admitted=pipeline.path_filter.admitted,
            rejected=pipeline.path_filter.rejected,
        )

        with time_block("Rendering"):
            content = render(global_context, changesets)

        write_output(content, extract_context.output_path)

        if extract_context.output_path is not None:
            logger.info(
                f"Wrote {len(changesets)} changesets to {extract_context.output_path}"
            )
