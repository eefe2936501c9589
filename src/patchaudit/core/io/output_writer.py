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

"""
Serializers for extracted changesets and the sink they are written to.
"""

import csv
import io
import json
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from loguru import logger
from rich.console import Console
from rich.table import Table

from patchaudit.core.data.changeset import Changeset
from patchaudit.core.exceptions import output_write_failed


def render_json(records: Sequence[dict]) -> str:
    return json.dumps(list(records), indent=2, ensure_ascii=False) + "\n"


def render_csv(rows: Sequence[dict], fieldnames: Sequence[str]) -> str:
    """Header line plus one line per row; the header is written even without rows."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=list(fieldnames), lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue()


def render_table(changesets: Sequence[Changeset], width: int = 120) -> str:
    """Summary table: one row per changeset with line and block counts."""
    attributed = any(c.header is not None for c in changesets)

    table = Table(title=f"{len(changesets)} changesets", show_lines=False)
    if attributed:
        table.add_column("Commit", style="yellow", no_wrap=True)
        table.add_column("Author")
        table.add_column("Date")
    table.add_column("Path", style="cyan")
    table.add_column("+", justify="right", style="green")
    table.add_column("-", justify="right", style="red")
    table.add_column("Blocks", justify="right")

    for c in changesets:
        row = []
        if attributed:
            header = c.header
            row.extend(
                [header.short_hash, header.author, header.date]
                if header is not None
                else ["", "", ""]
            )
        row.extend(
            [
                c.path,
                str(c.added_count()),
                str(c.deleted_count()),
                str(len(c.additions) + len(c.deletions)),
            ]
        )
        table.add_row(*row)

    console = Console(file=io.StringIO(), width=width, record=True)
    console.print(table)
    return console.export_text()


def write_output(content: str, path: str | None, stdout: TextIO | None = None) -> None:
    """Write to `path` as UTF-8, or to standard output when no path is given."""
    if path is None:
        target = stdout or sys.stdout
        try:
            target.write(content)
            target.flush()
        except OSError as e:
            raise output_write_failed("standard output", str(e)) from e
        return

    try:
        Path(path).write_text(content, encoding="utf-8", newline="")
    except OSError as e:
        raise output_write_failed(path, str(e)) from e

    logger.debug(f"Wrote {len(content)} characters to {path}")
