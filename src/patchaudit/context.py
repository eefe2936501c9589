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

from dataclasses import dataclass, fields
from typing import Literal

import typer

from patchaudit.constants import DEFAULT_PATH_FILTER
from patchaudit.core.assembly.changeset_assembler import ChangesetAssembler
from patchaudit.core.filtering.path_filter import PathFilter
from patchaudit.pipelines.extract_pipeline import ExtractPipeline


@dataclass
class GlobalConfig:
    path_filter: str = DEFAULT_PATH_FILTER
    output_format: Literal["json", "csv", "table"] = "json"
    commit_attribution: bool = True
    gapped: bool = False
    verbose: bool = False
    silent: bool = False

    descriptions = {
        "path_filter": "Only keep files whose path contains this fragment (empty keeps every file)",
        "output_format": "Output format: json, csv or table",
        "commit_attribution": "Attach the commit hash, author and date to every changeset",
        "gapped": "Separate non-adjacent blocks with ' ...' instead of joining all lines",
        "verbose": "Enable verbose logging output",
        "silent": "Do not log anything to the console",
    }

    short_flags = {
        "verbose": "-v",
        "silent": "-s",
        "path_filter": "-f",
    }

    @classmethod
    def get_cli_params(cls) -> dict:
        """
        One typer option per config field, all defaulting to None so that an
        unset flag falls through to the config files and environment.
        """
        params = {}
        for f in fields(cls):
            flag = "--" + f.name.replace("_", "-")
            names = [flag]
            if f.type is bool:
                names = [f"{flag}/--no-{flag[2:]}"]
                annotation = bool | None
            else:
                annotation = str | None
            if f.name in cls.short_flags:
                names.append(cls.short_flags[f.name])
            params[f.name] = (
                annotation,
                typer.Option(None, *names, help=cls.descriptions.get(f.name)),
            )
        return params


@dataclass(frozen=True)
class GlobalContext:
    config: GlobalConfig
    used_config_sources: list[str]

    @classmethod
    def from_global_config(
        cls, config: GlobalConfig, used_config_sources: list[str] | None = None
    ):
        return GlobalContext(config, list(used_config_sources or []))

    def create_pipeline(self) -> ExtractPipeline:
        return ExtractPipeline(
            PathFilter(self.config.path_filter),
            commit_attribution=self.config.commit_attribution,
            assembler=self.create_assembler(),
        )

    def create_assembler(self) -> ChangesetAssembler:
        return ChangesetAssembler(gapped=self.config.gapped)


@dataclass(frozen=True)
class ExtractContext:
    input_path: str | None = None
    output_path: str | None = None
