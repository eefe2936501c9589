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

import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

from loguru import logger
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from patchaudit.constants import ENV_APP_PREFIX, GLOBAL_CONFIG_FILE, LOCAL_CONFIG_FILE
from patchaudit.core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ConfigResolution:
    config: object
    used_sources: list[str]
    used_defaults: bool


class ConfigLoader:
    """Merges configuration from several sources into one validated config dataclass."""

    @staticmethod
    def get_full_config(
        config_model: type,
        input_args: dict,
        local_config_path: Path | None = None,
        env_app_prefix: str = ENV_APP_PREFIX,
        global_config_path: Path | None = None,
        custom_config_path: Path | None = None,
    ) -> ConfigResolution:
        """Priority: input args, custom config, local config, environment variables, global config."""

        local_config_path = local_config_path or LOCAL_CONFIG_FILE
        global_config_path = global_config_path or GLOBAL_CONFIG_FILE

        sources: list[tuple[str, dict]] = [
            ("Input Args", input_args),
            ("Local Config", ConfigLoader.load_toml(local_config_path)),
            ("Environment Variables", ConfigLoader.load_env(env_app_prefix)),
            ("Global Config", ConfigLoader.load_toml(global_config_path)),
        ]

        if custom_config_path is not None:
            if not custom_config_path.exists():
                raise ConfigurationError(
                    f"Custom config file not found: {custom_config_path}"
                )
            sources.insert(
                1, ("Custom Config", ConfigLoader.load_toml(custom_config_path))
            )

        for name, source in sources:
            logger.debug(f"{name=} {source=}")

        built, used_indexes, used_defaults = ConfigLoader.build(
            config_model, [source for _, source in sources]
        )

        return ConfigResolution(
            config=built,
            used_sources=[sources[i][0] for i in sorted(used_indexes)],
            used_defaults=used_defaults,
        )

    @staticmethod
    def load_toml(path: Path) -> dict:
        """Reads a TOML file, returning an empty dict when it is missing or invalid."""

        if not path.exists():
            logger.debug(f"{path} does not exist")
            return {}

        data = {}
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.warning(f"Failed to load {path}: {e}")

        return data

    @staticmethod
    def load_env(app_prefix: str) -> dict:
        """Collects PREFIX_* environment variables, keyed by the lowercased remainder."""

        data = {}
        for k, v in os.environ.items():
            if k.lower().startswith(app_prefix.lower()):
                data[k[len(app_prefix) :].lower()] = v

        return data

    @staticmethod
    def build(config_model: type, sources: list[dict]):
        """Takes each field from the highest priority source that sets it, defaults for the rest."""

        remaining_keys = {f.name for f in fields(config_model)}

        final_data = {}
        used_indices = set()

        for i, source in enumerate(sources):
            if not remaining_keys:
                break

            contributions = source.keys() & remaining_keys
            if contributions:
                used_indices.add(i)
                for key in contributions:
                    final_data[key] = source[key]
                remaining_keys -= contributions

        try:
            model = TypeAdapter(config_model).validate_python(final_data)
        except PydanticValidationError as e:
            raise ConfigurationError("Invalid configuration", str(e)) from e

        return model, used_indices, bool(remaining_keys)
