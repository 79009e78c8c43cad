# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""File strategy — loads message templates from YAML or JSON files."""

from __future__ import annotations

import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import structlog
import yaml  # type: ignore[import-untyped]

from messagekit.kernel.exceptions import FileException, InvalidArgumentException, ParseException
from messagekit.messages.adapters.hash_strategy import HashStrategy

logger = structlog.get_logger("messagekit.messages.file")


class FileStrategy(HashStrategy):
    """Strategy whose templates are read once from a ``.json``, ``.yaml`` or ``.yml`` file.

    The file must decode to a nested mapping, for example::

        module_name: Console Space Program
        messages:
          rockets:
            launch_status: "rocket %<name>s is ready to launch"

    File templates are always static or format strings. An empty file
    yields an empty template table.
    """

    def __init__(self, file_name: str | os.PathLike[str]) -> None:
        _validate_file_name(file_name)

        self._file_name = file_name
        path = Path(file_name)
        raw_data = _read_file(path, file_name)
        templates = _parse_templates(path, raw_data)

        super().__init__(templates)
        logger.debug("templates_loaded", file_name=str(file_name), count=len(self.templates))

    @property
    def file_name(self) -> str | os.PathLike[str]:
        """Path of the file the templates were read from."""
        return self._file_name


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _validate_file_name(file_name: Any) -> None:
    if file_name is None:
        raise InvalidArgumentException("file name can't be blank")
    if not isinstance(file_name, (str, os.PathLike)):
        raise InvalidArgumentException(
            "file name is not a String or a path",
            context={"file_name": file_name},
        )
    if not os.fspath(file_name):
        raise InvalidArgumentException("file name can't be blank")


def _read_file(path: Path, file_name: str | os.PathLike[str]) -> str:
    if not path.is_file():
        raise FileException(
            f"templates file does not exist at {file_name}",
            context={"file_name": str(file_name)},
        )
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileException(
            f"unable to read templates file at {file_name} - {exc}",
            context={"file_name": str(file_name)},
        ) from exc


def _parse_json(raw_data: str) -> Any:
    if not raw_data.strip():
        return {}
    try:
        return json.loads(raw_data)
    except json.JSONDecodeError as exc:
        raise ParseException(f"unable to parse templates file - {exc}") from exc


def _parse_yaml(raw_data: str) -> Any:
    try:
        return yaml.safe_load(raw_data) or {}
    except yaml.YAMLError as exc:
        raise ParseException(f"unable to parse templates file - {exc}") from exc


_PARSERS: dict[str, Callable[[str], Any]] = {
    ".json": _parse_json,
    ".yaml": _parse_yaml,
    ".yml": _parse_yaml,
}


def _parse_templates(path: Path, raw_data: str) -> Any:
    parser = _PARSERS.get(path.suffix.lower())
    if parser is None:
        raise FileException(
            f"unable to read templates file - unrecognized extension {path.suffix!r}",
            context={"file_name": str(path)},
        )
    return parser(raw_data)
