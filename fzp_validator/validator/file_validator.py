# Copyright 2026 TIER IV, inc.
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

"""File and directory validation for fzp files."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from ..config import CheckConfig
from ..exceptions import RecordLoadError
from ..parsing.fzp_parser import FzpParser, fzp_parser
from .pipeline import CheckPipeline, Emitter
from .report import FileError

logger = logging.getLogger(__name__)

FZP_EXTENSION = '.fzp'


def is_fzp_file(path: Path) -> bool:
    """Return True for regular files with the exact '.fzp' suffix."""
    return path.suffix == FZP_EXTENSION and path.is_file()


class FileValidator:
    """Validates single fzp files or every fzp file in a directory.

    Failures are returned as FileError values; nothing is raised for
    malformed input or unreadable paths.
    """

    def __init__(
        self,
        config: Optional[CheckConfig] = None,
        loader: Optional[FzpParser] = None,
        emit: Emitter = print,
    ):
        self.config = config if config is not None else CheckConfig()
        self.loader = loader if loader is not None else fzp_parser
        self.emit = emit
        self.pipeline = CheckPipeline(self.config, emit=emit)

    def _log(self, message: str) -> None:
        if self.config.verbose:
            logger.info(message)

    def validate(self, file_path: Union[str, Path]) -> Optional[FileError]:
        """Validate one fzp file.

        Args:
            file_path: Path to the fzp file

        Returns:
            None if the file is valid, otherwise the FileError describing
            the load failure or the number of failed checks
        """
        path = Path(file_path)
        try:
            record = self.loader.load(path)
        except RecordLoadError as e:
            error = FileError.load_failed(path, str(e))
            self.emit(str(error))
            return error

        self._log(f"fzp file '{path}' successful read")

        result = self.pipeline.run(record)
        if result.failure_count:
            return FileError.checks_failed(path, result.failure_count)

        self._log("fzp valid")
        return None

    def validate_directory(self, dir_path: Union[str, Path]) -> List[FileError]:
        """Validate every fzp file directly inside a directory.

        Entries are visited in name order. Subdirectories and files with
        other extensions are skipped. A directory that cannot be listed
        yields a single error and no file is validated.
        """
        path = Path(dir_path)
        self._log(f"read folder '{path}'")

        try:
            entries = sorted(path.iterdir(), key=lambda entry: entry.name)
        except OSError as e:
            logger.debug(f"Failed to list directory {path}: {e}")
            error = FileError.listing_failed(path)
            self.emit(str(error))
            return [error]

        errors: List[FileError] = []
        for entry in entries:
            if not is_fzp_file(entry):
                continue
            error = self.validate(entry)
            if error is not None:
                errors.append(error)
                if error.kind == FileError.CHECKS:
                    self.emit(str(error))
                self.emit("")
        return errors
