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

"""Validation package for fzp part files."""

from pathlib import Path
from typing import List, Optional, Union

from ..config import CheckConfig
from .file_validator import FZP_EXTENSION, FileValidator, is_fzp_file
from .pipeline import CheckPipeline
from .report import CheckFailure, FileError, ValidationResult

__all__ = [
    'CheckFailure',
    'CheckPipeline',
    'FZP_EXTENSION',
    'FileError',
    'FileValidator',
    'ValidationResult',
    'is_fzp_file',
    'validate_all',
    'validate_file',
]


def validate_file(file_path: Union[str, Path], config: Optional[CheckConfig] = None) -> Optional[FileError]:
    """Validate a single fzp file, printing failures to stdout."""
    return FileValidator(config).validate(file_path)


def validate_all(dir_path: Union[str, Path], config: Optional[CheckConfig] = None) -> List[FileError]:
    """Validate every fzp file in a directory, printing failures to stdout."""
    return FileValidator(config).validate_directory(dir_path)
