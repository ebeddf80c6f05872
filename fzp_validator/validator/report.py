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

"""Result values produced by the validator."""

from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class CheckFailure:
    check: str
    reason: str


class ValidationResult:
    """Container for the check failures of a single record."""

    def __init__(self):
        self.failures: List[CheckFailure] = []

    def add_failure(self, check: str, reason: str) -> CheckFailure:
        """Add a failed check.

        Args:
            check: Name of the check that failed
            reason: Human-readable failure reason
        """
        failure = CheckFailure(check=check, reason=reason)
        self.failures.append(failure)
        return failure

    @property
    def failure_count(self) -> int:
        return len(self.failures)

    @property
    def passed(self) -> bool:
        return not self.failures


class FileError:
    """A per-file (or per-directory) validation error.

    Kinds:
        load: the file could not be loaded, no checks ran
        checks: one or more checks failed
        listing: the directory could not be listed
    """

    LOAD = 'load'
    CHECKS = 'checks'
    LISTING = 'listing'

    def __init__(self, path: Path, kind: str, message: str, failure_count: int = 1):
        self.path = Path(path)
        self.kind = kind
        self.message = message
        self.failure_count = failure_count

    @classmethod
    def load_failed(cls, path: Path, reason: str) -> 'FileError':
        return cls(path, cls.LOAD, f"validator failed @ {reason}")

    @classmethod
    def checks_failed(cls, path: Path, failure_count: int) -> 'FileError':
        return cls(path, cls.CHECKS, f"{failure_count} Errors @ {path}", failure_count)

    @classmethod
    def listing_failed(cls, path: Path) -> 'FileError':
        return cls(path, cls.LISTING, f"validator failed @ read folder '{path}'")

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"FileError(path={str(self.path)!r}, kind={self.kind!r}, failure_count={self.failure_count})"
