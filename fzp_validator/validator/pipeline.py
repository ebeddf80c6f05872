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

"""Runs the enabled field checks against one record."""

import logging
from typing import Callable, List, Optional

from ..checks import FieldCheck, get_wired_checks
from ..config import CheckConfig
from ..models.record import FzpRecord
from .report import ValidationResult

logger = logging.getLogger(__name__)

Emitter = Callable[[str], None]


class CheckPipeline:
    """Ordered, configurable set of checks run against a record."""

    def __init__(
        self,
        config: Optional[CheckConfig] = None,
        emit: Emitter = print,
        checks: Optional[List[FieldCheck]] = None,
    ):
        """Initialize the pipeline.

        Args:
            config: Check configuration, defaults to all checks enabled
            emit: Callable receiving each failure line as it is found
            checks: Checks to run, defaults to the wired checks
        """
        self.config = config if config is not None else CheckConfig()
        self.emit = emit
        self.checks = checks if checks is not None else get_wired_checks()

    def run(self, record: FzpRecord) -> ValidationResult:
        result = ValidationResult()
        for check in self.checks:
            if self.config.is_disabled(check.name):
                logger.debug(f"Skipping disabled check '{check.name}'")
                continue

            outcome = check.func(record, self.config)
            if not outcome.passed:
                result.add_failure(check.name, outcome.reason)
                self.emit(f"=> {outcome.reason}")
        return result
