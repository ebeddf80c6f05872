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

"""Field checks run against a loaded fzp record.

Each check inspects one field and returns a CheckOutcome. Checks never
mutate the record and never depend on each other's outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..models.record import FzpRecord

if TYPE_CHECKING:
    from ..config import CheckConfig


@dataclass(frozen=True)
class CheckOutcome:
    passed: bool
    reason: str = ""

    @classmethod
    def ok(cls) -> "CheckOutcome":
        return cls(passed=True)

    @classmethod
    def fail(cls, reason: str) -> "CheckOutcome":
        return cls(passed=False, reason=reason)


def check_module_id(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    if not record.module_id:
        return CheckOutcome.fail("Missing moduleId")
    return CheckOutcome.ok()


def check_title(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    if not record.title:
        return CheckOutcome.fail("Missing <title>")
    return CheckOutcome.ok()


def check_properties(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    """Require at least one property.

    With ``strict_properties`` enabled, every property must also carry a
    name and a value; all offending entries are reported in one failure.
    """
    if not record.properties:
        return CheckOutcome.fail("Missing <properties>")

    if config.strict_properties:
        incomplete = []
        for index, prop in enumerate(record.properties):
            if not prop.name:
                incomplete.append(f"#{index} (missing name)")
            elif not prop.value:
                incomplete.append(f"'{prop.name}' (missing value)")
        if incomplete:
            return CheckOutcome.fail(f"Incomplete <property> entries: {', '.join(incomplete)}")

    return CheckOutcome.ok()


# The checks below exist only as configuration options. They are not
# enforced and always pass.

def check_fritzing_version(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_reference_file(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_version(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_description(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_family(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_tags(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_views(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_connectors(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()


def check_buses(record: FzpRecord, config: CheckConfig) -> CheckOutcome:
    return CheckOutcome.ok()
