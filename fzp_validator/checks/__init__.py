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

"""Registry of the field checks known to the validator."""

from dataclasses import dataclass
from typing import Callable, List, Tuple

from ..models.record import FzpRecord
from .field_checks import (
    CheckOutcome,
    check_buses,
    check_connectors,
    check_description,
    check_family,
    check_fritzing_version,
    check_module_id,
    check_properties,
    check_reference_file,
    check_tags,
    check_title,
    check_version,
    check_views,
)


@dataclass(frozen=True)
class FieldCheck:
    """A named check.

    ``wired`` marks the checks the pipeline actually runs; the others are
    only exposed as configuration options.
    """
    name: str
    label: str
    func: Callable[[FzpRecord, object], CheckOutcome]
    wired: bool = False


# Order matches the command line options.
FIELD_CHECKS: Tuple[FieldCheck, ...] = (
    FieldCheck('fritzingversion', 'fritzingVersion', check_fritzing_version),
    FieldCheck('moduleid', 'moduleid', check_module_id, wired=True),
    FieldCheck('referencefile', 'referenceFile', check_reference_file),
    FieldCheck('version', '<version>', check_version),
    FieldCheck('title', '<title>', check_title, wired=True),
    FieldCheck('description', '<description>', check_description),
    FieldCheck('family', '<family>', check_family),
    FieldCheck('tags', '<tags>', check_tags),
    FieldCheck('properties', '<properties>', check_properties, wired=True),
    FieldCheck('views', '<views>', check_views),
    FieldCheck('connectors', '<connectors>', check_connectors),
    FieldCheck('buses', '<buses>', check_buses),
)

CHECK_NAMES: Tuple[str, ...] = tuple(check.name for check in FIELD_CHECKS)


def get_wired_checks() -> List[FieldCheck]:
    """Return the checks the pipeline runs, in execution order."""
    return [check for check in FIELD_CHECKS if check.wired]


__all__ = ['CHECK_NAMES', 'FIELD_CHECKS', 'CheckOutcome', 'FieldCheck', 'get_wired_checks']
