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

"""In-memory representation of a parsed fzp part file."""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Property:
    """A single <property name="...">value</property> entry."""
    name: str
    value: str


@dataclass(frozen=True)
class Connector:
    id: str
    name: str = ""
    type: str = ""


@dataclass(frozen=True)
class Bus:
    id: str
    members: Tuple[str, ...] = ()


@dataclass(frozen=True)
class FzpRecord:
    """Parsed part description.

    Text fields missing from the file are stored as empty strings so the
    field checks only have to test for emptiness.
    """
    module_id: str = ""
    title: str = ""
    properties: Tuple[Property, ...] = ()

    fritzing_version: str = ""
    reference_file: str = ""
    version: str = ""
    description: str = ""
    author: str = ""
    date: str = ""
    url: str = ""
    label: str = ""
    taxonomy: str = ""
    tags: Tuple[str, ...] = ()
    views: Tuple[str, ...] = ()
    connectors: Tuple[Connector, ...] = ()
    buses: Tuple[Bus, ...] = ()

    @property
    def family(self) -> str:
        """Value of the 'family' property, matched case-insensitively."""
        value = self.get_property("family")
        return value if value is not None else ""

    def get_property(self, name: str) -> Optional[str]:
        wanted = name.lower()
        for prop in self.properties:
            if prop.name.lower() == wanted:
                return prop.value
        return None
