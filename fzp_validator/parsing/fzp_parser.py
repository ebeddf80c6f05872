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

"""Loader turning fzp (XML) files into FzpRecord instances."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Tuple, Union

from ..exceptions import RecordLoadError
from ..models.record import Bus, Connector, FzpRecord, Property

logger = logging.getLogger(__name__)

ROOT_TAG = "module"


def _text(element: Optional[ET.Element]) -> str:
    if element is None or element.text is None:
        return ""
    return element.text.strip()


def _attr(element: ET.Element, name: str) -> str:
    return (element.get(name) or "").strip()


class FzpParser:
    """Parser for fzp part description files."""

    def load(self, file_path: Union[str, Path]) -> FzpRecord:
        """Load an fzp file.

        Args:
            file_path: Path to the fzp file

        Returns:
            The parsed record

        Raises:
            RecordLoadError: If the file is missing, unreadable or not a
                well-formed <module> document
        """
        path = Path(file_path)

        if not path.exists():
            raise RecordLoadError(f"fzp file not found: {path}")

        if not path.is_file():
            raise RecordLoadError(f"Path is not a file: {path}")

        logger.debug(f"Loading fzp file: {path}")
        try:
            content = path.read_bytes()
        except OSError as e:
            raise RecordLoadError(f"Error reading fzp file {path}: {e}") from e

        return self.parse(content, source=str(path))

    def parse(self, content: Union[str, bytes], source: str = "<string>") -> FzpRecord:
        """Parse fzp document content into a record."""
        try:
            root = ET.fromstring(content)
        except (ET.ParseError, LookupError, ValueError) as e:
            raise RecordLoadError(f"Error parsing fzp file {source}: {e}") from e

        if root.tag != ROOT_TAG:
            raise RecordLoadError(
                f"Invalid fzp file {source}: expected root element <{ROOT_TAG}>, got <{root.tag}>"
            )

        return FzpRecord(
            module_id=_attr(root, "moduleId"),
            fritzing_version=_attr(root, "fritzingVersion"),
            reference_file=_attr(root, "referenceFile"),
            version=_text(root.find("version")),
            title=_text(root.find("title")),
            description=_text(root.find("description")),
            author=_text(root.find("author")),
            date=_text(root.find("date")),
            url=_text(root.find("url")),
            label=_text(root.find("label")),
            taxonomy=_text(root.find("taxonomy")),
            tags=tuple(_text(tag) for tag in root.findall("tags/tag")),
            properties=self._parse_properties(root),
            views=tuple(view.tag for view in root.findall("views/*")),
            connectors=tuple(
                Connector(
                    id=_attr(connector, "id"),
                    name=_attr(connector, "name"),
                    type=_attr(connector, "type"),
                )
                for connector in root.findall("connectors/connector")
            ),
            buses=self._parse_buses(root),
        )

    @staticmethod
    def _parse_properties(root: ET.Element) -> Tuple[Property, ...]:
        return tuple(
            Property(name=_attr(prop, "name"), value=_text(prop))
            for prop in root.findall("properties/property")
        )

    @staticmethod
    def _parse_buses(root: ET.Element) -> Tuple[Bus, ...]:
        buses = []
        for bus in root.findall("buses/bus"):
            members = tuple(
                _attr(member, "connectorId") for member in bus.findall("nodeMember")
            )
            buses.append(Bus(id=_attr(bus, "id"), members=members))
        return tuple(buses)


# Global parser instance
fzp_parser = FzpParser()
