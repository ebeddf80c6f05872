"""Shared fixtures for the fzp validator tests."""

import logging
from pathlib import Path
from typing import Callable

import pytest

VALID_FZP = """<?xml version="1.0" encoding="UTF-8"?>
<module fritzingVersion="0.9.3b" moduleId="LEDModuleID">
  <version>4</version>
  <title>Red LED</title>
  <description>A generic red LED</description>
  <author>someone</author>
  <label>LED</label>
  <tags>
    <tag>LED</tag>
    <tag>light</tag>
  </tags>
  <properties>
    <property name="family">LED</property>
    <property name="color">Red (633nm)</property>
  </properties>
  <views>
    <breadboardView layers="breadboard"/>
    <schematicView layers="schematic"/>
  </views>
  <connectors>
    <connector id="connector0" name="cathode" type="male"/>
    <connector id="connector1" name="anode" type="male"/>
  </connectors>
  <buses>
    <bus id="internal">
      <nodeMember connectorId="connector0"/>
    </bus>
  </buses>
</module>
"""

# moduleId missing, one failure by default
MISSING_MODULE_ID_FZP = """<?xml version="1.0" encoding="UTF-8"?>
<module>
  <title>LED</title>
  <properties>
    <property name="color">red</property>
  </properties>
</module>
"""


@pytest.fixture(autouse=True)
def restore_root_logging():
    """The CLI reconfigures the root logger; undo that after each test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_fzp(tmp_path: Path) -> Callable[..., Path]:
    """Write a file under tmp_path and return its path."""
    def _write(name: str, content: str = VALID_FZP, directory: Path = None) -> Path:
        target_dir = directory if directory is not None else tmp_path
        target_dir.mkdir(parents=True, exist_ok=True)
        path = target_dir / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
