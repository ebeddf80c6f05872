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

"""Check configuration for the fzp validator."""

import json
import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Union

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError as SchemaValidationError

from .checks import CHECK_NAMES
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'FZP_VALIDATOR_CONFIG'

_SCHEMA_PATH = Path(__file__).parent / "schema" / "config.json"
_SCHEMA_CACHE: Dict[str, dict] = {}


def load_config_schema() -> dict:
    """Load the bundled JSON Schema for configuration files."""
    key = str(_SCHEMA_PATH)
    if key not in _SCHEMA_CACHE:
        with open(_SCHEMA_PATH, "r", encoding="utf-8") as f:
            _SCHEMA_CACHE[key] = json.load(f)
    return _SCHEMA_CACHE[key]


@dataclass(frozen=True)
class CheckConfig:
    """Flags controlling which checks run.

    Every ``no_check_<name>`` flag defaults to False, so all checks are
    enabled unless explicitly disabled.
    """
    no_check_fritzingversion: bool = False
    no_check_moduleid: bool = False
    no_check_referencefile: bool = False
    no_check_version: bool = False
    no_check_title: bool = False
    no_check_description: bool = False
    no_check_family: bool = False
    no_check_tags: bool = False
    no_check_properties: bool = False
    no_check_views: bool = False
    no_check_connectors: bool = False
    no_check_buses: bool = False

    strict_properties: bool = False
    verbose: bool = False

    def is_disabled(self, check_name: str) -> bool:
        if check_name not in CHECK_NAMES:
            raise ConfigurationError(f"Unknown check: '{check_name}'")
        flag = f"no_check_{check_name}"
        return bool(getattr(self, flag))

    def disabled_checks(self):
        return [name for name in CHECK_NAMES if self.is_disabled(name)]

    def with_overrides(
        self,
        disabled: Iterable[str] = (),
        strict_properties: Optional[bool] = None,
        verbose: Optional[bool] = None,
    ) -> 'CheckConfig':
        """Return a copy with extra checks disabled and optional knobs set.

        Overrides only ever disable checks; a check already disabled on
        this instance stays disabled.
        """
        changes: Dict[str, Any] = {}
        for name in disabled:
            if name not in CHECK_NAMES:
                raise ConfigurationError(f"Unknown check: '{name}'")
            changes[f"no_check_{name}"] = True
        if strict_properties is not None:
            changes['strict_properties'] = strict_properties
        if verbose is not None:
            changes['verbose'] = verbose
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Any, source: str = "<config>") -> 'CheckConfig':
        """Create configuration from a mapping validated against the schema."""
        if data is None:
            data = {}
        try:
            jsonschema.validate(instance=data, schema=load_config_schema())
        except SchemaValidationError as e:
            path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else "/"
            raise ConfigurationError(f"Invalid configuration {source} at {path}: {e.message}") from e

        return cls().with_overrides(
            disabled=data.get('disabled_checks', []),
            strict_properties=data.get('strict_properties'),
            verbose=data.get('verbose'),
        )

    @classmethod
    def from_yaml(cls, file_path: Union[str, Path]) -> 'CheckConfig':
        """Create configuration from a YAML file."""
        path = Path(file_path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")

        logger.debug(f"Loading configuration file: {path}")
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML file {path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Error reading configuration file {path}: {e}") from e

        return cls.from_dict(data, source=str(path))

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> 'CheckConfig':
        """Create configuration from the file named by FZP_VALIDATOR_CONFIG, if set."""
        environ = os.environ if environ is None else environ
        config_path = environ.get(CONFIG_ENV_VAR)
        if not config_path:
            return cls()
        return cls.from_yaml(config_path)


CHECK_FLAG_NAMES = tuple(f.name for f in fields(CheckConfig) if f.name.startswith("no_check_"))
