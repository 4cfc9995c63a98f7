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

"""Validation of CycloneDX XML bills of materials against the published schemas."""

from .config import ValidatorConfig
from .exceptions import CycloneDXValidatorError, ResourceLoadError, SchemaVersionError
from .models.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from .models.result import ValidationResult
from .models.schema_loader import SchemaRegistry, SchemaSet, get_default_registry, set_default_registry
from .utils.format_version import SchemaVersion, parse_schema_version
from .validator import XmlBomValidator, validate

__all__ = [
    'CycloneDXValidatorError',
    'Diagnostic',
    'DiagnosticCollector',
    'DiagnosticKind',
    'ResourceLoadError',
    'SchemaRegistry',
    'SchemaSet',
    'SchemaVersion',
    'SchemaVersionError',
    'ValidationResult',
    'ValidatorConfig',
    'XmlBomValidator',
    'get_default_registry',
    'parse_schema_version',
    'set_default_registry',
    'validate',
]
