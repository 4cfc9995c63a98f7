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

"""Custom exceptions for the CycloneDX XML validator.

Only environmental problems are raised. Defects in the validated document are
reported through :class:`~cyclonedx_xml_validator.models.result.ValidationResult`.
"""


class CycloneDXValidatorError(Exception):
    """Base exception for validator related errors."""
    pass


class ResourceLoadError(CycloneDXValidatorError):
    """Exception raised when a schema set cannot be located or compiled."""
    pass


class SchemaVersionError(CycloneDXValidatorError, ValueError):
    """Exception raised for a malformed or unsupported schema version identifier."""
    pass
