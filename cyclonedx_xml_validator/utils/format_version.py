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

"""Schema version utilities for CycloneDX XML documents.

Every supported CycloneDX generation is a member of :class:`SchemaVersion`.
A member name such as ``v1_2`` derives everything else:

  * the dotted version string ``1.2``,
  * the document namespace ``http://cyclonedx.org/schema/bom/1.2``,
  * the primary schema resource ``bom-1.2.xsd``.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Tuple, Union

from ..exceptions import SchemaVersionError


NAMESPACE_PREFIX = "http://cyclonedx.org/schema/bom/"

# ---- version string → tuple ------------------------------------------------

_VERSION_RE = re.compile(r"^v?(\d+)[._](\d+)$")


class SchemaVersion(Enum):
    """Supported CycloneDX schema generations, oldest first."""

    v1_0 = "v1_0"
    v1_1 = "v1_1"
    v1_2 = "v1_2"
    v1_3 = "v1_3"

    @property
    def version_string(self) -> str:
        return self.name[1:].replace("_", ".")

    @property
    def namespace_uri(self) -> str:
        return f"{NAMESPACE_PREFIX}{self.version_string}"

    @property
    def schema_resource(self) -> str:
        return f"bom-{self.version_string}.xsd"

    @property
    def version_tuple(self) -> Tuple[int, int]:
        major, minor = self.version_string.split(".")
        return int(major), int(minor)

    def __lt__(self, other: "SchemaVersion") -> bool:
        if not isinstance(other, SchemaVersion):
            return NotImplemented
        return self.version_tuple < other.version_tuple

    def __le__(self, other: "SchemaVersion") -> bool:
        if not isinstance(other, SchemaVersion):
            return NotImplemented
        return self.version_tuple <= other.version_tuple

    def __str__(self) -> str:
        return self.version_string

    @classmethod
    def latest(cls) -> "SchemaVersion":
        return max(cls, key=lambda v: v.version_tuple)


def normalize_version_string(raw: Union[str, SchemaVersion]) -> str:
    """Normalize ``1.2``, ``v1.2`` or ``v1_2`` (or a member) to ``1.2``.

    Raises:
        SchemaVersionError: If the identifier cannot be parsed.
    """
    if isinstance(raw, SchemaVersion):
        return raw.version_string

    if not isinstance(raw, str):
        raise SchemaVersionError(
            f"Schema version must be a string or SchemaVersion, got {type(raw).__name__}: {raw!r}"
        )

    m = _VERSION_RE.match(raw.strip())
    if m is None:
        raise SchemaVersionError(
            f"Invalid schema version string: '{raw}'. "
            "Expected 'MAJOR.MINOR' (e.g. '1.2')."
        )
    return f"{int(m.group(1))}.{int(m.group(2))}"


def parse_schema_version(raw: Union[str, SchemaVersion]) -> SchemaVersion:
    """Parse a version identifier into a :class:`SchemaVersion` member.

    Raises:
        SchemaVersionError: If the identifier is malformed or not a supported generation.
    """
    if isinstance(raw, SchemaVersion):
        return raw

    version_string = normalize_version_string(raw)
    for member in SchemaVersion:
        if member.version_string == version_string:
            return member

    supported = ", ".join(v.version_string for v in SchemaVersion)
    raise SchemaVersionError(
        f"Unsupported CycloneDX schema version '{version_string}' (supported: {supported})."
    )
