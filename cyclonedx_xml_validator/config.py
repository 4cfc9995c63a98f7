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

"""Configuration for schema loading and document parsing."""

from dataclasses import dataclass, field
from pathlib import Path

from .schema import SCHEMA_DIR


@dataclass(frozen=True)
class ValidatorConfig:
    """Configuration shared by the schema registry and the validator."""
    # directory holding the published bom-X.Y.xsd and shared schemas
    schema_dir: Path = field(default=SCHEMA_DIR)

    # lift libxml2's depth/size limits for very large BOMs
    huge_tree: bool = False

    # compare the root namespace against the requested version
    check_namespace: bool = True


default_config = ValidatorConfig()
