"""Location and layout of the CycloneDX XML schemas.

No schema content ships with this package. The published CycloneDX schemas
(``bom-1.0.xsd`` ... ``bom-1.3.xsd`` and ``spdx.xsd``) are placed in this
directory when the package is built, or supplied at runtime through
``ValidatorConfig(schema_dir=...)`` or the ``resources`` arguments of
:class:`~cyclonedx_xml_validator.models.schema_loader.SchemaRegistry`.

The tables below map each :class:`SchemaVersion` to its primary schema file and
list the shared schemas that every primary schema imports.
"""

from pathlib import Path
from typing import Dict, Tuple

from ..utils.format_version import SchemaVersion


SCHEMA_DIR = Path(__file__).parent

SCHEMA_RESOURCES: Dict[SchemaVersion, str] = {
    version: version.schema_resource for version in SchemaVersion
}

SHARED_SCHEMA_RESOURCES: Tuple[str, ...] = ("spdx.xsd",)

# schemaLocation values used by xs:import in the primary schemas
SHARED_SCHEMA_ALIASES: Dict[str, str] = {
    "http://cyclonedx.org/schema/spdx": "spdx.xsd",
}
