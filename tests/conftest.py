import sys
from pathlib import Path
from textwrap import dedent

import pytest

# Ensure the package is importable when tests are run from a source checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from cyclonedx_xml_validator import (
    SchemaRegistry,
    SchemaVersion,
    ValidatorConfig,
    XmlBomValidator,
    set_default_registry,
)

# Condensed stand-ins for the published CycloneDX schemas
SCHEMA_FIXTURES = Path(__file__).resolve().parent / "fixtures" / "schemas"


COMPONENT = """\
    <component type="library">
      <publisher>Apache</publisher>
      <group>org.apache.tomcat</group>
      <name>tomcat-catalina</name>
      <version>9.0.14</version>
      <description>Apache Catalina</description>
      <scope>required</scope>
      <hashes>
        <hash alg="SHA-1">3942447fac867ae5cdb3229b658f4d48a4a6b4e4</hash>
      </hashes>
      <licenses>
        <license>
          <id>Apache-2.0</id>
        </license>
      </licenses>
      <purl>pkg:maven/org.apache.tomcat/tomcat-catalina@9.0.14</purl>
      <modified>false</modified>
    </component>
"""


def make_bom(version: SchemaVersion, components: str = COMPONENT, namespace: str = None, trailer: str = "") -> str:
    """Build a BOM document for *version*; line 1 is the XML declaration."""
    namespace = version.namespace_uri if namespace is None else namespace
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<bom xmlns="{namespace}" version="1">\n'
        "  <components>\n"
        f"{components}"
        "  </components>\n"
        f"{trailer}"
        "</bom>\n"
    )


@pytest.fixture
def registry() -> SchemaRegistry:
    return SchemaRegistry(ValidatorConfig(schema_dir=SCHEMA_FIXTURES))


@pytest.fixture
def default_registry(registry: SchemaRegistry):
    set_default_registry(registry)
    yield registry
    set_default_registry(None)


@pytest.fixture
def validator(registry: SchemaRegistry) -> XmlBomValidator:
    return XmlBomValidator(registry=registry)


@pytest.fixture(params=list(SchemaVersion), ids=lambda v: v.version_string)
def version(request) -> SchemaVersion:
    return request.param


@pytest.fixture
def valid_bom(version: SchemaVersion) -> str:
    return make_bom(version)


@pytest.fixture
def metadata_bom() -> str:
    return dedent(
        """\
        <?xml version="1.0" encoding="UTF-8"?>
        <bom xmlns="http://cyclonedx.org/schema/bom/1.3"
             serialNumber="urn:uuid:3e671687-395b-41f5-a30f-a58921a69b79" version="1">
          <metadata>
            <timestamp>2021-01-10T12:00:00Z</timestamp>
            <tools>
              <tool>
                <vendor>CycloneDX</vendor>
                <name>cyclonedx-xml-validator</name>
                <version>0.1.0</version>
              </tool>
            </tools>
            <component type="application" bom-ref="acme-app">
              <name>acme-app</name>
              <version>1.0.0</version>
            </component>
            <properties>
              <property name="build">42</property>
            </properties>
          </metadata>
          <components>
            <component type="library" bom-ref="pkg:pypi/lxml@4.6.3">
              <name>lxml</name>
              <version>4.6.3</version>
              <licenses>
                <expression>BSD-3-Clause</expression>
              </licenses>
              <purl>pkg:pypi/lxml@4.6.3</purl>
            </component>
          </components>
          <dependencies>
            <dependency ref="acme-app">
              <dependency ref="pkg:pypi/lxml@4.6.3"/>
            </dependency>
          </dependencies>
        </bom>
        """
    )
