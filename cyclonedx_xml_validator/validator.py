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

"""Schema and namespace validation of CycloneDX XML documents."""

from __future__ import annotations

import logging
from typing import Optional, Union

from lxml import etree

from .config import ValidatorConfig
from .models.diagnostics import Diagnostic, DiagnosticCollector, DiagnosticKind
from .models.result import ValidationResult
from .models.schema_loader import SchemaRegistry, SchemaSet, get_default_registry
from .utils.format_version import SchemaVersion

logger = logging.getLogger(__name__)

Document = Union[str, bytes]


class XmlBomValidator:
    """Validate CycloneDX XML documents against the schema of a given version."""

    def __init__(self, registry: Optional[SchemaRegistry] = None, config: Optional[ValidatorConfig] = None):
        if registry is None:
            registry = SchemaRegistry(config) if config is not None else get_default_registry()
        self.registry = registry
        self.config = config or registry.config

    def _document_parser(self, encoding: Optional[str] = None) -> etree.XMLParser:
        return etree.XMLParser(
            encoding=encoding,
            resolve_entities=False,
            no_network=True,
            load_dtd=False,
            recover=False,
            huge_tree=self.config.huge_tree,
        )

    def validate(self, document: Document, version: Union[SchemaVersion, str]) -> ValidationResult:
        """Validate *document* against the schema set of *version*.

        Document defects are returned as messages of the result and never raised.

        Raises:
            ResourceLoadError: If the schema set for *version* cannot be loaded.
        """
        schema_set = self.registry.resolve(version)
        collector = DiagnosticCollector()

        tree = self._parse(document, collector)
        if tree is not None:
            self._check(tree, schema_set, collector)

        result = collector.to_result()
        logger.debug(
            f"Validated document against CycloneDX {schema_set.version}: "
            f"{len(result.messages)} issue(s)"
        )
        return result

    @staticmethod
    def _encode(document: str, collector: DiagnosticCollector) -> Optional[bytes]:
        try:
            return document.encode("utf-8")
        except UnicodeEncodeError as e:
            line = document.count("\n", 0, e.start) + 1
            column = e.start - (document.rfind("\n", 0, e.start) + 1) + 1
            collector.add_error(
                f"Character {document[e.start]!r} cannot be encoded as UTF-8: {e.reason}",
                line=line,
                column=column,
                kind=DiagnosticKind.WELL_FORMEDNESS,
            )
            return None

    def _parse(self, document: Document, collector: DiagnosticCollector) -> Optional[etree._ElementTree]:
        if isinstance(document, str):
            data = self._encode(document, collector)
            if data is None:
                return None
            # the text is already decoded, so any declared encoding no longer applies
            parser = self._document_parser(encoding="utf-8")
        else:
            data = bytes(document)
            parser = self._document_parser()

        try:
            root = etree.fromstring(data, parser)
        except etree.XMLSyntaxError as e:
            errors = [
                entry for entry in parser.error_log
                if entry.level >= etree.ErrorLevels.ERROR
            ]
            if errors:
                collector.extend(
                    Diagnostic.from_log_entry(entry, kind=DiagnosticKind.WELL_FORMEDNESS)
                    for entry in errors
                )
            else:
                line, column = e.position if e.position else (None, None)
                collector.add(
                    Diagnostic(
                        message=e.msg or "Document is empty",
                        line=line if line and line > 0 else None,
                        column=column if column and column > 0 else None,
                        kind=DiagnosticKind.WELL_FORMEDNESS,
                    )
                )
            return None

        return root.getroottree()

    def _check(self, tree: etree._ElementTree, schema_set: SchemaSet, collector: DiagnosticCollector) -> None:
        root = tree.getroot()
        expected = schema_set.namespace_uri
        actual = etree.QName(root).namespace or ""

        # A root outside the version namespace has no declaration in the schema
        if self.config.check_namespace and actual != expected:
            collector.add_error(
                f"Invalid namespace URI: expected {expected} actual {actual}",
                kind=DiagnosticKind.NAMESPACE,
            )
            return

        # Entities are never expanded and libxml2 cannot validate unexpanded references
        entities = list(root.iter(etree.Entity))
        if entities:
            for entity in entities:
                collector.add_error(
                    f"Entity reference '&{entity.name};' is not expanded and cannot be validated",
                    line=entity.sourceline,
                )
            return

        try:
            entries = schema_set.check(tree)
        except etree.XMLSchemaValidateError as e:
            collector.add_error(f"Schema validation aborted: {e}")
            return

        collector.extend(Diagnostic.from_log_entry(entry) for entry in entries)


def validate(document: Document, version: Union[SchemaVersion, str]) -> ValidationResult:
    """Validate *document* using the default schema registry.

    Raises:
        ResourceLoadError: If the schema set for *version* cannot be loaded.
    """
    return XmlBomValidator(registry=get_default_registry()).validate(document, version)
