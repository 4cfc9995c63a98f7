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

"""XML Schema registry for CycloneDX BOM validation."""

import logging
import threading
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union

from lxml import etree

from ..config import ValidatorConfig, default_config
from ..exceptions import ResourceLoadError, SchemaVersionError
from ..schema import SCHEMA_RESOURCES, SHARED_SCHEMA_ALIASES, SHARED_SCHEMA_RESOURCES
from ..utils.format_version import SchemaVersion, normalize_version_string

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SchemaSet:
    """Compiled primary schema plus the shared schemas it imports, for one version.

    ``shared_schemas`` holds the shared schemas compiled at load time. They are
    kept for inspection; validation goes through ``schema`` alone.
    """

    version: SchemaVersion
    schema: etree.XMLSchema
    shared_schemas: Tuple[etree.XMLSchema, ...] = ()
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    @property
    def namespace_uri(self) -> str:
        return self.version.namespace_uri

    def check(self, tree: etree._ElementTree) -> List[etree._LogEntry]:
        """Validate *tree* and return the schema violations in encounter order."""
        # XMLSchema keeps its error log on the instance
        with self._lock:
            self.schema.validate(tree)
            return list(self.schema.error_log)


class _SharedSchemaResolver(etree.Resolver):
    """Serve xs:import requests for shared schemas from memory."""

    def __init__(self, shared: Mapping[str, bytes]):
        super().__init__()
        self._shared = shared

    def resolve(self, url, pubid, context):
        if not url:
            return None
        name = SHARED_SCHEMA_ALIASES.get(url)
        if name is None:
            name = url.rstrip("/").rsplit("/", 1)[-1]
            if name not in self._shared and f"{name}.xsd" in self._shared:
                name = f"{name}.xsd"
        if name in self._shared:
            logger.debug(f"Resolving schema import {url} to shared schema {name}")
            return self.resolve_string(self._shared[name], context)
        return None


def _schema_parser(resolver: Optional[etree.Resolver] = None) -> etree.XMLParser:
    parser = etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)
    if resolver is not None:
        parser.resolvers.add(resolver)
    return parser


class SchemaRegistry:
    """Resolve schema versions to compiled schema sets.

    Schema sets are loaded on first use and cached for the lifetime of the
    registry. Each version key has its own lock so that concurrent first
    access compiles a schema set only once.
    """

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        resources: Optional[Mapping[SchemaVersion, bytes]] = None,
        shared_resources: Optional[Mapping[str, bytes]] = None,
    ):
        """Initialize the registry.

        Args:
            config: Validator configuration. Reads the package schema directory if None.
            resources: Primary schema content per version, instead of files in the schema directory.
            shared_resources: Shared schema content by file name, instead of files in the schema directory.
        """
        self.config = config or default_config
        self._resources = dict(resources) if resources is not None else None
        self._shared_resources = dict(shared_resources) if shared_resources is not None else None

        self._cache: Dict[SchemaVersion, SchemaSet] = {}
        self._locks: Dict[SchemaVersion, threading.Lock] = {}
        self._guard = threading.Lock()

        self._shared_content: Optional[Dict[str, bytes]] = None
        self._shared_schemas: Optional[Tuple[etree.XMLSchema, ...]] = None

    # ---- resource access ------------------------------------------------------

    def _read_resource(self, name: str) -> bytes:
        path = self.config.schema_dir / name
        try:
            return path.read_bytes()
        except OSError as e:
            logger.error(f"Schema resource {name} could not be read from {path}: {e}")
            raise ResourceLoadError(f"Schema resource not found: {name} ({path})") from e

    def _primary_content(self, version: SchemaVersion) -> bytes:
        if self._resources is not None:
            if version not in self._resources:
                logger.error(f"No schema resource registered for CycloneDX {version}")
                raise ResourceLoadError(f"No schema registered for CycloneDX version {version}")
            return self._resources[version]

        if version not in SCHEMA_RESOURCES:
            logger.error(f"No schema resource registered for CycloneDX {version}")
            raise ResourceLoadError(f"No schema registered for CycloneDX version {version}")
        return self._read_resource(SCHEMA_RESOURCES[version])

    def _load_shared(self) -> Tuple[Dict[str, bytes], Tuple[etree.XMLSchema, ...]]:
        # Called with self._guard held
        if self._shared_content is not None and self._shared_schemas is not None:
            return self._shared_content, self._shared_schemas

        content: Dict[str, bytes] = {}
        for name in SHARED_SCHEMA_RESOURCES:
            if self._shared_resources is not None:
                if name not in self._shared_resources:
                    logger.error(f"Shared schema resource {name} is not registered")
                    raise ResourceLoadError(f"Shared schema resource not found: {name}")
                content[name] = self._shared_resources[name]
            else:
                content[name] = self._read_resource(name)

        # Compiled standalone: a broken shared schema fails here under its own name.
        # Validation uses only the primary schema, which imports the shared content.
        schemas = tuple(self._compile(name, data) for name, data in content.items())
        logger.debug(f"Loaded shared schemas: {', '.join(content)}")

        self._shared_content = content
        self._shared_schemas = schemas
        return content, schemas

    @staticmethod
    def _compile(name: str, data: bytes, resolver: Optional[etree.Resolver] = None) -> etree.XMLSchema:
        if isinstance(data, str):
            data = data.encode("utf-8")
        try:
            schema_root = etree.fromstring(data, _schema_parser(resolver), base_url=name)
            return etree.XMLSchema(schema_root)
        except etree.XMLSyntaxError as e:
            logger.error(f"Schema resource {name} is not well-formed: {e}")
            raise ResourceLoadError(f"Invalid XML in schema resource {name}: {e}") from e
        except etree.XMLSchemaParseError as e:
            logger.error(f"Schema resource {name} failed to compile: {e}")
            raise ResourceLoadError(f"Invalid schema in resource {name}: {e}") from e

    # ---- public API -----------------------------------------------------------

    def _coerce_version(self, version: Union[SchemaVersion, str]) -> SchemaVersion:
        if isinstance(version, SchemaVersion):
            return version

        try:
            version_string = normalize_version_string(version)
        except SchemaVersionError as e:
            logger.error(f"Unknown CycloneDX schema version requested: {version!r}")
            raise ResourceLoadError(f"Unknown CycloneDX schema version: {version!r}") from e

        for member in SchemaVersion:
            if member.version_string == version_string:
                return member

        logger.error(f"Unknown CycloneDX schema version requested: {version!r}")
        raise ResourceLoadError(f"No schema registered for CycloneDX version {version_string}")

    def _version_lock(self, version: SchemaVersion) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(version)
            if lock is None:
                lock = self._locks[version] = threading.Lock()
            return lock

    def resolve(self, version: Union[SchemaVersion, str]) -> SchemaSet:
        """Return the compiled schema set for *version*.

        Raises:
            ResourceLoadError: If the version is unknown or its schema resources
                cannot be located or compiled.
        """
        version = self._coerce_version(version)

        cached = self._cache.get(version)
        if cached is not None:
            return cached

        with self._version_lock(version):
            cached = self._cache.get(version)
            if cached is not None:
                return cached

            logger.debug(f"Loading schema set for CycloneDX {version}")
            data = self._primary_content(version)
            with self._guard:
                shared_content, shared_schemas = self._load_shared()

            schema = self._compile(
                SCHEMA_RESOURCES.get(version, version.schema_resource),
                data,
                _SharedSchemaResolver(shared_content),
            )
            schema_set = SchemaSet(version=version, schema=schema, shared_schemas=shared_schemas)
            self._cache[version] = schema_set
            return schema_set

    def preload(self, versions: Optional[Iterable[Union[SchemaVersion, str]]] = None) -> None:
        """Resolve the given versions (all supported versions if None) eagerly."""
        for version in versions if versions is not None else SchemaVersion:
            self.resolve(version)

    def is_loaded(self, version: SchemaVersion) -> bool:
        return version in self._cache

    def clear_cache(self) -> None:
        """Clear the schema cache. Useful for testing."""
        with self._guard:
            self._cache.clear()
            self._shared_content = None
            self._shared_schemas = None


_default_registry: Optional[SchemaRegistry] = None
_default_registry_lock = threading.Lock()


def get_default_registry() -> SchemaRegistry:
    """Return the process-wide registry (created on first use from the default config)."""
    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = SchemaRegistry()
        return _default_registry


def set_default_registry(registry: Optional[SchemaRegistry]) -> None:
    """Replace the process-wide registry, e.g. with one reading a deployed schema directory.

    Passing None resets it; the next :func:`get_default_registry` creates a new one.
    """
    global _default_registry
    with _default_registry_lock:
        _default_registry = registry
