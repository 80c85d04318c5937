"""
Content repository interfaces used by page components.

Components never talk to a content store directly. They receive resolved
resources, a resolver for referenced paths, the request and the render mode
through the protocols below. The dict-backed implementations serve local
rendering and tests.
"""

import logging
import posixpath
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone as dt_timezone
from typing import Any, Protocol

from django.core.handlers.wsgi import get_script_name
from django.utils import timezone
from django.utils.dateparse import parse_datetime

from . import config

logger = logging.getLogger(__name__)

# Render modes understood by components
RENDER_MODE_PUBLISH = "publish"
RENDER_MODE_EDIT = "edit"


class ValueMap(Mapping):
    """Read-only property map with typed lookups."""

    def __init__(self, data: Mapping[str, Any] | None = None):
        self._data = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self):
        return f"ValueMap({self._data!r})"

    def get_as(self, key: str, type_: type) -> Any:
        """
        Look up a property converted to the requested type.

        Supported types are str, bool, int and datetime. Strings are parsed
        for datetimes, numbers are read as epoch milliseconds.

        Args:
            key: Property name
            type_: Requested type

        Returns:
            The converted value, or None if the property is missing or
            cannot be converted
        """
        value = self._data.get(key)
        if value is None:
            return None

        if type_ is bool:
            if isinstance(value, str):
                return value.strip().lower() == "true"
            return bool(value)

        if type_ is datetime:
            return _to_datetime(value)

        if isinstance(value, type_):
            return value

        if type_ is str:
            if isinstance(value, bool):
                return "true" if value else "false"
            if isinstance(value, (datetime, date)):
                return value.isoformat()
            return str(value)

        if type_ is int:
            try:
                return int(value)
            except (TypeError, ValueError):
                return None

        return None


def _to_datetime(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=dt_timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        try:
            return parse_datetime(value.strip())
        except ValueError:
            return None
    return None


def to_epoch_millis(value: datetime) -> int:
    """Convert a datetime to epoch milliseconds, naive values in the current timezone."""
    if timezone.is_naive(value):
        value = timezone.make_aware(value)
    return int(value.timestamp() * 1000)


@dataclass
class Resource:
    """A node in the content repository."""

    path: str
    properties: ValueMap = field(default_factory=ValueMap)
    metadata: dict[str, Any] | None = None  # Set for assets only

    def __post_init__(self):
        if not isinstance(self.properties, ValueMap):
            self.properties = ValueMap(self.properties)

    @property
    def name(self) -> str:
        return posixpath.basename(self.path.rstrip("/"))

    @property
    def parent_path(self) -> str | None:
        return _parent_path(self.path)

    @property
    def is_asset(self) -> bool:
        return self.metadata is not None


class Asset:
    """A managed media item backed by a repository resource."""

    def __init__(self, resource: Resource):
        self.resource = resource
        self._metadata = resource.metadata or {}

    @property
    def path(self) -> str:
        return self.resource.path

    @property
    def name(self) -> str:
        return self.resource.name

    def get_metadata_value(self, key: str) -> str | None:
        """Return a metadata value as a string, or None if not set."""
        value = self._metadata.get(key)
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            value = ", ".join(str(item) for item in value)
        value = str(value)
        return value or None

    def __repr__(self):
        return f"Asset({self.path!r})"


class ResourceResolver(Protocol):
    """Resolves repository paths and assets."""

    def get_resource(self, path: str) -> Resource | None: ...

    def resolve_to_asset(self, resource: Resource) -> Asset | None: ...


class RequestContext(Protocol):
    def get_context_path(self) -> str: ...


class InMemoryResourceResolver:
    """Resource resolver over a dict of path -> Resource."""

    def __init__(self, resources: Iterable[Resource] = ()):
        self._resources: dict[str, Resource] = {}
        for resource in resources:
            self.add(resource)

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "InMemoryResourceResolver":
        """
        Build a resolver from plain data.

        Args:
            data: Mapping of path -> {"properties": {...}, "metadata": {...}};
                entries with a "metadata" key are assets
        """
        return cls(
            Resource(
                path=path,
                properties=node.get("properties") or {},
                metadata=node.get("metadata"),
            )
            for path, node in data.items()
        )

    def add(self, resource: Resource) -> Resource:
        self._resources[_normalize(resource.path)] = resource
        return resource

    def get_resource(self, path: str) -> Resource | None:
        if not path or not path.startswith("/"):
            return None
        return self._resources.get(_normalize(path))

    def resolve_to_asset(self, resource: Resource) -> Asset | None:
        """
        Resolve a resource to the asset it belongs to.

        An asset resolves to itself. Nodes below an asset (its content node,
        renditions) resolve to the closest ancestor asset.

        Returns:
            The Asset, or None if the resource is not part of an asset
        """
        if resource.is_asset:
            return Asset(resource)

        # Intermediate nodes need not be registered
        path = resource.parent_path
        while path is not None:
            node = self._resources.get(_normalize(path))
            if node is not None and node.is_asset:
                return Asset(node)
            path = _parent_path(path)

        logger.debug(f"Resource '{resource.path}' is not an asset")
        return None


def _normalize(path: str) -> str:
    return posixpath.normpath(path) if path else path


def _parent_path(path: str) -> str | None:
    if path in ("", "/"):
        return None
    return posixpath.dirname(path.rstrip("/")) or "/"


class DjangoRequestContext:
    """Request context backed by a Django HttpRequest."""

    def __init__(self, request):
        self.request = request

    def get_context_path(self) -> str:
        return get_script_name(self.request.META).rstrip("/")


@dataclass(frozen=True)
class StaticRequestContext:
    """Request context with a fixed context path."""

    context_path: str = ""

    def get_context_path(self) -> str:
        return self.context_path


@dataclass(frozen=True)
class RenderMode:
    """
    Page render mode.

    Anything but the published view counts as authoring. While authoring,
    the mode is disabled for URL cache busting.
    """

    mode: str = RENDER_MODE_PUBLISH

    def is_disabled(self) -> bool:
        return self.mode != RENDER_MODE_PUBLISH

    @classmethod
    def from_request(cls, request) -> "RenderMode":
        """Read the render mode from the request's query string."""
        mode = request.GET.get(config.RENDER_MODE_PARAM, "").strip()
        return cls((mode or config.DEFAULT_RENDER_MODE).lower())


def get_resource_resolver() -> InMemoryResourceResolver:
    """Return a resolver over the content configured in RETAIL_CONTENT."""
    return InMemoryResourceResolver.from_dict(config.CONTENT)
