"""Data models for content, labels and paginated listings.

Every model converts to and from the REST wire shape through ``to_api`` /
``from_api``. ``from_api`` raises TypeError when a field has the wrong JSON
type; the decoder turns that into DecodingError.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List


def _get_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"field '{key}' must be a string, got {type(value).__name__}")
    return value


def _get_int(data: Dict[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key, default)
    if value is None:
        return default
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"field '{key}' must be an integer, got {type(value).__name__}")
    return value


def _get_dict(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TypeError(f"field '{key}' must be an object, got {type(value).__name__}")
    return value


def _get_list(data: Dict[str, Any], key: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"field '{key}' must be an array, got {type(value).__name__}")
    return value


def _require_dict(value: Any, what: str) -> Dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what} must be an object, got {type(value).__name__}")
    return value


@dataclass
class Storage:
    """Page body in a given representation (usually ``storage`` XHTML)."""
    value: str = ""
    representation: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Storage":
        return cls(
            value=_get_str(data, "value"),
            representation=_get_str(data, "representation"),
        )

    def to_api(self) -> Dict[str, Any]:
        return {"value": self.value, "representation": self.representation}


@dataclass
class Body:
    """Content body wrapper."""
    storage: Storage = field(default_factory=Storage)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Body":
        return cls(storage=Storage.from_api(_get_dict(data, "storage")))

    def is_empty(self) -> bool:
        return not self.storage.value and not self.storage.representation

    def to_api(self) -> Dict[str, Any]:
        return {"storage": self.storage.to_api()}


@dataclass
class Version:
    """Content version; the server increments it on every update."""
    number: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Version":
        return cls(number=_get_int(data, "number"))

    def to_api(self) -> Dict[str, Any]:
        return {"number": self.number}


@dataclass
class Ancestor:
    """Reference to a parent page."""
    id: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Ancestor":
        return cls(id=_get_str(_require_dict(data, "ancestor"), "id"))

    def to_api(self) -> Dict[str, Any]:
        return {"id": self.id} if self.id else {}


@dataclass
class Space:
    """Reference to the space a page lives in."""
    key: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Space":
        return cls(key=_get_str(data, "key"))

    def to_api(self) -> Dict[str, Any]:
        return {"key": self.key} if self.key else {}


@dataclass
class Content:
    """A single page (or other content item) in the remote system.

    An empty ``id`` means the content has not been created yet. The
    ``label_prefix``/``label_name`` pair is only set when the structure is
    used as the payload of an add-label call. ``attachments`` holds local
    file paths for an upload; it is never sent as JSON and is ignored when
    comparing two Content values.

    Attributes:
        id: Server-assigned identifier ("" before creation)
        type: Content type tag (e.g., "page")
        status: Status tag (e.g., "current")
        title: Page title
        body: Body in storage representation
        version: Version number (required for updates)
        ancestors: Parent page references, root first
        space: Space the content belongs to
        label_prefix: Label prefix for add-label payloads
        label_name: Label name for add-label payloads
        attachments: Local file paths to upload
    """
    id: str = ""
    type: str = ""
    status: str = ""
    title: str = ""
    body: Body = field(default_factory=Body)
    version: Version = field(default_factory=Version)
    ancestors: List[Ancestor] = field(default_factory=list)
    space: Space = field(default_factory=Space)
    label_prefix: str = ""
    label_name: str = ""
    attachments: List[str] = field(default_factory=list, compare=False)

    @classmethod
    def for_label(cls, content_id: str, name: str, prefix: str = "global") -> "Content":
        """Build an add-label payload for the content with ``content_id``."""
        return cls(id=content_id, label_prefix=prefix, label_name=name)

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Content":
        data = _require_dict(data, "content")
        return cls(
            id=_get_str(data, "id"),
            type=_get_str(data, "type"),
            status=_get_str(data, "status"),
            title=_get_str(data, "title"),
            body=Body.from_api(_get_dict(data, "body")),
            version=Version.from_api(_get_dict(data, "version")),
            ancestors=[Ancestor.from_api(a) for a in _get_list(data, "ancestors")],
            space=Space.from_api(_get_dict(data, "space")),
            label_prefix=_get_str(data, "prefix"),
            label_name=_get_str(data, "name"),
        )

    def to_api(self) -> Dict[str, Any]:
        """Convert to the request JSON shape, omitting empty fields."""
        result: Dict[str, Any] = {}
        for key, value in (("id", self.id), ("type", self.type),
                           ("status", self.status), ("title", self.title)):
            if value:
                result[key] = value
        if not self.body.is_empty():
            result["body"] = self.body.to_api()
        if self.version.number:
            result["version"] = self.version.to_api()
        if self.ancestors:
            result["ancestors"] = [a.to_api() for a in self.ancestors]
        if self.space.key:
            result["space"] = self.space.to_api()
        if self.label_prefix:
            result["prefix"] = self.label_prefix
        if self.label_name:
            result["name"] = self.label_name
        return result


@dataclass
class Label:
    """A tag attached to a piece of content."""
    name: str
    prefix: str = ""
    id: str = ""

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "Label":
        data = _require_dict(data, "label")
        return cls(
            name=_get_str(data, "name"),
            prefix=_get_str(data, "prefix"),
            id=_get_str(data, "id"),
        )

    def to_api(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"name": self.name}
        if self.prefix:
            result["prefix"] = self.prefix
        return result


def _envelope_fields(data: Any) -> Dict[str, Any]:
    data = _require_dict(data, "result envelope")
    if "results" not in data:
        raise TypeError("result envelope has no 'results' field")
    results = _get_list(data, "results")
    # Older servers spell the page-size field "limt"
    limit_key = "limit" if "limit" in data or "limt" not in data else "limt"
    return {
        "results": results,
        "start": _get_int(data, "start"),
        "limit": _get_int(data, limit_key),
        "size": _get_int(data, "size", default=len(results)),
    }


@dataclass
class PageResult:
    """One window of a child-page listing."""
    results: List[Content]
    start: int = 0
    limit: int = 0
    size: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PageResult":
        fields = _envelope_fields(data)
        fields["results"] = [Content.from_api(item) for item in fields["results"]]
        return cls(**fields)


@dataclass
class LabelResult:
    """One window of a label listing."""
    results: List[Label]
    start: int = 0
    limit: int = 0
    size: int = 0

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "LabelResult":
        fields = _envelope_fields(data)
        fields["results"] = [Label.from_api(item) for item in fields["results"]]
        return cls(**fields)


@dataclass(frozen=True)
class PageRequest:
    """Pagination cursor for listing the children or labels of ``content``.

    Attributes:
        content: Parent content whose children/labels are listed
        start: Offset of the first item in the window
        limit: Maximum number of items per window
    """
    content: Content
    start: int = 0
    limit: int = 25

    def __post_init__(self):
        if self.start < 0:
            raise ValueError(f"start must not be negative, got {self.start}")
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")

    def next_window(self, size: int) -> "PageRequest":
        """Return a copy advanced past ``size`` returned items."""
        return replace(self, start=self.start + size)
