"""
Data models for s3presign responses
"""

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import List, Optional, Union

from .error import MissingFieldException, ResponseParseException

S3_XMLNS = "http://s3.amazonaws.com/doc/2006-03-01/"

MAX_SIZE = 2 ** 64 - 1
MAX_KEYS_LIMIT = 65535

logger = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    return tag.split("}")[-1]


def _find(element: ET.Element, name: str) -> Optional[ET.Element]:
    for child in element:
        if _local_name(child.tag) == name:
            return child
    return None


def _findall(element: ET.Element, name: str) -> List[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _findtext(element: ET.Element, name: str, required: bool = False) -> Optional[str]:
    """Text of the first child called ``name``; "" for an empty element."""
    child = _find(element, name)
    if child is None:
        if required:
            raise MissingFieldException(_local_name(element.tag), name)
        return None
    return child.text or ""


def _parse_bool(element: ET.Element, name: str) -> bool:
    value = _findtext(element, name, True)
    if value == "true":
        return True
    if value == "false":
        return False
    raise ResponseParseException(
        f"Field '{name}' of '{_local_name(element.tag)}' is not a boolean: {value!r}"
    )


def _parse_int(
    element: ET.Element,
    name: str,
    maximum: int,
    required: bool = False,
) -> Optional[int]:
    """Unsigned decimal field; signs, underscores and whitespace are rejected."""
    value = _findtext(element, name, required)
    if value is None:
        return None
    if not (value.isascii() and value.isdigit()):
        raise ResponseParseException(
            f"Field '{name}' of '{_local_name(element.tag)}' is not an integer: {value!r}"
        )
    number = int(value)
    if number > maximum:
        raise ResponseParseException(
            f"Field '{name}' of '{_local_name(element.tag)}' is out of range: {value!r}"
        )
    return number


def _add_text(parent: ET.Element, name: str, value: Optional[str]) -> None:
    if value is not None:
        ET.SubElement(parent, name).text = value


@dataclass
class Owner:
    """Owner of an object version or delete marker."""
    id: str
    display_name: str

    @classmethod
    def fromxml(cls, element: ET.Element) -> "Owner":
        return cls(
            id=_findtext(element, "ID", True),
            display_name=_findtext(element, "DisplayName", True),
        )

    def toxml(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "Owner")
        _add_text(element, "ID", self.id)
        _add_text(element, "DisplayName", self.display_name)
        return element

    def is_empty(self) -> bool:
        return not self.id and not self.display_name


def _owner_fromxml(element: ET.Element) -> Optional[Owner]:
    owner = _find(element, "Owner")
    return None if owner is None else Owner.fromxml(owner)


@dataclass
class ObjectVersion:
    """A single version of an object."""
    key: str
    version_id: str
    is_latest: bool
    last_modified: str
    etag: str
    size: int
    owner: Optional[Owner] = None
    storage_class: Optional[str] = None

    @classmethod
    def fromxml(cls, element: ET.Element) -> "ObjectVersion":
        return cls(
            key=_findtext(element, "Key", True),
            version_id=_findtext(element, "VersionId", True),
            is_latest=_parse_bool(element, "IsLatest"),
            last_modified=_findtext(element, "LastModified", True),
            etag=_findtext(element, "ETag", True),
            size=_parse_int(element, "Size", MAX_SIZE, True),
            owner=_owner_fromxml(element),
            storage_class=_findtext(element, "StorageClass"),
        )

    def toxml(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "Version")
        _add_text(element, "Key", self.key)
        _add_text(element, "VersionId", self.version_id)
        _add_text(element, "IsLatest", "true" if self.is_latest else "false")
        _add_text(element, "LastModified", self.last_modified)
        _add_text(element, "ETag", self.etag)
        _add_text(element, "Size", str(self.size))
        if self.owner is not None:
            self.owner.toxml(element)
        _add_text(element, "StorageClass", self.storage_class)
        return element


@dataclass
class DeleteMarker:
    """A delete marker standing in for a removed object."""
    key: str
    version_id: str
    is_latest: bool
    last_modified: str
    owner: Optional[Owner] = None

    @classmethod
    def fromxml(cls, element: ET.Element) -> "DeleteMarker":
        return cls(
            key=_findtext(element, "Key", True),
            version_id=_findtext(element, "VersionId", True),
            is_latest=_parse_bool(element, "IsLatest"),
            last_modified=_findtext(element, "LastModified", True),
            owner=_owner_fromxml(element),
        )

    def toxml(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "DeleteMarker")
        _add_text(element, "Key", self.key)
        _add_text(element, "VersionId", self.version_id)
        _add_text(element, "IsLatest", "true" if self.is_latest else "false")
        _add_text(element, "LastModified", self.last_modified)
        if self.owner is not None:
            self.owner.toxml(element)
        return element


@dataclass
class CommonPrefix:
    """A key prefix rolled up by the delimiter."""
    prefix: str

    @classmethod
    def fromxml(cls, element: ET.Element) -> "CommonPrefix":
        return cls(prefix=_findtext(element, "Prefix", True))

    def toxml(self, parent: ET.Element) -> ET.Element:
        element = ET.SubElement(parent, "CommonPrefixes")
        _add_text(element, "Prefix", self.prefix)
        return element


@dataclass
class ListObjectVersionsResult:
    """
    Represents the result of a ListObjectVersions call.

    When ``next_key_marker`` or ``next_version_id_marker`` is set the listing
    is truncated; sign the action again with ``key-marker`` and
    ``version-id-marker`` set to those values to fetch the rest.
    """
    versions: List[ObjectVersion] = field(default_factory=list)
    delete_markers: List[DeleteMarker] = field(default_factory=list)
    common_prefixes: List[CommonPrefix] = field(default_factory=list)
    max_keys: Optional[int] = None
    next_key_marker: Optional[str] = None
    next_version_id_marker: Optional[str] = None
    name: Optional[str] = None
    prefix: Optional[str] = None
    encoding_type: Optional[str] = None

    @property
    def is_truncated(self) -> bool:
        return self.next_key_marker is not None or self.next_version_id_marker is not None

    @classmethod
    def fromxml(cls, element: ET.Element) -> "ListObjectVersionsResult":
        return cls(
            versions=[ObjectVersion.fromxml(e) for e in _findall(element, "Version")],
            delete_markers=[DeleteMarker.fromxml(e) for e in _findall(element, "DeleteMarker")],
            common_prefixes=[CommonPrefix.fromxml(e) for e in _findall(element, "CommonPrefixes")],
            max_keys=_parse_int(element, "MaxKeys", MAX_KEYS_LIMIT),
            next_key_marker=_findtext(element, "NextKeyMarker"),
            next_version_id_marker=_findtext(element, "NextVersionIdMarker"),
            name=_findtext(element, "Name"),
            prefix=_findtext(element, "Prefix"),
            encoding_type=_findtext(element, "EncodingType"),
        )

    def toxml(self) -> ET.Element:
        root = ET.Element("ListVersionsResult")
        root.set("xmlns", S3_XMLNS)
        _add_text(root, "Name", self.name)
        _add_text(root, "Prefix", self.prefix)
        if self.max_keys is not None:
            _add_text(root, "MaxKeys", str(self.max_keys))
        _add_text(root, "IsTruncated", "true" if self.is_truncated else "false")
        _add_text(root, "NextKeyMarker", self.next_key_marker)
        _add_text(root, "NextVersionIdMarker", self.next_version_id_marker)
        for version in self.versions:
            version.toxml(root)
        for marker in self.delete_markers:
            marker.toxml(root)
        for prefix in self.common_prefixes:
            prefix.toxml(root)
        _add_text(root, "EncodingType", self.encoding_type)
        return root


def parse_list_object_versions(data: Union[bytes, str]) -> ListObjectVersionsResult:
    """
    Parse a ListObjectVersions response body.

    Owners whose ID and display name are both empty are reported as None:
    S3-compatible servers send that shape when they have no owner to show.

    Raises:
        ResponseParseException: the body is not well-formed XML or does not
            match the ListVersionsResult schema
    """
    try:
        root = ET.fromstring(data.lstrip())
    except ET.ParseError as ex:
        raise ResponseParseException(f"Failed to parse ListObjectVersions response. {ex}") from ex

    if _local_name(root.tag) != "ListVersionsResult":
        raise ResponseParseException(
            f"Unexpected root element '{_local_name(root.tag)}' in ListObjectVersions response."
        )

    result = ListObjectVersionsResult.fromxml(root)
    for record in [*result.versions, *result.delete_markers]:
        if record.owner is not None and record.owner.is_empty():
            record.owner = None

    logger.debug(
        "[S3Presign][ListObjectVersions] versions=%s deleteMarkers=%s commonPrefixes=%s truncated=%s",
        len(result.versions),
        len(result.delete_markers),
        len(result.common_prefixes),
        result.is_truncated,
    )
    return result
