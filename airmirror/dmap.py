"""Parsing and display of DMAP-tagged audio metadata."""

from __future__ import annotations

import logging
import string
import struct
from collections.abc import Iterable
from dataclasses import dataclass

_HEADER = struct.Struct(">4si")
_LETTERS = frozenset(string.ascii_letters)

_log = logging.getLogger(__name__)

_LABELS = {
    "asaa": "Album artist",
    "asal": "Album",
    "asar": "Artist",
    "ascm": "Comment",
    "ascn": "Content description",
    "ascp": "Composer",
    "asct": "Category",
    "assa": "Sort Artist",
    "assc": "Sort Composer",
    "assl": "Sort Album artist",
    "assn": "Sort Name",
    "asss": "Sort Series",
    "assu": "Sort Album",
    "asdt": "Description",
    "asfm": "Format",
    "asgn": "Genre",
    "asky": "Keywords",
    "aslc": "Long Content Description",
    "minm": "Title",
}


class DmapError(ValueError):
    """Malformed DMAP metadata."""


@dataclass(frozen=True)
class DmapItem:
    """One tagged DMAP item."""

    tag: str
    data: bytes

    @property
    def text(self) -> str:
        """The data read as a NUL-terminated UTF-8 string."""
        return self.data.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def parse_dmap_header(data: bytes) -> tuple[str, int]:
    """Read an 8-byte DMAP header: a 4-letter tag and a big-endian length."""
    if len(data) < _HEADER.size:
        raise DmapError(f"DMAP header needs {_HEADER.size} bytes, got {len(data)}")
    raw_tag, length = _HEADER.unpack_from(data)
    tag = raw_tag.decode("latin-1")
    if not all(ch in _LETTERS for ch in tag) or length < 0:
        raise DmapError(f"invalid DMAP header: tag [{tag}] datalen {length}")
    return tag, length


def tag_label(tag: str) -> str | None:
    """The display label of a string-valued tag, or None for other tags."""
    return _LABELS.get(tag)


def parse_listing_item(buffer: bytes) -> list[DmapItem]:
    """Split an "mlit" listing item into the items it holds."""
    buffer = bytes(buffer)
    if len(buffer) < _HEADER.size:
        raise DmapError(f"received invalid metadata, length {len(buffer)} < 8")
    tag, length = parse_dmap_header(buffer)
    body = memoryview(buffer)[_HEADER.size:]
    if tag != "mlit" or length != len(body):
        raise DmapError(
            f"received metadata with tag {tag}, but is not a DMAP listingitem, "
            f"or datalen = {length} != buflen {len(body)}"
        )
    items = []
    offset = 0
    while len(body) - offset >= _HEADER.size:
        tag, length = parse_dmap_header(body[offset:offset + _HEADER.size])
        offset += _HEADER.size
        if length > len(body) - offset:
            raise DmapError(f"DMAP item [{tag}] of length {length} overruns the listing")
        items.append(DmapItem(tag, bytes(body[offset:offset + length])))
        offset += length
    leftover = len(body) - offset
    if leftover:
        _log.error("%d bytes of metadata were not processed", leftover)
    return items


def _hex_rows(data: bytes) -> Iterable[str]:
    for start in range(0, len(data), 16):
        yield "".join(f"{byte:02x} " for byte in data[start:start + 16])


def format_item(item: DmapItem, count: int, debug: bool = False) -> str:
    """Render an item as the console report shows it."""
    parts = []
    if debug:
        parts.append(f"{count}: dmap_tag [{item.tag}], {len(item.data)}\n")
    if not item.data:
        return "".join(parts)
    label = tag_label(item.tag)
    if label is not None:
        parts.append(f"{label}: {item.text}")
    elif debug:
        parts.append("\n".join(_hex_rows(item.data)))
    parts.append("\n")
    return "".join(parts)