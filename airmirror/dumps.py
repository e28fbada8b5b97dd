"""Dumping of received audio packets and video NAL units to files."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO

START_CODE = b"\x00\x00\x00\x01"
_SPS_NAL = 0x07

_log = logging.getLogger(__name__)


class AudioType(IntEnum):
    """Audio stream formats, as recorded in the dump file's suffix."""

    NONE = 0x00
    OTHER = 0x10
    ALAC = 0x20
    AAC_ELD = 0x80


_SUFFIXES = {AudioType.ALAC: "alac", AudioType.AAC_ELD: "aac"}


def audio_type_for_ct(ct: int) -> AudioType:
    """Map an AirPlay "ct" compression type to an audio type."""
    if ct == 2:
        return AudioType.ALAC
    if ct == 8:
        return AudioType.AAC_ELD
    return AudioType.OTHER


def _open(path: str, what: str) -> BinaryIO | None:
    try:
        return open(path, "wb")
    except OSError:
        _log.error("could not open file %s for dumping %s", path, what)
        return None


@dataclass
class AudioDumper:
    """Writes audio packets to base.N.fmt, starting a new file when the format changes.

    With a non-zero ``limit`` a file is closed after that many packets.
    """

    base: str = "audiodump"
    limit: int = 0
    paths: list[str] = field(default_factory=list, init=False)
    _file: BinaryIO | None = field(default=None, init=False, repr=False)
    _file_count: int = field(default=0, init=False, repr=False)
    _packets: int = field(default=0, init=False, repr=False)
    _type: AudioType = field(default=AudioType.NONE, init=False, repr=False)
    _previous_type: AudioType = field(default=AudioType.NONE, init=False, repr=False)

    def set_format(self, ct: int) -> None:
        """Record the stream's format; an open file of another format is closed."""
        new_type = audio_type_for_ct(ct)
        if self._file is not None and new_type != self._type:
            self._file.close()
            self._file = None
        self._type = new_type

    def write(self, data: bytes) -> None:
        """Dump one audio packet."""
        if self._file is None and self._type != self._previous_type:
            self._previous_type = self._type
            self._file_count += 1
            self._packets = 0
            suffix = _SUFFIXES.get(self._type, "aud")
            path = f"{self.base}.{self._file_count}.{suffix}"
            self._file = _open(path, "audio frames")
            if self._file is not None:
                self.paths.append(path)
        if self._file is None:
            return
        self._file.write(data)
        if self.limit:
            self._packets += 1
            if self._packets == self.limit:
                self._file.close()
                self._file = None

    def close(self) -> None:
        """Close the open dump file, if any."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> AudioDumper:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class VideoDumper:
    """Writes H.264 NAL units to base.h264.

    With a non-zero ``limit`` each SPS starts a new file base.N.h264, into
    which at most ``limit`` units are written.
    """

    base: str = "videodump"
    limit: int = 0
    paths: list[str] = field(default_factory=list, init=False)
    _file: BinaryIO | None = field(default=None, init=False, repr=False)
    _file_count: int = field(default=0, init=False, repr=False)
    _units: int = field(default=0, init=False, repr=False)

    def write(self, data: bytes) -> None:
        """Dump one block of NAL units."""
        is_sps = len(data) > 4 and (data[4] & 0x1F) == _SPS_NAL
        if is_sps and self._file is not None and self.limit:
            self._file.write(START_CODE)
            self._file.close()
            self._file = None
            self._units = 0
        if self._file is None:
            path = self.base
            if self.limit:
                self._file_count += 1
                path += f".{self._file_count}"
            path += ".h264"
            self._file = _open(path, "h264 frames")
            if self._file is not None:
                self.paths.append(path)
        if self._file is None:
            return
        if self.limit == 0:
            self._file.write(data)
        elif self._units < self.limit:
            self._units += 1
            self._file.write(data)

    def close(self) -> None:
        """Terminate and close the open dump file, if any."""
        if self._file is not None:
            self._file.write(START_CODE)
            self._file.close()
            self._file = None

    def __enter__(self) -> VideoDumper:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()