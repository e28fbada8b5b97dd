"""Per-connection state: client admission, pairing register, clocks and exports."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

_log = logging.getLogger(__name__)

_UINT64 = 1 << 64
_UINT32 = 1 << 32
AUDIO_SAMPLE_RATE = 44100

# Base64 of a 32-byte public key is 44 characters long.
_PK64_LEN = 44

# A 95-byte PNG holding a single white pixel, used as placeholder cover art.
EMPTY_COVERART = bytes((
    0x89, 0x50, 0x4e, 0x47, 0x0d, 0x0a, 0x1a, 0x0a, 0x00, 0x00, 0x00, 0x0d, 0x49, 0x48, 0x44, 0x52,
    0x00, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x01, 0x01, 0x03, 0x00, 0x00, 0x00, 0x25, 0xdb, 0x56,
    0xca, 0x00, 0x00, 0x00, 0x03, 0x50, 0x4c, 0x54, 0x45, 0x00, 0x00, 0x00, 0xa7, 0x7a, 0x3d, 0xda,
    0x00, 0x00, 0x00, 0x01, 0x74, 0x52, 0x4e, 0x53, 0x00, 0x40, 0xe6, 0xd8, 0x66, 0x00, 0x00, 0x00,
    0x0a, 0x49, 0x44, 0x41, 0x54, 0x08, 0xd7, 0x63, 0x60, 0x00, 0x00, 0x00, 0x02, 0x00, 0x01, 0xe2,
    0x21, 0xbc, 0x33, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45, 0x4e, 0x44, 0xae, 0x42, 0x60, 0x82,
))


@dataclass
class ClientPolicy:
    """Decides which client devices may connect."""

    restrict: bool = False
    allowed: list[str] = field(default_factory=list)
    blocked: list[str] = field(default_factory=list)

    def admit(self, device_id: str) -> bool:
        """Return whether the device with ``device_id`` may connect."""
        if self.restrict:
            admitted = device_id in self.allowed
            if not admitted:
                _log.info(
                    "client connections have been restricted to those with listed deviceID,\n"
                    'use "-allow %s" to allow this client to connect.', device_id)
        else:
            admitted = True
        if device_id in self.blocked:
            _log.info("*** attempt to connect by blocked client (clientID %s): DENIED", device_id)
            admitted = False
        return admitted


@dataclass
class PairingRegister:
    """Public keys of clients that completed PIN pairing, optionally kept in a file."""

    path: str = ""
    enabled: bool = True
    keys: list[str] = field(default_factory=list)

    def load(self) -> int:
        """Read previously registered keys from the file; return how many were read."""
        if not self.path:
            return 0
        try:
            with open(self.path, encoding="utf-8", errors="replace") as handle:
                loaded = [line.rstrip("\n")[:_PK64_LEN] for line in handle]
        except OSError:
            return 0
        self.keys.extend(loaded)
        if loaded:
            _log.info("Register %s lists %d pin-registered clients", self.path, len(loaded))
        return len(loaded)

    def register(self, device_id: str, client_pk: str, client_name: str) -> None:
        """Record a newly paired client, appending it to the file if there is one."""
        if not self.enabled:
            return
        _log.info("registered new client: %s DeviceID = %s PK = \n%s",
                  client_name, device_id, client_pk)
        self.keys.append(client_pk)
        if self.path:
            try:
                with open(self.path, "a", encoding="utf-8") as handle:
                    handle.write(f"{client_pk},{device_id},{client_name}\n")
            except OSError:
                _log.error("could not append to pairing register %s", self.path)

    def check(self, client_pk: str) -> bool:
        """Return whether a returning client's key is registered (always true when disabled)."""
        if not self.enabled:
            return True
        if client_pk in self.keys:
            _log.debug("registration found: PK=%s", client_pk)
            return True
        _log.error("returning client's pairing registration not found: PK=%s", client_pk)
        return False

    def __iter__(self) -> Iterable[str]:
        return iter(self.keys)


@dataclass
class AudioPacket:
    """A decoded audio packet and its timing."""

    data: bytes
    ct: int = 0
    sync_status: int = 0
    ntp_time_local: int = 0
    ntp_time_remote: int = 0
    rtp_time: int = 0
    seqnum: int = 0


@dataclass
class VideoPacket:
    """A block of decoded video NAL units and its timing."""

    data: bytes
    is_h265: bool = False
    nal_count: int = 0
    ntp_time_local: int = 0
    ntp_time_remote: int = 0


@dataclass
class ClockSync:
    """Maps client timestamps onto the local clock, with per-format audio delays.

    Delays are in nanoseconds; timestamps wrap as unsigned 64-bit values.
    """

    audio_delay_alac: int = 0
    audio_delay_aac: int = 0
    remote_clock_offset: int = 0

    def _shift(self, local: int, remote: int) -> int:
        if not self.remote_clock_offset:
            self.remote_clock_offset = (local - remote) % _UINT64
        return (remote + self.remote_clock_offset) % _UINT64

    def adjust_audio(self, packet: AudioPacket) -> AudioPacket:
        """Rewrite the packet's remote time onto the local clock and return the packet."""
        remote = self._shift(packet.ntp_time_local, packet.ntp_time_remote)
        if packet.ct == 2:
            remote = (remote + self.audio_delay_alac) % _UINT64
        elif packet.ct in (4, 8):
            remote = (remote + self.audio_delay_aac) % _UINT64
        packet.ntp_time_remote = remote
        return packet

    def adjust_video(self, packet: VideoPacket) -> VideoPacket:
        """Rewrite the packet's remote time onto the local clock and return the packet."""
        packet.ntp_time_remote = self._shift(packet.ntp_time_local, packet.ntp_time_remote)
        return packet

    def reset(self) -> None:
        """Forget the clock offset; the next packet establishes a new one."""
        self.remote_clock_offset = 0


def export_dacp(path: str, active_remote: str, dacp_id: str) -> bool:
    """Write the client's DACP id and Active-Remote token to ``path``.

    Returns False when there is no path or it cannot be written.
    """
    if not path:
        return False
    try:
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{dacp_id}\n{active_remote}\n")
    except OSError:
        _log.error('failed to open DACP export file "%s"', path)
        return False
    return True


def write_coverart(path: str, image: bytes = EMPTY_COVERART) -> int:
    """Write cover-art image bytes to ``path``; return the number of bytes written."""
    with open(path, "wb") as handle:
        return handle.write(bytes(image))


def _int32(value: int) -> int:
    value %= _UINT32
    return value - _UINT32 if value >= 1 << 31 else value


def _cdivmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def _minsec(seconds: int) -> str:
    minutes, secs = _cdivmod(seconds, 60)
    return "%d:%.2d" % (minutes, secs)


def format_progress(start: int, curr: int, end: int) -> str:
    """Describe playback progress given RTP sample positions at 44.1 kHz."""
    duration = _cdivmod(_int32(end - start), AUDIO_SAMPLE_RATE)[0]
    position = _cdivmod(_int32(curr - start), AUDIO_SAMPLE_RATE)[0]
    remain = duration - position
    return (f"audio progress (min:sec): {_minsec(position)}; "
            f"remaining: {_minsec(remain)}; track length {_minsec(duration)}")