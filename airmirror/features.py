"""AirPlay feature bits and the fixed service-announcement values."""

from __future__ import annotations

from dataclasses import dataclass

GLOBAL_MODEL = "AppleTV3,2"
GLOBAL_VERSION = "220.68"

# Clients whose User-Agent appears here use the old, unhashed audio AES key.
OLD_PROTOCOL_CLIENT_USER_AGENT_LIST = "AirMyPC/2.0;xxx"

MAX_HWADDR_LEN = 6

RAOP_TXTVERS = "1"
RAOP_CH = "2"
RAOP_CN = "0,1,2,3"
RAOP_ET = "0,3,5"
RAOP_VV = "2"
FEATURES_1 = "0x5A7FFEE6"
FEATURES_2 = "0x0"
RAOP_RHD = "5.6.0.0"
RAOP_SF = "0x4"
RAOP_SV = "false"
RAOP_DA = "true"
RAOP_SR = "44100"
RAOP_SS = "16"
RAOP_VS = GLOBAL_VERSION
RAOP_TP = "UDP"
RAOP_MD = "0,1,2"
RAOP_VN = "65537"

AIRPLAY_SRCVERS = GLOBAL_VERSION
AIRPLAY_FLAGS = "0x4"
AIRPLAY_VV = "2"
AIRPLAY_PI = "2e388006-13ba-4041-9a67-25dd4a43d536"

FEATURE_BITS = 64

# Bits 0..31 as announced by the server; bits 42 (h265) and 27 (legacy
# pairing) are set afterwards from the configuration.
_BASE_BITS: dict[int, bool] = {
    0: False,   # AirPlay video
    1: True,    # photo
    2: True,    # video protected with FairPlay DRM
    3: False,   # volume control for videos
    4: False,   # HTTP live streaming
    5: True,    # slideshow
    6: True,
    7: True,    # mirroring
    8: False,   # screen rotation
    9: True,    # audio
    10: True,
    11: True,   # audio packet redundancy
    12: True,   # FairPlay secure auth
    13: True,   # photo preloading
    14: True,   # FairPlay authentication
    15: True,   # metadata: artwork
    16: True,   # metadata: progress
    17: True,   # metadata: text "now playing"
    18: True,   # audio format 1
    19: True,   # audio format 2
    20: True,   # audio format 3
    21: True,   # audio format 4
    22: True,   # authentication type 4
    23: False,  # RSA authentication
    24: False,
    25: True,
    26: False,  # unified advertiser info
    27: True,   # legacy pairing
    28: True,
    29: False,
    30: True,   # RAOP support
    31: False,
}

H265_BIT = 42
LEGACY_PAIRING_BIT = 27


def _check_bit(bit: int) -> None:
    if not 0 <= bit < FEATURE_BITS:
        raise ValueError(f"feature bit {bit} is outside the range 0..{FEATURE_BITS - 1}")


@dataclass
class AirPlayFeatures:
    """A 64-bit AirPlay "features" word."""

    value: int = int(FEATURES_1, 16) | (int(FEATURES_2, 16) << 32)

    def set_bit(self, bit: int, on: bool) -> None:
        """Switch one feature bit on or off."""
        _check_bit(bit)
        if on:
            self.value |= 1 << bit
        else:
            self.value &= ~(1 << bit)

    def bit(self, bit: int) -> bool:
        """Return whether one feature bit is set."""
        _check_bit(bit)
        return bool(self.value >> bit & 1)

    @property
    def low(self) -> int:
        """The first 32 bits of the features word."""
        return self.value & 0xFFFFFFFF

    @property
    def high(self) -> int:
        """The second 32 bits of the features word."""
        return self.value >> 32 & 0xFFFFFFFF

    def __int__(self) -> int:
        return self.value


def default_features(h265_support: bool, legacy_pairing: bool) -> AirPlayFeatures:
    """Build the features word advertised by the server."""
    features = AirPlayFeatures()
    for bit, on in _BASE_BITS.items():
        features.set_bit(bit, on)
    features.set_bit(H265_BIT, bool(h265_support))
    features.set_bit(LEGACY_PAIRING_BIT, bool(legacy_pairing))
    return features