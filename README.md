# airmirror

`airmirror` is a set of small, self-contained Python modules for the
receiver side of an AirPlay mirroring and audio-streaming server. Each
module can be used and tested on its own. The package uses only the
standard library.

## Modules

- **`airmirror.features`** is the 64-bit "features" word that the server
  advertises. `AirPlayFeatures` has `set_bit`, `bit`, `low` and `high`.
  `default_features(h265_support, legacy_pairing)` builds the advertised
  set. Bit 42 is h265 support and bit 27 is legacy pairing. The module also
  holds the fixed service-announcement values, such as `GLOBAL_MODEL`,
  `GLOBAL_VERSION`, `RAOP_*` and `AIRPLAY_*`.
- **`airmirror.dmap`** decodes DMAP "now playing" metadata:
  - `parse_listing_item` splits an `mlit` listing into `DmapItem`s.
  - `parse_dmap_header` reads one 8-byte header.
  - `tag_label` gives the display label of string tags such as `asar` or
    `minm`.
  - `format_item` renders an item for the console.
  - Malformed input raises `DmapError`, a subclass of `ValueError`.
- **`airmirror.volume`** maps an AirPlay volume to a linear gain with
  `airplay_volume_to_gain(volume, db_low, db_high, taper)`. The AirPlay
  volume runs from -30 dB to 0 dB, and -144 means mute. The range is
  rescaled onto `db_low`..`db_high`. Out-of-range values are clamped. The
  optional taper lowers the level by 10 dB for each halving of the slider.
- **`airmirror.pin`** draws a pairing PIN as large ASCII-art digits with
  `create_pin_display(pin, margin, gap)`. Non-digit input raises
  `ValueError`.
- **`airmirror.session`** holds per-connection state:
  - `ClientPolicy.admit(device_id)` applies the restrict/allow/block rules.
  - `PairingRegister` keeps the public keys of clients that paired with a
    PIN. It has `load`, `register` and `check`, and can keep the keys in a
    file.
  - `ClockSync` moves the timestamps of `AudioPacket` and `VideoPacket`
    onto the local clock and adds the per-format audio delays.
  - `export_dacp` writes a client's DACP id and Active-Remote token.
  - `write_coverart` writes cover art. Its default image is a 1x1 PNG
    placeholder, `EMPTY_COVERART`.
  - `format_progress` describes track progress from 44.1 kHz sample
    positions.
- **`airmirror.dumps`** writes raw streams to numbered files:
  - `AudioDumper` writes files named `base.N.alac`, `.aac` or `.aud`, and
    starts a new file when the format changes.
  - `VideoDumper` writes `base.h264`. With a limit it writes
    `base.N.h264` and starts a new file at each SPS.
  - `audio_type_for_ct` maps an AirPlay `ct` code to an `AudioType`.
  - Both dumpers are context managers.
- **`airmirror.help`** has the usage and version text (`usage_text`,
  `version_text`).

## Examples

Decode a metadata listing sent by a client:

```python
from airmirror.dmap import DmapError, format_item, parse_listing_item

try:
    items = parse_listing_item(buffer)
except DmapError as exc:
    print(exc)
else:
    for count, item in enumerate(items, start=1):
        print(format_item(item, count), end="")
```

Turn a volume change into a gain:

```python
from airmirror.volume import airplay_volume_to_gain

gain = airplay_volume_to_gain(-15.0, db_low=-30.0, db_high=0.0, taper=True)
```

Show the PIN that a client must enter:

```python
from airmirror.pin import create_pin_display

print(create_pin_display("1234", 10, 3))
```

Build the advertised features word:

```python
from airmirror.features import default_features

features = default_features(h265_support=True, legacy_pairing=False)
print(hex(features.low), hex(features.high))
```

Admit clients and dump audio:

```python
from airmirror.dumps import AudioDumper
from airmirror.session import ClientPolicy

policy = ClientPolicy(restrict=True, allowed=["device-one"], blocked=["device-two"])
policy.admit("device-one")   # True

with AudioDumper(base="audiodump", limit=100) as dumper:
    dumper.set_format(2)     # ALAC
    dumper.write(packet)     # goes to audiodump.1.alac
```

## What this package does not do

`airmirror` is a library of parts, not a running receiver:

- It has no command and no command-line or configuration-file parsing.
- It does not advertise a service over mDNS, and it has no RTSP/HTTP
  server and no pairing cryptography.
- It does not decode or render audio or video.
- It does not look up the machine's network interfaces or MAC address.

These pieces are left to the application that uses the package.