"""Conversion from AirPlay volume to a linear audio gain."""

from __future__ import annotations

import logging
import math

MUTE = -144.0
AIRPLAY_MIN_DB = -30.0
AIRPLAY_MAX_DB = 0.0

_log = logging.getLogger(__name__)


def _slider_fraction(volume: float) -> float:
    if volume == MUTE:
        return 0.0
    if volume < AIRPLAY_MIN_DB:
        _log.error("invalid AirPlay volume %f", volume)
        return 0.0
    if volume > AIRPLAY_MAX_DB:
        _log.error("invalid AirPlay volume %f", volume)
        return 1.0
    if volume == AIRPLAY_MIN_DB:
        return 0.0
    if volume == AIRPLAY_MAX_DB:
        return 1.0
    return min((-AIRPLAY_MIN_DB + volume) / -AIRPLAY_MIN_DB, 1.0)


def airplay_volume_to_gain(
    volume: float, db_low: float = -30.0, db_high: float = 0.0, taper: bool = False
) -> float:
    """Map an AirPlay volume (-30..0 dB, or -144 for mute) to a linear gain.

    The AirPlay range is rescaled onto ``db_low``..``db_high``. With ``taper``,
    each halving of the slider length lowers the level by 10 dB, but never
    below the flat rescaling. Out-of-range volumes are clamped.
    """
    frac = _slider_fraction(volume)
    if frac == 0.0:
        return 0.0
    db_flat = db_low + (db_high - db_low) * frac
    if taper:
        db = max(db_high + 10.0 * (math.log10(frac) / math.log10(2.0)), db_flat)
    else:
        db = db_flat
    return math.pow(10.0, 0.05 * db)