"""Building blocks for an AirPlay mirroring and audio-streaming receiver."""

__version__ = "1.70.0"