import pytest

from airmirror.features import (
    FEATURES_1,
    AirPlayFeatures,
    default_features,
)


def test_default_features_with_legacy_pairing_match_announced_word():
    features = default_features(False, True)
    assert features.low == int(FEATURES_1, 16)
    assert features.high == 0


def test_default_features_without_legacy_pairing():
    features = default_features(False, False)
    assert features.low == 0x527FFEE6
    assert not features.bit(27)


def test_h265_sets_bit_42_only():
    plain = default_features(False, True)
    h265 = default_features(True, True)
    assert h265.bit(42)
    assert not plain.bit(42)
    assert int(h265) ^ int(plain) == 1 << 42


def test_set_bit_round_trip():
    features = AirPlayFeatures(0)
    features.set_bit(5, True)
    assert features.bit(5)
    features.set_bit(5, False)
    assert not features.bit(5)
    assert int(features) == 0


def test_set_bit_high_half():
    features = AirPlayFeatures(0)
    features.set_bit(63, True)
    assert features.high == 1 << 31
    assert features.low == 0


@pytest.mark.parametrize("bit", [-1, 64, 100])
def test_bit_out_of_range(bit):
    features = AirPlayFeatures()
    with pytest.raises(ValueError):
        features.set_bit(bit, True)
    with pytest.raises(ValueError):
        features.bit(bit)


def test_mirroring_and_audio_bits_set():
    features = default_features(False, False)
    assert features.bit(7)
    assert features.bit(9)
    assert not features.bit(0)