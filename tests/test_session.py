import pytest

from airmirror.session import (
    EMPTY_COVERART,
    AudioPacket,
    ClientPolicy,
    ClockSync,
    PairingRegister,
    VideoPacket,
    export_dacp,
    format_progress,
    write_coverart,
)

DEVICE_A = "02:00:00:00:00:0a"
DEVICE_B = "02:00:00:00:00:0b"
PK_A = "A" * 44
PK_B = "B" * 44


def test_policy_unrestricted_admits_anyone():
    assert ClientPolicy().admit(DEVICE_A) is True


def test_policy_restricted_admits_only_allowed():
    policy = ClientPolicy(restrict=True, allowed=[DEVICE_A])
    assert policy.admit(DEVICE_A) is True
    assert policy.admit(DEVICE_B) is False


def test_policy_blocked_overrides_allowed():
    policy = ClientPolicy(restrict=True, allowed=[DEVICE_A], blocked=[DEVICE_A])
    assert policy.admit(DEVICE_A) is False
    assert ClientPolicy(blocked=[DEVICE_B]).admit(DEVICE_B) is False


def test_register_disabled_accepts_everything(tmp_path):
    path = tmp_path / "reg"
    reg = PairingRegister(path=str(path), enabled=False)
    reg.register(DEVICE_A, PK_A, "phone")
    assert reg.check(PK_B) is True
    assert reg.keys == []
    assert not path.exists()


def test_register_and_check(tmp_path):
    path = tmp_path / "reg"
    reg = PairingRegister(path=str(path))
    reg.register(DEVICE_A, PK_A, "phone")
    assert reg.check(PK_A) is True
    assert reg.check(PK_B) is False
    assert path.read_text() == f"{PK_A},{DEVICE_A},phone\n"


def test_register_round_trip_through_file(tmp_path):
    path = str(tmp_path / "reg")
    first = PairingRegister(path=path)
    first.register(DEVICE_A, PK_A, "phone")
    first.register(DEVICE_B, PK_B, "tablet")
    second = PairingRegister(path=path)
    assert second.load() == 2
    assert second.keys == [PK_A, PK_B]
    assert second.check(PK_B) is True


def test_register_load_missing_file(tmp_path):
    reg = PairingRegister(path=str(tmp_path / "absent"))
    assert reg.load() == 0
    assert reg.check(PK_A) is False


def test_register_without_path_keeps_memory_only():
    reg = PairingRegister()
    reg.register(DEVICE_A, PK_A, "phone")
    assert reg.keys == [PK_A]
    assert reg.load() == 0


def test_clock_first_packet_maps_to_local():
    sync = ClockSync()
    packet = sync.adjust_video(VideoPacket(b"", ntp_time_local=1000, ntp_time_remote=400))
    assert packet.ntp_time_remote == 1000
    assert sync.remote_clock_offset == 600


def test_clock_offset_is_kept_between_packets():
    sync = ClockSync()
    sync.adjust_video(VideoPacket(b"", ntp_time_local=1000, ntp_time_remote=400))
    later = sync.adjust_video(VideoPacket(b"", ntp_time_local=5000, ntp_time_remote=450))
    assert later.ntp_time_remote == 450 + 600


def test_clock_reset_recomputes_offset():
    sync = ClockSync()
    sync.adjust_video(VideoPacket(b"", ntp_time_local=1000, ntp_time_remote=400))
    sync.reset()
    assert sync.remote_clock_offset == 0
    packet = sync.adjust_video(VideoPacket(b"", ntp_time_local=7000, ntp_time_remote=100))
    assert packet.ntp_time_remote == 7000


def test_clock_wraps_when_remote_ahead():
    sync = ClockSync()
    packet = sync.adjust_video(VideoPacket(b"", ntp_time_local=10, ntp_time_remote=20))
    assert packet.ntp_time_remote == 10
    assert 0 <= sync.remote_clock_offset < 2 ** 64


@pytest.mark.parametrize("ct, delay_attr", [(2, "alac"), (4, "aac"), (8, "aac")])
def test_clock_audio_delays(ct, delay_attr):
    sync = ClockSync(audio_delay_alac=5, audio_delay_aac=-7)
    packet = sync.adjust_audio(AudioPacket(b"x", ct=ct, ntp_time_local=1000, ntp_time_remote=1))
    expected = 1000 + (5 if delay_attr == "alac" else -7)
    assert packet.ntp_time_remote == expected


def test_clock_audio_other_format_has_no_delay():
    sync = ClockSync(audio_delay_alac=5, audio_delay_aac=9)
    packet = sync.adjust_audio(AudioPacket(b"x", ct=1, ntp_time_local=1000, ntp_time_remote=1))
    assert packet.ntp_time_remote == 1000


def test_export_dacp(tmp_path):
    path = tmp_path / "dacp"
    assert export_dacp(str(path), "1234", "ABCD") is True
    assert path.read_text() == "ABCD\n1234\n"


def test_export_dacp_without_path():
    assert export_dacp("", "1234", "ABCD") is False


def test_export_dacp_unwritable(tmp_path):
    assert export_dacp(str(tmp_path / "no" / "dir" / "dacp"), "1", "2") is False


def test_write_coverart_default_placeholder(tmp_path):
    path = tmp_path / "cover.png"
    assert write_coverart(str(path)) == 95
    data = path.read_bytes()
    assert data == EMPTY_COVERART
    assert data.startswith(b"\x89PNG\r\n\x1a\n")
    assert data.endswith(b"IEND\xaeB`\x82")


def test_write_coverart_custom_bytes(tmp_path):
    path = tmp_path / "cover.jpg"
    image = b"\xff\xd8image\xff\xd9"
    assert write_coverart(str(path), image) == len(image)
    assert path.read_bytes() == image


def test_format_progress_example():
    text = format_progress(0, 44100 * 75, 44100 * 200)
    assert text == "audio progress (min:sec): 1:15; remaining: 2:05; track length 3:20"


def test_format_progress_at_start_and_end():
    start = 1000
    end = start + 44100 * 61
    at_start = format_progress(start, start, end)
    at_end = format_progress(start, end, end)
    assert at_start.endswith("track length 1:01")
    assert "remaining: 1:01" in at_start
    assert "remaining: 0:00" in at_end
    assert at_end.startswith("audio progress (min:sec): 1:01;")