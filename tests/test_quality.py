import pytest

from ytproxy.services.quality import (
    get_audio_quality_value,
    get_video_quality_value,
    parse_quality,
)


@pytest.mark.parametrize("quality, code", [("320", 0), ("256", 1), ("128", 4), ("96", 5)])
def test_audio_codes(quality, code):
    assert get_audio_quality_value(quality) == code


@pytest.mark.parametrize("quality, code", [("1080", 0), ("720", 1), ("480", 2), ("360", 3), ("144", 4)])
def test_video_codes(quality, code):
    assert get_video_quality_value(quality) == code


@pytest.mark.parametrize("quality", ["64", "500", "abc", "", "-1"])
def test_unlisted_audio_defaults_to_128(quality):
    assert get_audio_quality_value(quality) == 4


@pytest.mark.parametrize("quality", ["240", "2160", "hd", "", "0"])
def test_unlisted_video_defaults_to_720p(quality):
    assert get_video_quality_value(quality) == 1


def test_numeric_prefix_is_used():
    assert parse_quality("320kbps") == 320
    assert parse_quality(" 1080p") == 1080
    assert parse_quality("kbps320") is None
    assert get_audio_quality_value("320kbps") == 0
    assert get_video_quality_value("480p") == 2


def test_integers_are_accepted():
    assert get_audio_quality_value(256) == 1
    assert get_video_quality_value(144) == 4
