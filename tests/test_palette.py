"""Tests for swatch_tool.core.palette — packing and hex/RGB formatting."""

import pytest
from swatch_tool.core.palette import luminance, pack, rgb_string, rgb_to_hex, unpack


class TestRgbToHex:
    def test_mixed(self):
        assert rgb_to_hex(255, 0, 128) == '#FF0080'

    def test_zero_padded(self):
        assert rgb_to_hex(1, 2, 3) == '#010203'

    def test_uppercase(self):
        assert rgb_to_hex(171, 205, 239) == '#ABCDEF'

    def test_black(self):
        assert rgb_to_hex(0, 0, 0) == '#000000'


class TestRgbString:
    def test_mixed(self):
        assert rgb_string(255, 0, 128) == 'RGB(255, 0, 128)'

    def test_black(self):
        assert rgb_string(0, 0, 0) == 'RGB(0, 0, 0)'


class TestPack:
    def test_opaque_default(self):
        assert pack(255, 0, 0) == 0xFFFF0000

    def test_explicit_alpha(self):
        assert pack(0, 0, 255, 0x80) == 0x800000FF

    def test_unpack_splits_channels(self):
        assert unpack(0x80FF0080) == (255, 0, 128, 0x80)

    def test_out_of_range_channel(self):
        with pytest.raises(ValueError):
            pack(256, 0, 0)
        with pytest.raises(ValueError):
            pack(0, -1, 0)


class TestLuminance:
    def test_white_brighter_than_black(self):
        assert luminance(255, 255, 255) > luminance(0, 0, 0)

    def test_green_brighter_than_blue(self):
        assert luminance(0, 255, 0) > luminance(0, 0, 255)
