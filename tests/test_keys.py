"""Tests for key spec parsing and trigger key maps."""

import curses

import pytest

from buf_cycle.keys import KeyMap, parse_key


class TestParseKey:
    def test_function_key(self):
        assert parse_key("f6") == curses.KEY_F6

    def test_function_key_case_insensitive(self):
        assert parse_key("F6") == curses.KEY_F6

    def test_shifted_function_key(self):
        assert parse_key("S-f6") == curses.KEY_F18

    def test_control_key(self):
        assert parse_key("C-n") == 14
        assert parse_key("C-P") == 16

    def test_named_keys(self):
        assert parse_key("tab") == 9
        assert parse_key("btab") == curses.KEY_BTAB
        assert parse_key("S-tab") == curses.KEY_BTAB

    def test_single_character(self):
        assert parse_key("]") == ord("]")

    @pytest.mark.parametrize("spec", ["", "f13", "f0", "S-x", "C-1", "hyper-x", "ab"])
    def test_invalid_specs(self, spec):
        with pytest.raises(ValueError):
            parse_key(spec)


class TestKeyMap:
    def test_defaults(self):
        km = KeyMap()
        assert km.direction_for(curses.KEY_F6) == 1
        assert km.direction_for(curses.KEY_F18) == -1
        assert km.direction_for(ord("x")) is None

    def test_custom_bindings(self):
        km = KeyMap(["C-n", "f6"], ["C-p"])
        assert km.direction_for(14) == 1
        assert km.direction_for(curses.KEY_F6) == 1
        assert km.direction_for(16) == -1

    def test_is_trigger(self):
        km = KeyMap(["C-n"], ["C-p"])
        assert km.is_trigger(14)
        assert not km.is_trigger(ord("n"))

    def test_same_key_both_directions_rejected(self):
        with pytest.raises(ValueError, match="C-n"):
            KeyMap(["C-n"], ["C-n", "C-p"])

    def test_bad_spec_rejected(self):
        with pytest.raises(ValueError):
            KeyMap(["nope"], ["C-p"])
