"""Tests for sstv_encoder.modes."""

import pytest

from sstv_encoder.errors import InvalidModeError
from sstv_encoder.modes import (
    Mode, Family, ModeSpec, ALL_MODES, get_mode, modes_for_family,
    line_duration_ms, MARTIN_1, SCOTTIE_1, ROBOT_36, PASOKON_7,
)


class TestModeEnum:
    def test_vis_codes(self):
        assert Mode.MARTIN1 == 44
        assert Mode.MARTIN2 == 40
        assert Mode.SCOTTIE1 == 60
        assert Mode.SCOTTIE2 == 56
        assert Mode.SCOTTIE_DX == 76
        assert Mode.PASOKON3 == 113
        assert Mode.PASOKON5 == 114
        assert Mode.PASOKON7 == 115
        assert Mode.ROBOT36 == 8
        assert Mode.ROBOT72 == 12
        assert Mode.WRASSE_SC2_180 == 55

    def test_every_mode_registered(self):
        assert set(ALL_MODES) == set(Mode)

    def test_vis_codes_fit_seven_bits(self):
        for mode in Mode:
            assert 0 <= mode <= 127


class TestModeSpec:
    def test_resolutions(self):
        expected = {
            Family.MARTIN: (320, 256),
            Family.SCOTTIE: (320, 256),
            Family.PASOKON: (640, 496),
            Family.ROBOT: (320, 240),
            Family.WRASSE: (320, 256),
        }
        for spec in ALL_MODES.values():
            assert spec.resolution == expected[spec.family], spec.name

    def test_vis_code_property(self):
        assert MARTIN_1.vis_code == 44
        assert isinstance(MARTIN_1.vis_code, int)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            MARTIN_1.width = 640

    @pytest.mark.parametrize("mode, expected", [
        (Mode.SCOTTIE1, 428.22),
        (Mode.SCOTTIE2, 277.692),
        (Mode.ROBOT36, 150.0),
        (Mode.ROBOT72, 300.0),
    ])
    def test_published_line_durations(self, mode, expected):
        assert ALL_MODES[mode].line_duration_ms == pytest.approx(expected, abs=1e-6)

    def test_martin_line_duration(self):
        # sync + three passes, each framed by two separators
        expected = 4.862 + 3 * (2 * 0.572 + 320 * 0.4576)
        assert MARTIN_1.line_duration_ms == pytest.approx(expected)

    def test_pasokon_line_duration(self):
        expected = 10.417 + 4 * 2.083 + 3 * 640 * 0.4167
        assert PASOKON_7.line_duration_ms == pytest.approx(expected)

    def test_line_duration_for_width(self):
        assert line_duration_ms(ROBOT_36, 0) == pytest.approx(9 + 3 + 4.5 + 1.5)

    def test_total_duration_includes_preamble(self):
        expected = 610 + 300 + 240 * 150.0
        assert ROBOT_36.duration_ms == pytest.approx(expected)
        assert ROBOT_36.duration_s == pytest.approx(expected / 1000)

    def test_scottie_duration_has_starting_sync(self):
        expected = 610 + 300 + 256 * SCOTTIE_1.line_duration_ms + 9
        assert SCOTTIE_1.duration_ms == pytest.approx(expected)


class TestGetMode:
    def test_by_enum(self):
        assert get_mode(Mode.ROBOT36) is ROBOT_36

    def test_by_vis_code(self):
        assert get_mode(44) is MARTIN_1

    def test_by_spec(self):
        assert get_mode(SCOTTIE_1) is SCOTTIE_1

    @pytest.mark.parametrize("name", [
        'Robot36', 'robot36', 'ROBOT36', 'robot-36', 'robot_36',
    ])
    def test_by_name(self, name):
        assert get_mode(name) is ROBOT_36

    def test_wrasse_names(self):
        spec = ALL_MODES[Mode.WRASSE_SC2_180]
        assert get_mode('WrasseSC2-180') is spec
        assert get_mode('wrasse-sc2-180') is spec
        assert get_mode('WRASSE_SC2_180') is spec

    def test_scottie_dx_name(self):
        assert get_mode('scottiedx').mode is Mode.SCOTTIE_DX

    @pytest.mark.parametrize("bad", [0, 1, 127, 200, -1, 'martin3', '', True, 3.5, None])
    def test_unknown_raises(self, bad):
        with pytest.raises(InvalidModeError):
            get_mode(bad)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            get_mode('nope')


class TestModesForFamily:
    def test_pasokon(self):
        specs = modes_for_family(Family.PASOKON)
        assert [s.vis_code for s in specs] == [113, 114, 115]

    def test_every_family_has_modes(self):
        for family in Family:
            specs = modes_for_family(family)
            assert specs
            assert all(isinstance(s, ModeSpec) for s in specs)
