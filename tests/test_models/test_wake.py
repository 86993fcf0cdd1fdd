"""
Tests for the wake separation matrix.
"""

import pytest

from atc_airspace.models.validation import FormatRangeError, FormatSyntaxError
from atc_airspace.models.wake import Separation, WakeCategory, WakeSeparation


@pytest.fixture
def matrix() -> WakeSeparation:
    # distance = leading, interval = 10 * following, so every cell is distinct
    return WakeSeparation({
        lead: [Separation(lead.value, 10 * follow.value) for follow in WakeCategory]
        for lead in WakeCategory
    })


class TestWakeCategory:
    """Test cases for wake categories."""

    def test_from_code(self):
        assert WakeCategory.from_code("1") == WakeCategory.SUPER_HEAVY
        assert WakeCategory.from_code("6") == WakeCategory.LIGHT

    @pytest.mark.parametrize("code", ["H", "", "1.5"])
    def test_malformed_code(self, code):
        with pytest.raises(FormatSyntaxError):
            WakeCategory.from_code(code)

    @pytest.mark.parametrize("code", ["0", "7", "-1"])
    def test_code_out_of_range(self, code):
        with pytest.raises(FormatRangeError, match="range"):
            WakeCategory.from_code(code)


class TestWakeSeparation:
    """Test cases for the 6x6 matrix."""

    def test_every_pair_is_looked_up(self, matrix):
        for lead in WakeCategory:
            for follow in WakeCategory:
                assert matrix.separation(lead, follow) == Separation(lead.value, 10 * follow.value)

    def test_default_matrix(self):
        default = WakeSeparation.default()
        assert default.separation(WakeCategory.SUPER_HEAVY, WakeCategory.LIGHT) == Separation(8, 180)
        assert default.separation(WakeCategory.LIGHT, WakeCategory.SUPER_HEAVY) == Separation(0, 0)
        assert default == WakeSeparation.default()

    def test_row(self, matrix):
        row = matrix.row(WakeCategory.UPPER_MEDIUM)
        assert len(row) == 6
        assert row[WakeCategory.LIGHT] == Separation(4, 60)

    def test_missing_row_rejected(self):
        rows = {lead: [Separation(3, 0)] * 6 for lead in list(WakeCategory)[:5]}
        with pytest.raises(FormatSyntaxError, match="LIGHT"):
            WakeSeparation(rows)

    def test_short_row_rejected(self):
        rows = {lead: [Separation(3, 0)] * 6 for lead in WakeCategory}
        rows[WakeCategory.LOWER_HEAVY] = [Separation(3, 0)] * 5
        with pytest.raises(FormatSyntaxError, match="LOWER_HEAVY"):
            WakeSeparation(rows)

    def test_to_dataframe(self, matrix):
        df = matrix.to_dataframe()
        assert df.shape == (36, 4)
        assert list(df.columns) == ['leading', 'following', 'distance', 'interval']
        cell = df[(df.leading == 'LIGHT') & (df.following == 'SUPER_HEAVY')].iloc[0]
        assert cell.distance == 6
        assert cell.interval == 10

    def test_equality(self, matrix):
        assert matrix != WakeSeparation.default()
        assert matrix.__eq__("matrix") is NotImplemented
