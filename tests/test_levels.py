"""
Tests for tintlog.levels: the nine-step severity registry.
"""

import pytest

from tintlog.levels import (
    DEFAULT_LEVEL,
    LEVEL_COLORS,
    LEVEL_MARKERS,
    LOG_LEVELS,
    RESET,
    SEVERITIES,
    is_enabled,
    is_valid_level,
    name_of,
    rank_of,
)


ALL_NAMES = ['off', 'fatal', 'error', 'warn', 'info', 'verbose', 'debug', 'trace', 'all']


class TestRanks:
    """Name <-> rank mapping."""

    def test_fixed_ranks(self):
        """Ranks follow the fixed scale from all=0 to off=8."""
        assert [rank_of(n) for n in ALL_NAMES] == [8, 7, 6, 5, 4, 3, 2, 1, 0]

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_rank_and_name_are_inverses(self, name):
        """name_of(rank_of(name)) returns the name."""
        assert name_of(rank_of(name)) == name

    def test_unknown_rank(self):
        """Ranks outside 0..8 have no name."""
        assert name_of(9) is None
        assert name_of(-1) is None
        assert name_of(True) is None

    def test_default_is_info(self):
        assert DEFAULT_LEVEL == 'info'

    @pytest.mark.parametrize("value", ['random', 'INFO', ' info', '', 2, None, {}, [], 4.0])
    def test_rank_of_unknown(self, value):
        """Anything that is not an exact level name has no rank."""
        assert rank_of(value) is None


class TestIsValidLevel:
    """is_valid_level() is true for exactly the nine names."""

    @pytest.mark.parametrize("name", ALL_NAMES)
    def test_valid_names(self, name):
        assert is_valid_level(name) is True

    @pytest.mark.parametrize("value", ['random', 2, {}, [], None, 3.5, True, ('info',), b'info'])
    def test_invalid_values(self, value):
        """Non-strings and unknown strings are never valid."""
        assert is_valid_level(value) is False


class TestIsEnabled:
    """is_enabled(current, requested) gate."""

    def test_requested_above_threshold(self):
        assert is_enabled(LOG_LEVELS['info'], LOG_LEVELS['warn']) is True

    def test_requested_at_threshold(self):
        assert is_enabled(LOG_LEVELS['warn'], LOG_LEVELS['warn']) is True

    def test_requested_below_threshold(self):
        assert is_enabled(LOG_LEVELS['warn'], LOG_LEVELS['info']) is False

    def test_off_blocks_fatal(self):
        """'off' is above every emitting level."""
        assert is_enabled(LOG_LEVELS['off'], LOG_LEVELS['fatal']) is False

    def test_all_allows_trace(self):
        """'all' is below every level."""
        assert is_enabled(LOG_LEVELS['all'], LOG_LEVELS['trace']) is True

    @pytest.mark.parametrize("current,requested", [
        (None, 4), (4, None), ('4', 5), (4, 5.0), (True, 5), (4, [5]),
    ])
    def test_malformed_ranks(self, current, requested):
        """Non-integer ranks degrade to False."""
        assert is_enabled(current, requested) is False


class TestDecorationTables:
    """Color and marker tables cover every emitting severity."""

    def test_every_severity_has_color_and_marker(self):
        for level in SEVERITIES:
            assert level in LEVEL_COLORS
            assert level in LEVEL_MARKERS

    def test_basic_colors(self):
        assert LEVEL_COLORS['error'] == '\x1b[31m'
        assert LEVEL_COLORS['warn'] == '\x1b[33m'
        assert LEVEL_COLORS['info'] == '\x1b[32m'
        assert LEVEL_COLORS['debug'] == '\x1b[34m'
        assert LEVEL_COLORS['verbose'] == '\x1b[35m'

    def test_reset(self):
        assert RESET == '\x1b[0m'

    def test_markers(self):
        assert LEVEL_MARKERS['warn'] == '[W]'
        assert LEVEL_MARKERS['trace'] == '[T]'
