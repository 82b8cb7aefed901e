from lifesim.utils.consts import (
    DEFAULT_HEIGHT,
    DEFAULT_TICK_INTERVAL,
    DEFAULT_WIDTH,
    RANDOM_ALIVE_PROBABILITY,
    ConstUtils,
)


def test_rule_constants():
    assert ConstUtils.BIRTH_COUNTS == {3}
    assert ConstUtils.SURVIVAL_COUNTS == {2, 3}


def test_glyph_sets_are_disjoint():
    assert not ConstUtils.LIVE_GLYPHS & ConstUtils.DEAD_GLYPHS
    assert ConstUtils.DEFAULT_LIVE_GLYPH in ConstUtils.LIVE_GLYPHS
    assert ConstUtils.DEFAULT_DEAD_GLYPH in ConstUtils.DEAD_GLYPHS


def test_defaults():
    assert (DEFAULT_WIDTH, DEFAULT_HEIGHT) == (100, 100)
    assert DEFAULT_TICK_INTERVAL > 0
    assert RANDOM_ALIVE_PROBABILITY == 0.5
