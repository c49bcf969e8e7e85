import pytest

from colour_task.core.errors import InvalidOption
from colour_task.core.services.option_pool import OptionPool, build_colour_options


def test_build_colour_options_spreads_hues():
    options = build_colour_options(8)

    assert [option.id for option in options] == list(range(8))
    assert [option.name for option in options] == [f"Colour {idx}" for idx in range(1, 9)]
    assert len({option.colour for option in options}) == 8
    assert all(option.colour.startswith("#") and len(option.colour) == 7 for option in options)
    assert not any(option.consumed for option in options)
    # Hue 0 is red.
    red, green, blue = (int(options[0].colour[i : i + 2], 16) for i in (1, 3, 5))
    assert red > green and red > blue


def test_build_colour_options_rejects_empty_pool():
    with pytest.raises(ValueError):
        build_colour_options(0)


def test_mark_consumed_shrinks_pool():
    pool = OptionPool.with_count(8)

    pool.mark_consumed(2)

    assert pool.get(2).consumed
    assert pool.remaining_count() == 7
    assert pool.consumed_count() == 1
    assert not pool.is_exhausted()


def test_mark_consumed_twice_is_invalid():
    pool = OptionPool.with_count(3)
    pool.mark_consumed(1)

    with pytest.raises(InvalidOption):
        pool.mark_consumed(1)
    assert pool.remaining_count() == 2


@pytest.mark.parametrize("option_id", [-1, 3, 99])
def test_unknown_option_is_invalid(option_id):
    pool = OptionPool.with_count(3)

    with pytest.raises(InvalidOption):
        pool.ensure_available(option_id)
    with pytest.raises(InvalidOption):
        pool.mark_consumed(option_id)


def test_exhaustion_and_reset():
    pool = OptionPool.with_count(2)
    pool.mark_consumed(0)
    pool.mark_consumed(1)

    assert pool.is_exhausted()

    pool.reset()

    assert pool.remaining_count() == 2
    assert not any(option.consumed for option in pool.options())
