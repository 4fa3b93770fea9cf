import pytest

from hypothesis import (
    given,
    strategies as st,
)

from triggerable_exits._utils.numeric import fake_exponential
from triggerable_exits.configs import MAINNET_CONFIG
from triggerable_exits.fee_market import calculate_exit_fee


@pytest.mark.parametrize(
    'factor, numerator, denominator, expected',
    (
        (1, 0, 1, 1),
        (38493, 0, 1000, 38493),
        (0, 1234, 2345, 0),
        (1, 2, 1, 6),
        (1, 4, 2, 6),
        (1, 3, 1, 16),
        (10, 8, 2, 542),
        (1, 0, 17, 1),
        (1, 17, 17, 2),
        (1, 34, 17, 7),
    ),
)
def test_fake_exponential(factor, numerator, denominator, expected):
    assert fake_exponential(factor, numerator, denominator) == expected


@pytest.mark.parametrize(
    'excess_exits, expected_fee',
    (
        (0, 1),
        (17, 2),
        (34, 7),
    ),
)
def test_exit_fee_at_excess(excess_exits, expected_fee):
    assert calculate_exit_fee(excess_exits, MAINNET_CONFIG) == expected_fee


def test_fake_exponential_handles_large_intermediate_products():
    # e**(1700/17) is far beyond any fixed width integer
    fee = calculate_exit_fee(1700, MAINNET_CONFIG)
    assert fee.bit_length() > 128
    assert isinstance(fee, int)


@given(
    excess_exits=st.integers(min_value=0, max_value=800),
    increment=st.integers(min_value=1, max_value=50),
)
def test_exit_fee_is_monotonic(excess_exits, increment):
    lower_fee = calculate_exit_fee(excess_exits, MAINNET_CONFIG)
    higher_fee = calculate_exit_fee(excess_exits + increment, MAINNET_CONFIG)
    assert higher_fee >= lower_fee >= MAINNET_CONFIG.MIN_EXIT_FEE


@pytest.mark.parametrize(
    'factor, numerator, denominator',
    (
        (-1, 1, 1),
        (1, -1, 1),
        (1, 1, 0),
        (1, 1, -17),
    ),
)
def test_fake_exponential_rejects_invalid_arguments(factor, numerator, denominator):
    with pytest.raises(ValueError):
        fake_exponential(factor, numerator, denominator)
