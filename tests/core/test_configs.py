import dataclasses

import pytest

from triggerable_exits.configs import ExitConfig, MAINNET_CONFIG
from triggerable_exits.constants import DEFAULT_PRECOMPILE_ADDRESS


def test_mainnet_config():
    assert MAINNET_CONFIG.MAX_EXITS_PER_BLOCK == 16
    assert MAINNET_CONFIG.TARGET_EXITS_PER_BLOCK == 2
    assert MAINNET_CONFIG.MIN_EXIT_FEE == 1
    assert MAINNET_CONFIG.EXIT_FEE_UPDATE_FRACTION == 17
    assert MAINNET_CONFIG.EXCESS_RETURN_GAS_STIPEND == 2300
    assert MAINNET_CONFIG.PRECOMPILE_ADDRESS == DEFAULT_PRECOMPILE_ADDRESS


def test_config_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        MAINNET_CONFIG.MAX_EXITS_PER_BLOCK = 32


def test_formatted_dict_round_trip():
    config = ExitConfig(MAX_EXITS_PER_BLOCK=8, PRECOMPILE_ADDRESS=b'\x12' * 20)

    formatted = config.to_formatted_dict()

    assert formatted['MAX_EXITS_PER_BLOCK'] == 8
    assert formatted['PRECOMPILE_ADDRESS'] == '0x' + '12' * 20
    assert ExitConfig.from_formatted_dict(formatted) == config


def test_from_partial_formatted_dict():
    config = ExitConfig.from_formatted_dict({'TARGET_EXITS_PER_BLOCK': 4})
    assert config == dataclasses.replace(MAINNET_CONFIG, TARGET_EXITS_PER_BLOCK=4)


def test_from_formatted_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match='MAX_EXITS'):
        ExitConfig.from_formatted_dict({'MAX_EXITS': 4})


@pytest.mark.parametrize(
    'overrides',
    (
        {'MAX_EXITS_PER_BLOCK': 0},
        {'TARGET_EXITS_PER_BLOCK': 17},
        {'TARGET_EXITS_PER_BLOCK': -1},
        {'MIN_EXIT_FEE': 0},
        {'EXIT_FEE_UPDATE_FRACTION': 0},
        {'EXCESS_RETURN_GAS_STIPEND': -1},
        {'PRECOMPILE_ADDRESS': b'\x01' * 19},
    ),
)
def test_invalid_config(overrides):
    with pytest.raises(ValueError):
        ExitConfig(**overrides)
