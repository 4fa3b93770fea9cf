from eth_utils import get_extended_debug_logger

from triggerable_exits._utils.numeric import fake_exponential
from triggerable_exits.abc import StorageAPI
from triggerable_exits.configs import ExitConfig
from triggerable_exits.constants import (
    EXCESS_EXITS_STORAGE_SLOT,
    EXIT_COUNT_STORAGE_SLOT,
)
from triggerable_exits.typing import Fee


def calculate_exit_fee(excess_exits: int, config: ExitConfig) -> Fee:
    return Fee(fake_exponential(
        config.MIN_EXIT_FEE,
        excess_exits,
        config.EXIT_FEE_UPDATE_FRACTION,
    ))


def calculate_excess_exits(previous_excess: int, exit_count: int, target: int) -> int:
    if previous_excess + exit_count > target:
        return previous_excess + exit_count - target
    return 0


class FeeMarket:
    """
    Prices admission to the exit queue from the exits accumulated above the per-block
    target. All state lives in ``storage``; instances hold nothing else.
    """
    logger = get_extended_debug_logger('triggerable_exits.FeeMarket')

    def __init__(self, storage: StorageAPI, config: ExitConfig) -> None:
        self.storage = storage
        self.config = config

    @property
    def excess_exits(self) -> int:
        return self.storage.get(EXCESS_EXITS_STORAGE_SLOT)

    @property
    def exit_count(self) -> int:
        """
        Admissions in the current block.
        """
        return self.storage.get(EXIT_COUNT_STORAGE_SLOT)

    def current_fee(self) -> Fee:
        return calculate_exit_fee(self.excess_exits, self.config)

    def record_usage(self, n: int = 1) -> None:
        if n < 0:
            raise ValueError(f"Cannot record negative usage: {n}")
        self.storage.set(EXIT_COUNT_STORAGE_SLOT, self.exit_count + n)

    def roll_to_next_block(self) -> None:
        previous_excess = self.excess_exits
        exit_count = self.exit_count
        new_excess = calculate_excess_exits(
            previous_excess,
            exit_count,
            self.config.TARGET_EXITS_PER_BLOCK,
        )
        self.storage.set(EXCESS_EXITS_STORAGE_SLOT, new_excess)
        self.storage.set(EXIT_COUNT_STORAGE_SLOT, 0)
        self.logger.debug(
            "Rolled fee market: excess %d -> %d after %d exits",
            previous_excess,
            new_excess,
            exit_count,
        )
