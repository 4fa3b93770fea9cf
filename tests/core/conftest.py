import pytest

from triggerable_exits.block_processing import ExitBlockProcessor
from triggerable_exits.configs import MAINNET_CONFIG
from triggerable_exits.fee_market import FeeMarket
from triggerable_exits.precompile import ExitPrecompile
from triggerable_exits.queue import ExitQueue
from triggerable_exits.tools.factories import (
    ExitRequestFactory,
    PrecompileStorageFactory,
)
from triggerable_exits.tools.transfers import RecordingValueTransfer


@pytest.fixture
def config():
    return MAINNET_CONFIG


@pytest.fixture
def storage(config):
    return PrecompileStorageFactory(address=config.PRECOMPILE_ADDRESS)


@pytest.fixture
def value_transfer():
    return RecordingValueTransfer()


@pytest.fixture
def fee_market(storage, config):
    return FeeMarket(storage, config)


@pytest.fixture
def queue(storage):
    return ExitQueue(storage)


@pytest.fixture
def precompile(storage, config, value_transfer):
    return ExitPrecompile(storage, config, value_transfer)


@pytest.fixture
def processor(storage, config, value_transfer):
    return ExitBlockProcessor(storage, config, value_transfer)


@pytest.fixture
def fill_queue(queue):
    def _fill_queue(count):
        exit_requests = tuple(ExitRequestFactory.create_batch(count))
        for exit_request in exit_requests:
            queue.enqueue(exit_request)
        return exit_requests
    return _fill_queue
