try:
    import factory
except ImportError:
    raise ImportError(
        "The triggerable_exits.tools.factories module requires the `factory_boy` library."
    )

from eth.db.atomic import AtomicDB

from triggerable_exits.block_processing import ExitBlockProcessor
from triggerable_exits.configs import MAINNET_CONFIG
from triggerable_exits.db.storage import PrecompileStorage
from triggerable_exits.tools.transfers import RecordingValueTransfer


class PrecompileStorageFactory(factory.Factory):
    class Meta:
        model = PrecompileStorage

    address = MAINNET_CONFIG.PRECOMPILE_ADDRESS
    db = factory.LazyFunction(AtomicDB)


class ExitBlockProcessorFactory(factory.Factory):
    class Meta:
        model = ExitBlockProcessor

    config = MAINNET_CONFIG
    storage = factory.LazyAttribute(
        lambda o: PrecompileStorageFactory(address=o.config.PRECOMPILE_ADDRESS)
    )
    value_transfer = factory.LazyFunction(RecordingValueTransfer)
    consumer = None
