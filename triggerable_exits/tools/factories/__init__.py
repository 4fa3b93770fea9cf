from .exits import (  # noqa: F401
    ExitRequestFactory,
    mk_address,
    mk_validator_pubkey,
)
from .processor import (  # noqa: F401
    ExitBlockProcessorFactory,
    PrecompileStorageFactory,
)
