from .configs import (  # noqa: F401
    ExitConfig,
    MAINNET_CONFIG,
)
from .block_processing import ExitBlockProcessor  # noqa: F401
from .fee_market import FeeMarket  # noqa: F401
from .precompile import ExitPrecompile  # noqa: F401
from .queue import ExitQueue  # noqa: F401
from .rlp.exits import ExitRequest  # noqa: F401
