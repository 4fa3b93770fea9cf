import argparse
from importlib import metadata
import json
import logging
import pathlib
import secrets
import sys
from typing import Sequence

import argcomplete
from eth_typing import Address, BLSPubkey
from eth_utils.logging import DEBUG2_LEVEL_NUM

from triggerable_exits._utils.logging import setup_stderr_logging
from triggerable_exits._utils.trie import make_exits_root
from triggerable_exits.block_processing import ExitBlockProcessor
from triggerable_exits.block_validation import get_expected_exits
from triggerable_exits.configs import ExitConfig, MAINNET_CONFIG
from triggerable_exits.constants import ADDRESS_SIZE, VALIDATOR_PUBKEY_SIZE
from triggerable_exits.db.storage import PrecompileStorage
from triggerable_exits.exceptions import AdmissionError
from triggerable_exits.fee_market import calculate_exit_fee
from triggerable_exits.tools.transfers import RecordingValueTransfer

LOG_LEVEL_CHOICES = {
    'DEBUG2': DEBUG2_LEVEL_NUM,
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
}

logger = logging.getLogger('triggerable_exits.cli')


def get_version() -> str:
    try:
        return metadata.version('triggerable-exits')
    except metadata.PackageNotFoundError:
        return 'unknown'


def load_config(path: pathlib.Path) -> ExitConfig:
    if path is None:
        return MAINNET_CONFIG
    with path.open() as config_file:
        return ExitConfig.from_formatted_dict(json.load(config_file))


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative, got {number}")
    return number


def _fee(config: ExitConfig, arguments: argparse.Namespace) -> None:
    print(calculate_exit_fee(arguments.excess, config))


def _simulate(config: ExitConfig, arguments: argparse.Namespace) -> None:
    processor = ExitBlockProcessor(
        PrecompileStorage(config.PRECOMPILE_ADDRESS),
        config,
        RecordingValueTransfer(),
    )
    print("block  fee  admitted  dequeued  pending  excess")
    for block_number in range(1, arguments.blocks + 1):
        fee = processor.fee_market.current_fee()
        processor.begin_block()
        admitted = 0
        for _ in range(arguments.exits_per_block):
            payment = processor.fee_market.current_fee()
            if arguments.budget is not None and payment > arguments.budget:
                break
            try:
                processor.trigger_exit(
                    Address(secrets.token_bytes(ADDRESS_SIZE)),
                    payment,
                    BLSPubkey(secrets.token_bytes(VALIDATOR_PUBKEY_SIZE)),
                )
            except AdmissionError as err:
                logger.warning("Admission failed in block %d: %s", block_number, err)
            else:
                admitted += 1

        expected_exits = get_expected_exits(processor.queue, config)
        processor.validate_block(make_exits_root(expected_exits), expected_exits)
        dequeued = processor.finalize_block()
        print(
            f"{block_number:5d}  {fee:3d}  {admitted:8d}  {len(dequeued):8d}  "
            f"{processor.queue.pending_count():7d}  {processor.fee_market.excess_exits:6d}"
        )


parser = argparse.ArgumentParser(description='Execution layer triggerable validator exits')
parser.add_argument('--version', action='version', version=get_version())
parser.add_argument(
    '--log-level',
    choices=tuple(LOG_LEVEL_CHOICES),
    default='WARNING',
    help="Logging level for output on stderr",
)
parser.add_argument(
    '--config',
    type=pathlib.Path,
    default=None,
    help="JSON file with configuration overrides (defaults to the mainnet configuration)",
)
subparser = parser.add_subparsers(dest='subcommand')

fee_parser = subparser.add_parser('fee', help="print the exit fee for a given excess")
fee_parser.add_argument('--excess', type=non_negative_int, required=True, help="excess exits")
fee_parser.set_defaults(func=_fee)

simulate_parser = subparser.add_parser(
    'simulate',
    help="run blocks of exit requests through the queue and fee market in memory",
)
simulate_parser.add_argument('--blocks', type=non_negative_int, default=10, help="number of blocks")
simulate_parser.add_argument(
    '--exits-per-block',
    type=non_negative_int,
    default=4,
    help="exit requests submitted in each block",
)
simulate_parser.add_argument(
    '--budget',
    type=non_negative_int,
    default=None,
    help="highest fee a requester is willing to pay",
)
simulate_parser.set_defaults(func=_simulate)


def main(argv: Sequence[str] = None) -> None:
    argcomplete.autocomplete(parser)
    arguments = parser.parse_args(argv)
    if arguments.subcommand is None:
        parser.print_help()
        sys.exit(2)

    setup_stderr_logging(LOG_LEVEL_CHOICES[arguments.log_level])
    try:
        config = load_config(arguments.config)
    except (OSError, ValueError) as err:
        parser.error(f"Invalid configuration: {err}")

    arguments.func(config, arguments)
