import pytest

from eth.constants import BLANK_ROOT_HASH
from eth_utils import ValidationError

from triggerable_exits._utils.trie import make_exits_root
from triggerable_exits.block_validation import (
    get_expected_exits,
    validate_block_exits,
)
from triggerable_exits.exceptions import (
    BlockCommitmentMismatch,
    BlockContentMismatch,
    InvalidExitBlock,
)
from triggerable_exits.tools.factories import ExitRequestFactory


def test_empty_queue_expects_empty_block(queue, config):
    assert validate_block_exits(queue, config, BLANK_ROOT_HASH, ()) == ()


def test_expected_exits_are_capped(queue, config, fill_queue):
    exit_requests = fill_queue(20)
    assert get_expected_exits(queue, config) == exit_requests[:16]


def test_valid_block_exits(queue, config, fill_queue):
    exit_requests = fill_queue(20)
    declared = exit_requests[:16]

    expected = validate_block_exits(queue, config, make_exits_root(declared), declared)

    assert expected == declared
    # validation never moves the queue
    assert queue.head_index == 0
    assert queue.tail_index == 20


def test_fewer_pending_than_max(queue, config, fill_queue):
    exit_requests = fill_queue(3)
    assert validate_block_exits(
        queue, config, make_exits_root(exit_requests), exit_requests,
    ) == exit_requests


def test_wrong_exits_root(queue, config, fill_queue):
    exit_requests = fill_queue(4)
    with pytest.raises(BlockCommitmentMismatch):
        validate_block_exits(queue, config, make_exits_root(exit_requests[:3]), exit_requests)


def test_exits_root_over_declared_short_list(queue, config, fill_queue):
    exit_requests = fill_queue(20)
    declared = exit_requests[:15]
    with pytest.raises(BlockCommitmentMismatch):
        validate_block_exits(queue, config, make_exits_root(declared), declared)


def test_self_consistent_wrong_body_fails_commitment(queue, config, fill_queue):
    fill_queue(2)
    declared = tuple(ExitRequestFactory.create_batch(2))
    # the header root matches the body, but not the exits the queue mandates
    with pytest.raises(BlockCommitmentMismatch):
        validate_block_exits(queue, config, make_exits_root(declared), declared)


def test_missing_exit(queue, config, fill_queue):
    exit_requests = fill_queue(20)
    expected_root = make_exits_root(exit_requests[:16])
    with pytest.raises(BlockContentMismatch):
        validate_block_exits(queue, config, expected_root, exit_requests[:15])


def test_extra_unrelated_exit(queue, config, fill_queue):
    exit_requests = fill_queue(20)
    expected_root = make_exits_root(exit_requests[:16])
    declared = exit_requests[:16] + (ExitRequestFactory(),)
    with pytest.raises(BlockContentMismatch):
        validate_block_exits(queue, config, expected_root, declared)


def test_reordered_exits(queue, config, fill_queue):
    exit_requests = fill_queue(20)
    expected_root = make_exits_root(exit_requests[:16])
    declared = (exit_requests[1], exit_requests[0]) + exit_requests[2:16]
    with pytest.raises(BlockContentMismatch):
        validate_block_exits(queue, config, expected_root, declared)


def test_substituted_exit(queue, config, fill_queue):
    exit_requests = fill_queue(2)
    declared = (exit_requests[0], ExitRequestFactory())
    with pytest.raises(BlockContentMismatch):
        validate_block_exits(queue, config, make_exits_root(exit_requests), declared)


def test_block_errors_are_validation_errors():
    assert issubclass(BlockCommitmentMismatch, InvalidExitBlock)
    assert issubclass(BlockContentMismatch, InvalidExitBlock)
    assert issubclass(InvalidExitBlock, ValidationError)
