import pytest

from eth.constants import BLANK_ROOT_HASH
import rlp
from trie import HexaryTrie

from triggerable_exits._utils.trie import (
    make_exits_root,
    make_exits_trie_root_and_nodes,
)
from triggerable_exits.rlp.block_body import BlockBody
from triggerable_exits.rlp.exits import ExitRequest
from triggerable_exits.tools.factories import ExitRequestFactory


def test_exit_request_rlp():
    exit_request = ExitRequest(b'\x01' * 20, b'\x02' * 48)

    encoded = rlp.encode(exit_request)

    assert encoded == rlp.encode([b'\x01' * 20, b'\x02' * 48])
    assert rlp.decode(encoded, sedes=ExitRequest) == exit_request


@pytest.mark.parametrize(
    'source_address, validator_pubkey',
    (
        (b'\x01' * 19, b'\x02' * 48),
        (b'\x01' * 20, b'\x02' * 47),
        (b'\x01' * 20, b'\x02' * 96),
    ),
)
def test_exit_request_field_sizes(source_address, validator_pubkey):
    with pytest.raises(rlp.SerializationError):
        rlp.encode(ExitRequest(source_address, validator_pubkey))


def test_exit_request_is_immutable():
    exit_request = ExitRequestFactory()
    with pytest.raises(AttributeError):
        exit_request.source_address = b'\x00' * 20


def test_exit_request_str():
    exit_request = ExitRequest(b'\x01' * 20, b'\x02' * 48)
    assert str(exit_request) == f"source_address=0x{'01' * 20}, validator_pubkey=0202..0202"


def test_block_body_with_exits():
    exits = tuple(ExitRequestFactory.create_batch(3))
    body = BlockBody(exits=exits)

    decoded = rlp.decode(rlp.encode(body), sedes=BlockBody)

    assert decoded.exits == exits
    assert len(decoded.transactions) == 0
    assert len(decoded.uncles) == 0


def test_empty_exits_root():
    assert make_exits_root(()) == BLANK_ROOT_HASH


def test_exits_root_depends_on_order():
    first, second = ExitRequestFactory.create_batch(2)
    assert make_exits_root((first, second)) != make_exits_root((second, first))


def test_exits_root_uses_indexed_trie():
    exits = tuple(ExitRequestFactory.create_batch(5))

    root_hash, nodes = make_exits_trie_root_and_nodes(exits)

    # same scheme as the transaction and receipt roots
    indexed_trie = HexaryTrie({})
    for index, exit_request in enumerate(exits):
        indexed_trie[rlp.encode(index)] = rlp.encode(exit_request)
    assert indexed_trie.root_hash == root_hash
    assert root_hash in nodes
    assert make_exits_root(exits) == root_hash
