"""Tests for LocalWorld hybrid storage.

Critical Invariants:
- write then read returns the written state for every 16-bit state
- Overflow entries are never shadowed by a dense chunk
- contains_block(pos) == (read_block_state(pos) != NO_BLOCK)
- Buffers are fresh on every write of a buffer-requiring state and released otherwise
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from blockworld import (
    BlockBufferExact,
    BlockPos,
    BlockReadExact,
    BlockRegistry,
    BlockWriteExact,
    Chunk,
    ChunkPos,
    ChunkReadExact,
    ChunkWriteExact,
    LocalWorld,
    MissingBufferError,
    PositionOutOfRangeError,
    RegistryOwner,
    WorldSettings,
)
from blockworld.core.position import encode
from blockworld.core.types import MAX_STATE, NO_BLOCK

BUFFERED_DENSE_STATE = 7
BUFFERED_OVERFLOW_STATE = 300

positions = st.builds(
    BlockPos.from_xyz,
    st.integers(min_value=-100, max_value=100),
    st.integers(min_value=0, max_value=255),
    st.integers(min_value=-100, max_value=100),
)
states = st.one_of(
    st.just(NO_BLOCK),
    st.integers(min_value=1, max_value=255),
    st.integers(min_value=256, max_value=MAX_STATE),
    st.sampled_from([BUFFERED_DENSE_STATE, BUFFERED_OVERFLOW_STATE]),
)


def _world() -> LocalWorld:
    """World whose registry flags one dense and one overflow state as buffered."""
    registry = BlockRegistry()
    registry.set_buffer_requirement(BUFFERED_DENSE_STATE, True)
    registry.set_buffer_requirement(BUFFERED_OVERFLOW_STATE, True)
    return LocalWorld(registry, settings=WorldSettings(_env_file=None))


@given(pos=positions, state=states)
def test_write_then_read_returns_state(pos, state):
    """PROPERTY: a single write is read back exactly, in every tier."""
    world = _world()

    world.write_block_state(pos, state)

    assert world.read_block_state(pos) == state


@given(writes=st.lists(st.tuples(positions, states), max_size=40), other=positions)
def test_contains_and_buffers_follow_any_writes(writes, other):
    """PROPERTY: after any write sequence, contains_block agrees with
    read_block_state and a buffer exists exactly where the state requires one."""
    world = _world()
    expected: dict[BlockPos, int] = {}
    for pos, state in writes:
        world.write_block_state(pos, state)
        expected[pos] = state

    for pos in [*expected, other]:
        state = world.read_block_state(pos)
        assert state == expected.get(pos, NO_BLOCK)
        assert world.contains_block(pos) == (state != NO_BLOCK)
        assert world.has_block_buffer(pos) == world.registry.requires_buffer(state)
    assert world.buffer_count == sum(
        world.registry.requires_buffer(state) for state in expected.values()
    )


def test_aliased_packed_positions_share_storage(world, registry):
    """CRITICAL: a signed-long wire value addresses the same overflow entry and buffer.

    Why: overflow and buffer maps are keyed by the packed value.
    """
    banner = 300
    registry.set_buffer_requirement(banner, True)
    alias = BlockPos.from_packed(encode(-5, 10, 7) - (1 << 64))
    canonical = BlockPos.from_xyz(-5, 10, 7)

    world.write_block_state(alias, banner)
    world.block_buffer_mut(alias).extend(b"text")

    assert world.read_block_state(canonical) == banner
    assert world.block_buffer(canonical) == b"text"
    assert world.overflow_count == 1


def test_world_implements_all_capabilities(world):
    for protocol in (
        BlockReadExact,
        BlockWriteExact,
        BlockBufferExact,
        ChunkReadExact,
        ChunkWriteExact,
        RegistryOwner,
    ):
        assert isinstance(world, protocol)


def test_unwritten_positions_read_as_no_block(world):
    pos = BlockPos.from_xyz(5, 5, 5)

    assert world.read_block_state(pos) == NO_BLOCK
    assert not world.contains_block(pos)
    assert world.chunk_count == 0


def test_overflow_survives_chunk_creation(world):
    """CRITICAL: state 300 at P stays readable after a dense write creates P's chunk."""
    p = BlockPos.from_xyz(1, 10, 1)
    q = BlockPos.from_xyz(2, 10, 2)

    world.write_block_state(p, 300)
    assert world.chunk_count == 0
    world.write_block_state(q, 5)

    assert world.read_block_state(p) == 300
    assert world.read_block_state(q) == 5
    assert world.chunk_count == 1
    assert world.overflow_count == 1


def test_dense_write_replaces_overflow_entry(world):
    pos = BlockPos.from_xyz(0, 0, 0)

    world.write_block_state(pos, 1000)
    world.write_block_state(pos, 7)

    assert world.read_block_state(pos) == 7
    assert world.overflow_count == 0


def test_overflow_write_replaces_dense_cell(world):
    pos = BlockPos.from_xyz(0, 0, 0)

    world.write_block_state(pos, 7)
    world.write_block_state(pos, 1000)
    world.write_block_state(pos, NO_BLOCK)

    assert world.read_block_state(pos) == NO_BLOCK


def test_delete_clears_dense_cell(world):
    pos = BlockPos.from_xyz(3, 4, 5)

    world.write_block_state(pos, 9)
    world.write_block_state(pos, NO_BLOCK)

    assert world.read_block_state(pos) == NO_BLOCK
    assert not world.contains_block(pos)


def test_stale_dense_policy_is_opt_in(registry):
    """Historical policy: deleting leaves the dense byte readable."""
    with pytest.warns(UserWarning, match="preserve_stale_dense_on_delete"):
        world = LocalWorld(
            registry,
            settings=WorldSettings(_env_file=None, preserve_stale_dense_on_delete=True),
        )
    pos = BlockPos.from_xyz(3, 4, 5)

    world.write_block_state(pos, 9)
    world.write_block_state(pos, NO_BLOCK)

    assert world.read_block_state(pos) == 9


@pytest.mark.parametrize("state", [-1, MAX_STATE + 1])
def test_write_rejects_states_outside_16_bits(world, state):
    with pytest.raises(ValueError, match="Block state"):
        world.write_block_state(BlockPos.from_xyz(0, 0, 0), state)


@pytest.mark.parametrize("y", [-1, 256])
def test_positions_outside_chunk_height_raise(world, y):
    pos = BlockPos.from_xyz(0, y, 0)

    with pytest.raises(PositionOutOfRangeError):
        world.write_block_state(pos, 1)
    with pytest.raises(PositionOutOfRangeError):
        world.read_block_state(pos)


def test_negative_coordinates_land_in_floor_chunk(world):
    world.write_block_state(BlockPos.from_xyz(-1, 0, -1), 4)

    assert world.contains_chunk(ChunkPos(-1, -1))
    assert world.read_chunk(ChunkPos(-1, -1)).get(15, 0, 15) == 4


# Buffer lifecycle


def test_buffered_state_gets_empty_buffer(world, registry):
    pos = BlockPos.from_xyz(1, 1, 1)
    sign = registry.id_to_state("sign")

    world.write_block_state(pos, sign)

    assert world.block_buffer(pos) == b""
    assert world.has_block_buffer(pos)


def test_rewrite_discards_previous_buffer_content(world, registry):
    """CRITICAL: a new buffered occupant never sees stale content."""
    pos = BlockPos.from_xyz(1, 1, 1)
    sign = registry.id_to_state("sign")
    world.write_block_state(pos, sign)
    world.block_buffer_mut(pos).extend(b"old text\n")

    world.write_block_state(pos, sign)

    assert world.block_buffer(pos) == b""


def test_unbuffered_state_releases_buffer(world, registry):
    pos = BlockPos.from_xyz(1, 1, 1)
    world.write_block_state(pos, registry.id_to_state("sign"))

    world.write_block_state(pos, registry.id_to_state("stone"))

    assert world.buffer_count == 0
    with pytest.raises(MissingBufferError):
        world.block_buffer(pos)


def test_deleting_buffered_block_releases_buffer(world, registry):
    """CRITICAL: writing NO_BLOCK over a sign drops its buffer."""
    pos = BlockPos.from_xyz(2, 70, -3)
    world.write_block_state(pos, registry.id_to_state("sign"))
    world.block_buffer_mut(pos).extend(b"hello")

    world.write_block_state(pos, NO_BLOCK)

    assert world.buffer_count == 0
    assert not world.has_block_buffer(pos)
    with pytest.raises(MissingBufferError):
        world.block_buffer(pos)


def test_missing_buffer_is_a_contract_violation(world):
    with pytest.raises(MissingBufferError, match="No block buffer"):
        world.block_buffer_mut(BlockPos.from_xyz(0, 0, 0))


def test_overflow_states_can_be_buffered():
    registry = BlockRegistry(first_state=500)
    banner = registry.register("banner", buffered=True)
    world = LocalWorld(registry, settings=WorldSettings(_env_file=None))
    pos = BlockPos.from_xyz(0, 0, 0)

    world.write_block_state(pos, banner)

    assert world.read_block_state(pos) == 500
    assert world.block_buffer(pos) == b""


def test_block_buffer_is_a_snapshot(world, registry):
    pos = BlockPos.from_xyz(1, 1, 1)
    world.write_block_state(pos, registry.id_to_state("sign"))

    snapshot = world.block_buffer(pos)
    world.block_buffer_mut(pos).extend(b"abc")

    assert snapshot == b""
    assert world.block_buffer(pos) == b"abc"


# Chunk primitives


def test_read_chunk_returns_copy(world):
    world.write_block_state(BlockPos.from_xyz(0, 0, 0), 3)

    chunk = world.read_chunk(ChunkPos(0, 0))
    chunk.set(0, 0, 0, 4)

    assert world.read_block_state(BlockPos.from_xyz(0, 0, 0)) == 3


def test_read_absent_chunk_is_empty(world):
    assert world.read_chunk(ChunkPos(9, 9)).is_empty
    assert not world.contains_chunk(ChunkPos(9, 9))


def test_write_chunk_reconciles_overflow_and_buffers(world, registry):
    sign = registry.id_to_state("sign")
    in_chunk = BlockPos.from_xyz(17, 5, 17)
    elsewhere = BlockPos.from_xyz(0, 5, 0)
    world.write_block_state(in_chunk, 400)
    world.write_block_state(elsewhere, 400)

    chunk = Chunk()
    chunk.set(2, 5, 3, sign)
    chunk.set(4, 5, 4, registry.id_to_state("stone"))
    world.write_chunk(ChunkPos(1, 1), chunk)

    assert world.read_block_state(in_chunk) == NO_BLOCK
    assert world.read_block_state(elsewhere) == 400
    assert world.read_block_state(BlockPos.from_xyz(18, 5, 19)) == sign
    assert world.block_buffer(BlockPos.from_xyz(18, 5, 19)) == b""
    assert world.buffer_count == 1
    assert dict(world.iter_chunks())[ChunkPos(1, 1)] == chunk


def test_flush_is_a_noop(world):
    world.write_block_state(BlockPos.from_xyz(0, 0, 0), 1)

    world.flush()

    assert world.read_block_state(BlockPos.from_xyz(0, 0, 0)) == 1


def test_default_registry_uses_configured_first_state():
    world = LocalWorld(settings=WorldSettings(_env_file=None, first_state=7))

    assert world.registry.register("stone") == 7
