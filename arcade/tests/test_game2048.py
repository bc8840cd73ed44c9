"""
Tests for the 2048 engine.

Tests:
- Line sliding and merging
- Whole-board moves and spawns
- Win / loss detection and keep-playing
- Snapshot load
"""

import pytest

from ..engine_core.action import Action
from ..engine_core.errors import SnapshotError
from ..engine_core.grid import Direction
from ..engine_core.rng import make_rng
from ..games.game2048 import (
    Game2048Reducer,
    Game2048State,
    GameStatus,
    has_moves,
    move,
    slide_left,
    spawn_random,
    empty_board,
)
from .conftest import ScriptedRandom


def board_with(cells: dict) -> tuple:
    board = [0] * 16
    for i, v in cells.items():
        board[i] = v
    return tuple(board)


class TestSlideLeft:
    """Single-line compress and merge."""

    def test_pair_merges(self):
        """[2,2,0,0] -> [4,0,0,0] for 4 points."""
        result = slide_left([2, 2, 0, 0])
        assert result.line == (4, 0, 0, 0)
        assert result.moved
        assert result.score_delta == 4

    def test_leftmost_pair_merges_first(self):
        """[2,0,2,2] -> [4,2,0,0]: the leftmost pair merges, once."""
        result = slide_left([2, 0, 2, 2])
        assert result.line == (4, 2, 0, 0)
        assert result.moved
        assert result.score_delta == 4

    def test_two_pairs(self):
        """[2,2,2,2] -> [4,4,0,0]."""
        result = slide_left([2, 2, 2, 2])
        assert result.line == (4, 4, 0, 0)
        assert result.score_delta == 8

    def test_merged_tile_does_not_merge_again(self):
        """[4,4,8,0] -> [8,8,0,0], not [16,0,0,0]."""
        result = slide_left([4, 4, 8, 0])
        assert result.line == (8, 8, 0, 0)
        assert result.score_delta == 8

    def test_compress_without_merge(self):
        """Sliding into empty space counts as a move with no score."""
        result = slide_left([0, 0, 0, 2])
        assert result.line == (2, 0, 0, 0)
        assert result.moved
        assert result.score_delta == 0

    def test_blocked_line(self):
        """A packed line with no pairs does not move."""
        result = slide_left([2, 4, 8, 16])
        assert result.line == (2, 4, 8, 16)
        assert not result.moved


class TestMove:
    """Whole-board moves."""

    def test_move_right(self):
        """Tiles pack against the right edge."""
        result = move(board_with({0: 2, 1: 2}), Direction.RIGHT)
        assert result.board == board_with({3: 4})
        assert result.score_delta == 4

    def test_move_up(self):
        """Columns slide toward row 0."""
        result = move(board_with({4: 2, 12: 2}), Direction.UP)
        assert result.board == board_with({0: 4})

    def test_move_down(self):
        """Columns slide toward the bottom row."""
        result = move(board_with({1: 8}), Direction.DOWN)
        assert result.board == board_with({13: 8})

    def test_no_move(self):
        """A move that changes nothing reports moved=False."""
        result = move(board_with({0: 2}), Direction.LEFT)
        assert not result.moved
        assert result.board == board_with({0: 2})


class TestSpawnAndMoves:
    """Spawning and move availability."""

    def test_spawn_draws_position_then_value(self):
        """First draw picks the cell, second picks 2 (below 0.9) or 4."""
        board = spawn_random(empty_board(), ScriptedRandom([0.5, 0.95]))
        assert board == board_with({8: 4})

        board = spawn_random(empty_board(), ScriptedRandom([0.0, 0.3]))
        assert board == board_with({0: 2})

    def test_spawn_on_full_board(self):
        """A full board is returned unchanged."""
        full = tuple([2, 4] * 8)
        assert spawn_random(full, ScriptedRandom([0.0])) == full

    def test_has_moves_with_empty_cell(self):
        assert has_moves(board_with({0: 2}))

    def test_checkerboard_has_no_moves(self):
        """Full board with no adjacent equal pair is stuck."""
        board = (
            2, 4, 2, 4,
            4, 2, 4, 2,
            2, 4, 2, 4,
            4, 2, 4, 2,
        )
        assert not has_moves(board)

    def test_adjacent_pair_is_a_move(self):
        """One vertical pair is enough."""
        board = (
            2, 4, 2, 4,
            2, 8, 4, 2,
            16, 4, 2, 4,
            4, 2, 4, 2,
        )
        assert has_moves(board)

    def test_tile_count_grows_by_at_most_one(self):
        """Across random play, a move plus spawn adds at most one tile."""
        reducer = Game2048Reducer(rng=make_rng(7))
        state = reducer.apply(reducer.initial_state(), Action.new_game())
        directions = list(Direction)
        chooser = make_rng(11)
        for _ in range(200):
            before = sum(1 for v in state.board if v)
            state = reducer.apply(state, Action.move(chooser.choice(directions)))
            assert sum(1 for v in state.board if v) <= before + 1
            if state.status is not GameStatus.PLAYING:
                break


class TestReducer:
    """2048 transitions."""

    @pytest.fixture
    def reducer(self, first_free_rng):
        return Game2048Reducer(rng=first_free_rng)

    def playing(self, cells: dict, **kwargs) -> Game2048State:
        return Game2048State(board=board_with(cells), **kwargs)

    def test_new_game_scenario(self, reducer):
        """New game, two forced spawns, then a merging move left."""
        state = reducer.apply(reducer.initial_state(), Action.new_game())
        assert state.board == board_with({0: 2, 1: 2})
        assert state.status is GameStatus.PLAYING

        state = reducer.apply(state, Action.move(Direction.LEFT))
        # merged 4 on the left, then a spawn on the first free cell
        assert state.board == board_with({0: 4, 1: 2})
        assert state.score == 4
        assert state.best == 4
        assert state.moved_last is Direction.LEFT
        assert state.status is GameStatus.PLAYING

    def test_win_then_keep_playing(self, reducer):
        """Win fires at 2048; keep-playing moves the target to 4096."""
        state = self.playing({0: 1024, 1: 1024})
        state = reducer.apply(state, Action.move(Direction.LEFT))
        assert state.status is GameStatus.WON
        assert state.won_at == 2048
        assert state.score == 2048

        # moves are ignored until the win is acknowledged
        assert reducer.apply(state, Action.move(Direction.RIGHT)) is state

        state = reducer.apply(state, Action.keep_playing())
        assert state.status is GameStatus.PLAYING
        assert state.win_target == 4096

    def test_win_only_fires_at_target(self, reducer):
        """After keep-playing, another 2048 does not win; 4096 does."""
        state = self.playing({0: 2048, 1: 1024, 2: 1024}, win_target=4096)
        state = reducer.apply(state, Action.move(Direction.LEFT))
        assert state.board[:2] == (2048, 2048)
        assert state.status is GameStatus.PLAYING

        state = reducer.apply(state, Action.move(Direction.LEFT))
        assert state.board[0] == 4096
        assert state.status is GameStatus.WON
        assert state.won_at == 4096

    def test_keep_playing_only_after_win(self, reducer):
        """KEEP_PLAYING while playing is a no-op."""
        state = self.playing({0: 2})
        assert reducer.apply(state, Action.keep_playing()) is state

    def test_loss_detected(self, reducer):
        """A move that leaves a full stuck board loses."""
        # Row 0 slides left, the spawn fills the last gap with a 2
        state = self.playing({
            0: 0, 1: 4, 2: 8, 3: 16,
            4: 8, 5: 16, 6: 32, 7: 64,
            8: 16, 9: 32, 10: 64, 11: 128,
            12: 32, 13: 64, 14: 128, 15: 256,
        })
        state = reducer.apply(state, Action.move(Direction.LEFT))
        assert state.board[:4] == (4, 8, 16, 2)
        assert state.status is GameStatus.LOST

    def test_noop_move_returns_same_state(self, reducer):
        """A move that changes nothing does not spawn."""
        state = self.playing({0: 2})
        assert reducer.apply(state, Action.move(Direction.LEFT)) is state

    def test_new_game_keeps_best(self, reducer):
        """Best survives a new game; score does not."""
        state = self.playing({0: 2}, score=300, best=500)
        state = reducer.apply(state, Action.new_game())
        assert state.score == 0
        assert state.best == 500
        assert state.win_target == 2048

    def test_reset_best(self, reducer):
        state = self.playing({0: 2}, best=500)
        assert reducer.apply(state, Action.reset_best()).best == 0

    def test_unsupported_action_is_noop(self, reducer):
        """Actions from other games are ignored."""
        state = self.playing({0: 2})
        assert reducer.apply(state, Action.click(0)) is state


class TestLoad:
    """Snapshot restore."""

    @pytest.fixture
    def reducer(self, first_free_rng):
        return Game2048Reducer(rng=first_free_rng)

    def test_load_own_snapshot(self, reducer):
        """Loading a state's own snapshot gives an equal state."""
        state = reducer.apply(reducer.initial_state(), Action.new_game())
        state = reducer.apply(state, Action.move(Direction.LEFT))
        loaded = reducer.apply(reducer.initial_state(), Action.load(state.to_snapshot()))
        assert loaded == state

    def test_load_partial_keeps_best(self, reducer):
        """Missing fields default; missing best keeps the current best."""
        state = Game2048State(board=empty_board(), best=900)
        loaded = reducer.apply(state, Action.load({"board": list(board_with({5: 8}))}))
        assert loaded.board == board_with({5: 8})
        assert loaded.best == 900
        assert loaded.score == 0
        assert loaded.status is GameStatus.PLAYING

    def test_load_without_board_fails(self, reducer):
        with pytest.raises(SnapshotError):
            reducer.apply(reducer.initial_state(), Action.load({"score": 10}))

    def test_load_rejects_bad_tiles(self, reducer):
        """Tiles must be powers of two."""
        board = [0] * 16
        board[0] = 3
        with pytest.raises(SnapshotError):
            reducer.apply(reducer.initial_state(), Action.load({"board": board}))
