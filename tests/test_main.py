"""Tests for the game loop controller."""

import pytest

from conftest import FakeTerminal, ScriptedRandom
from river_raid.components import PlayerStatus
from river_raid.main import (
    GameState, run_session,
    PHASE_TITLE, PHASE_PLAYING, PHASE_GAME_OVER,
)
from river_raid.projectiles import iter_bullets


@pytest.fixture
def game(term, quiet_rng):
    """Game on a 40x20 fake terminal with a quiet random source."""
    return GameState(term, rng=quiet_rng)


@pytest.fixture
def playing(game, term):
    """Game that has left the title screen."""
    term.feed('x')
    game.tick()
    assert game.phase == PHASE_PLAYING
    return game


class TestTitle:
    """Welcome screen behavior."""

    def test_starts_on_title(self, game):
        assert game.phase == PHASE_TITLE
        assert game.world is None
        assert game.running

    def test_idle_stays_on_title(self, game):
        game.tick()
        assert game.phase == PHASE_TITLE

    def test_any_key_starts(self, game, term):
        term.feed('KEY_F1')
        game.tick()
        assert game.phase == PHASE_PLAYING
        assert game.world.max_columns == 40
        assert game.world.max_rows == 20

    @pytest.mark.parametrize('key', ['q', 'KEY_ESCAPE'])
    def test_quit_from_title(self, game, term, key):
        term.feed(key)
        game.tick()
        assert not game.running
        assert game.world is None


class TestPlaying:
    """One tick per loop iteration while alive."""

    def test_tick_runs_physics_once(self, playing):
        # The starting key also ran the first tick
        assert playing.world.ticks == 1
        playing.tick()
        assert playing.world.ticks == 2

    def test_burst_applies_only_first_key(self, playing, term):
        term.feed(['d', 'd', 'd', ' '])
        playing.tick()
        assert playing.world.player.x == 21
        assert term.pending == 0
        assert list(iter_bullets(playing.world.entities)) == []

    def test_fire(self, playing, term):
        term.feed(' ')
        playing.tick()
        assert len(list(iter_bullets(playing.world.entities))) == 1

    def test_quit_skips_game_over(self, playing, term):
        term.feed('q')
        playing.tick()
        assert not playing.running
        assert playing.phase == PHASE_PLAYING
        assert playing.world.ticks == 1

    def test_death_shows_game_over(self, playing, term):
        playing.world.player.x = 2
        playing.tick()
        assert playing.world.status == PlayerStatus.DEAD
        assert playing.phase == PHASE_GAME_OVER
        assert playing.running

        # Goodbye screen waits for a key
        playing.tick()
        assert playing.running
        term.feed('x')
        playing.tick()
        assert not playing.running


class TestRender:

    def test_frames_written_to_stdout(self, playing, capsys):
        capsys.readouterr()
        playing.world.player.x = 21
        playing.render()
        out = capsys.readouterr().out
        assert '<c51>P' in out

    def test_goodbye_reports_ticks(self, playing):
        playing.tick()
        playing.world.player.x = 2
        playing.tick()
        playing.render()
        front = playing.renderer.buffer.front
        text = '\n'.join(''.join(cell.char for cell in row) for row in front)
        assert 'TICKS SURVIVED: 3' in text
        assert 'THANKS FOR PLAYING' in text


class TestRunSession:
    """The paced main loop."""

    def test_runs_until_quit(self, capsys):
        term = FakeTerminal(40, 20)
        term.feed('x', [], [], 'KEY_LEFT', [], 'q')
        game = GameState(term, rng=ScriptedRandom())
        sleeps = []

        run_session(game, sleep=sleeps.append)

        assert not game.running
        assert game.world.ticks == 5
        assert game.world.player.x == 19
        assert all(0 < s <= 0.1 for s in sleeps)
        assert capsys.readouterr().out.startswith('<home><clear>')

    def test_runs_until_death_acknowledged(self):
        term = FakeTerminal(40, 20)
        term.feed('x', *(['a'] * 30), 'x')
        game = GameState(term, rng=ScriptedRandom())

        run_session(game, sleep=lambda s: None)

        assert game.world.status == PlayerStatus.DEAD
        assert not game.running
