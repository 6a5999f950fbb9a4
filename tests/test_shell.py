"""
Tests for the pygame presentation shell and key bindings.
Uses the mocked pygame module from conftest.
"""

from unittest.mock import MagicMock


class TestKeyBindings:
    """Tests for key to command mapping."""

    def test_bindings(self, mock_pygame_module):
        from invaders.shell.controls import command_for_key
        from invaders.game.engine import Command

        assert command_for_key(mock_pygame_module.K_LEFT) == Command.MOVE_LEFT
        assert command_for_key(mock_pygame_module.K_a) == Command.MOVE_LEFT
        assert command_for_key(mock_pygame_module.K_RIGHT) == Command.MOVE_RIGHT
        assert command_for_key(mock_pygame_module.K_d) == Command.MOVE_RIGHT
        assert command_for_key(mock_pygame_module.K_SPACE) == Command.FIRE
        assert command_for_key(mock_pygame_module.K_r) == Command.RESTART

    def test_unbound_key(self, mock_pygame_module):
        from invaders.shell.controls import command_for_key

        assert command_for_key(mock_pygame_module.K_UP) is None


def make_shell(engine):
    from invaders.shell.app import GameShell

    renderer = MagicMock()
    renderer.get_preferred_size.return_value = (604, 474)
    return GameShell(engine, renderer)


def end_round(engine, arrange):
    arrange(engine, [(100, 380)], direction=1)
    engine.tick()
    assert engine.is_terminal


class TestEventHandling:
    """Tests for GameShell.handle_event."""

    def test_left_key_moves_player(self, engine, key_event, mock_pygame_module):
        shell = make_shell(engine)

        assert shell.handle_event(key_event(mock_pygame_module.K_LEFT)) is True
        assert engine.snapshot().player_x == 255

    def test_space_fires(self, engine, key_event, mock_pygame_module):
        shell = make_shell(engine)

        shell.handle_event(key_event(mock_pygame_module.K_SPACE))

        assert len(engine.snapshot().projectiles) == 1

    def test_escape_quits(self, engine, key_event, mock_pygame_module):
        shell = make_shell(engine)

        assert shell.handle_event(key_event(mock_pygame_module.K_ESCAPE)) is False

    def test_window_close_quits(self, engine, mock_pygame_module):
        shell = make_shell(engine)

        assert shell.handle_event(MagicMock(type=mock_pygame_module.QUIT)) is False

    def test_other_events_ignored(self, engine, key_event, mock_pygame_module):
        shell = make_shell(engine)
        before = engine.snapshot()

        assert shell.handle_event(MagicMock(type=mock_pygame_module.MOUSEBUTTONDOWN)) is True
        assert shell.handle_event(key_event(mock_pygame_module.K_UP)) is True
        assert engine.snapshot() == before

    def test_input_suppressed_after_game_over(self, engine, arrange, key_event, mock_pygame_module):
        shell = make_shell(engine)
        end_round(engine, arrange)
        before = engine.snapshot()

        shell.handle_event(key_event(mock_pygame_module.K_LEFT))
        shell.handle_event(key_event(mock_pygame_module.K_SPACE))

        assert engine.snapshot() == before

    def test_restart_key_resumes_ticking(self, engine, arrange, key_event, mock_pygame_module):
        from invaders.game.engine import SimulationEngine

        shell = make_shell(engine)
        end_round(engine, arrange)
        shell.update(20)
        assert shell.scheduler.running is False

        shell.handle_event(key_event(mock_pygame_module.K_r))

        assert engine.snapshot() == SimulationEngine().snapshot()
        assert shell.scheduler.running is True
        assert shell.update(20) == 1


class TestUpdateAndDraw:
    """Tests for the per-frame update and draw."""

    def test_update_runs_ticks(self, engine):
        shell = make_shell(engine)

        assert shell.update(60) == 3
        assert engine.snapshot().frame == 3

    def test_high_score_recorded_at_round_end(self, engine, arrange):
        shell = make_shell(engine)
        arrange(engine, [(100, 100)], direction=1, projectiles=[(130, 120)])

        shell.update(20)

        assert engine.score == 10
        assert shell.high_score == 10

    def test_draw_passes_snapshot(self, engine):
        from invaders.game.engine import Snapshot

        shell = make_shell(engine)
        surface = MagicMock()

        shell.draw(surface)

        snapshot, target = shell.renderer.render.call_args[0]
        assert isinstance(snapshot, Snapshot)
        assert target is surface


class TestRunLoop:
    """Tests for the main loop against the mocked pygame."""

    def test_run_until_quit(self, engine, mock_pygame_module):
        from invaders.game.renderer import InvadersRenderer
        from invaders.shell.app import GameShell

        quit_event = MagicMock(type=mock_pygame_module.QUIT)
        mock_pygame_module.event.get.side_effect = [[], [quit_event]]
        mock_pygame_module.quit.reset_mock()
        try:
            shell = GameShell(engine, InvadersRenderer())
            shell.run()
        finally:
            mock_pygame_module.event.get.side_effect = None

        mock_pygame_module.display.set_mode.assert_called_with((604, 474))
        mock_pygame_module.key.set_repeat.assert_called_with(200, 50)
        mock_pygame_module.quit.assert_called_once()
        # Two 16 ms frames make one 20 ms tick
        assert engine.snapshot().frame == 1
