import pygame

from neon_snake.config import DOWN, INITIAL_SPEED, LEFT, RIGHT, UP
from neon_snake.controls import direction_for_key, handle_click, handle_key, visible_buttons
from neon_snake.state_machine import RunState


class TestKeys:
    def test_arrows(self):
        assert direction_for_key(pygame.K_UP) == UP
        assert direction_for_key(pygame.K_DOWN) == DOWN
        assert direction_for_key(pygame.K_LEFT) == LEFT
        assert direction_for_key(pygame.K_RIGHT) == RIGHT

    def test_wasd(self):
        assert direction_for_key(pygame.K_w) == UP
        assert direction_for_key(pygame.K_s) == DOWN
        assert direction_for_key(pygame.K_a) == LEFT
        assert direction_for_key(pygame.K_d) == RIGHT

    def test_unknown_key(self):
        assert direction_for_key(pygame.K_q) is None

    def test_unknown_key_has_no_effect(self, machine, scheduler):
        assert not handle_key(machine, pygame.K_q)
        assert machine.run_state is RunState.IDLE
        assert machine.input_queue.pending is None

    def test_direction_key_steers(self, machine):
        assert handle_key(machine, pygame.K_w)
        assert machine.input_queue.pending == UP
        assert machine.run_state is RunState.RUNNING

    def test_space_toggles(self, machine):
        handle_key(machine, pygame.K_SPACE)
        assert machine.run_state is RunState.RUNNING
        handle_key(machine, pygame.K_SPACE)
        assert machine.run_state is RunState.PAUSED


def _button(machine, label):
    return next(b for b in visible_buttons(machine) if b.label == label)


class TestButtons:
    def test_start_button(self, machine):
        handle_click(machine, _button(machine, "Start").rect.center)
        assert machine.run_state is RunState.RUNNING
        assert [b.label for b in visible_buttons(machine)][0] == "Pause"

    def test_pause_button(self, machine):
        machine.start()
        handle_click(machine, _button(machine, "Pause").rect.center)
        assert machine.run_state is RunState.PAUSED

    def test_disabled_restart_does_nothing(self, machine):
        restart = _button(machine, "Restart")
        assert not restart.enabled
        assert not handle_click(machine, restart.rect.center)
        assert machine.run_state is RunState.IDLE

    def test_arrow_pad_matches_keyboard(self, machine, scheduler):
        machine.state.food = (0, 24)
        handle_click(machine, _button(machine, "v").rect.center)
        assert machine.run_state is RunState.RUNNING
        scheduler.advance(INITIAL_SPEED)
        assert machine.state.snake.head == (13, 13)

    def test_click_on_nothing(self, machine):
        assert not handle_click(machine, (250, 100))
