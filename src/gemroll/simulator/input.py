"""
Keyboard-held controls for the simulator.

The window's event pump presses and releases these buttons between
ticks; the engine samples their last known state once per tick.
Several presses between two ticks collapse into one held state.
"""

from gemroll.game.entities import InputState


class KeyButton:
    """
    A single held control (left, right or jump).

    Press state is controlled by the simulator window
    based on keyboard input.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._pressed = False
        self.presses = 0

    def is_pressed(self) -> bool:
        return self._pressed

    def press(self) -> None:
        """Called by the window when the key goes down."""
        if not self._pressed:
            self._pressed = True
            self.presses += 1

    def release(self) -> None:
        """Called by the window when the key goes up."""
        self._pressed = False


class ControlPad:
    """The three gameplay controls, sampled as one InputState."""

    def __init__(self) -> None:
        self.left = KeyButton("left")
        self.right = KeyButton("right")
        self.jump = KeyButton("jump")

    @property
    def buttons(self) -> tuple[KeyButton, KeyButton, KeyButton]:
        return (self.left, self.right, self.jump)

    def sample(self) -> InputState:
        return InputState(
            left=self.left.is_pressed(),
            right=self.right.is_pressed(),
            jump=self.jump.is_pressed(),
        )

    def release_all(self) -> None:
        """Drop every held key, e.g. when the window loses focus."""
        for button in self.buttons:
            button.release()
