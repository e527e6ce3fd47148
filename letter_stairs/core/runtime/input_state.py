"""
input_state.py
--------------
Held/released status of the logical player actions.

Written by the input collaborator (InputManager), read by the physics step.
"""

MOVE_LEFT = "move_left"
MOVE_RIGHT = "move_right"
JUMP = "jump"

ACTIONS = (MOVE_LEFT, MOVE_RIGHT, JUMP)


class InputState:
    """Mapping of logical action name -> currently held."""

    __slots__ = ("_held",)

    def __init__(self, **held):
        self._held = dict.fromkeys(ACTIONS, False)
        for action, value in held.items():
            self.set(action, value)

    def set(self, action: str, held: bool):
        if action not in self._held:
            raise ValueError(f"Unknown input action: {action!r}")
        self._held[action] = bool(held)

    def is_held(self, action: str) -> bool:
        return self._held.get(action, False)

    def release_all(self):
        for action in self._held:
            self._held[action] = False

    def snapshot(self) -> dict:
        return dict(self._held)

    def __repr__(self):
        held = [name for name, value in self._held.items() if value]
        return f"InputState(held={held})"
