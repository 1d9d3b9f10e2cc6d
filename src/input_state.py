from src.utils.enums import Action


KEY_BINDINGS: dict[Action, tuple[str, ...]] = {
    Action.UP: ('w', 'up', 'arrowup'),
    Action.DOWN: ('s', 'down', 'arrowdown'),
    Action.LEFT: ('a', 'left', 'arrowleft'),
    Action.RIGHT: ('d', 'right', 'arrowright'),
    Action.SPECIAL: ('space', ' '),
}


def normalize_key(key: str) -> str:
    # ' ' is a key name of its own and must survive stripping
    return key.lower() if key.isspace() else key.strip().lower()


class InputState:
    """
    Current pressed/released state of the keyboard, by key name.

    Key names are case-insensitive. Only the latest state of a key is kept,
    there is no event queue.
    """

    def __init__(self, key_bindings: dict[Action, tuple[str, ...]] | None = None):
        self.key_bindings = key_bindings if key_bindings is not None else KEY_BINDINGS
        self._pressed: dict[str, bool] = {}

    def press(self, key: str) -> None:
        self._pressed[normalize_key(key)] = True

    def release(self, key: str) -> None:
        self._pressed[normalize_key(key)] = False

    def release_all(self) -> None:
        self._pressed.clear()

    def is_pressed(self, key: str) -> bool:
        return self._pressed.get(normalize_key(key), False)

    def is_action_pressed(self, action: Action) -> bool:
        return any(self.is_pressed(key) for key in self.key_bindings[action])

    def pressed_keys(self) -> set[str]:
        return {key for key, pressed in self._pressed.items() if pressed}

    def __repr__(self) -> str:
        return f'InputState(pressed={sorted(self.pressed_keys())})'
