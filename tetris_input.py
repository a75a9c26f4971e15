"""Key bindings: pygame key codes to engine commands"""
import pygame

KEYMAP = {
    pygame.K_LEFT: "move_left",
    pygame.K_RIGHT: "move_right",
    pygame.K_DOWN: "soft_drop",
    pygame.K_UP: "rotate",
    pygame.K_SPACE: "hard_drop",
    pygame.K_p: "toggle_pause",
    pygame.K_r: "restart",
}


def dispatch(engine, key) -> bool:
    """Run the command bound to key; False if the key is unbound."""
    name = KEYMAP.get(key)
    if name is None:
        return False
    getattr(engine, name)()
    return True
