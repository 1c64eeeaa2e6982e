# clock.py
import time

from .game import GameState


def monotonic_ms() -> int:
    return time.monotonic_ns() // 1_000_000

def is_due(state: GameState, now_ms: int) -> bool:
    """
    True once the tick interval has strictly elapsed since the last accepted
    tick; consumes the tick. A late check never yields more than one tick.
    """
    if now_ms - state.last_tick_ms > state.tick_interval_ms:
        state.last_tick_ms = now_ms
        return True
    return False
