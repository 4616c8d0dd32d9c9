"""
Typewriter Module - Looping type/pause/delete text effect

The effect walks through `texts` forever: type one character per tick, hold
the full string, delete one character per tick, move to the next string.

The transition itself is the pure function `advance()`; TypewriterEffect only
owns the single pending timer and the subscribers.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .scheduler import ManualScheduler, Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_TYPE_SPEED_MS = 80
DEFAULT_DELETE_SPEED_MS = 40
DEFAULT_DELAY_BETWEEN_MS = 1800


class Phase(Enum):
    TYPING = 'typing'
    PAUSING = 'pausing'
    DELETING = 'deleting'


@dataclass(frozen=True)
class TypewriterConfig:
    texts: Tuple[str, ...]
    type_speed: float = DEFAULT_TYPE_SPEED_MS
    delete_speed: float = DEFAULT_DELETE_SPEED_MS
    delay_between: float = DEFAULT_DELAY_BETWEEN_MS

    def __post_init__(self):
        object.__setattr__(self, 'texts', tuple(self.texts))
        for name in ('type_speed', 'delete_speed', 'delay_between'):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be a positive duration, got {value!r}")

    @property
    def is_empty(self) -> bool:
        return not self.texts


@dataclass(frozen=True)
class TypewriterState:
    current_index: int = 0
    display_text: str = ''
    phase: Phase = field(default=Phase.TYPING)

    @property
    def is_deleting(self) -> bool:
        return self.phase is Phase.DELETING


def advance(config: TypewriterConfig, state: TypewriterState) -> Tuple[TypewriterState, float]:
    """
    Apply one tick.

    Returns:
        tuple: (next state, delay in ms before the following tick)
    """
    target = config.texts[state.current_index]
    shown = len(state.display_text)

    if state.phase is Phase.TYPING:
        if shown < len(target):
            shown += 1
        text = target[:shown]
        if shown >= len(target):
            return TypewriterState(state.current_index, text, Phase.PAUSING), config.delay_between
        return TypewriterState(state.current_index, text, Phase.TYPING), config.type_speed

    if state.phase is Phase.PAUSING:
        return TypewriterState(state.current_index, state.display_text, Phase.DELETING), config.delete_speed

    if shown > 0:
        shown -= 1
    if shown == 0:
        next_index = (state.current_index + 1) % len(config.texts)
        return TypewriterState(next_index, '', Phase.TYPING), config.type_speed
    return TypewriterState(state.current_index, target[:shown], Phase.DELETING), config.delete_speed


class TypewriterEffect:
    """
    Runs `advance()` on a scheduler.

    Exactly one tick is pending while running. dispose() cancels it, and a
    disposed effect never changes state again.
    """

    def __init__(self, config: TypewriterConfig, scheduler: Scheduler):
        self.config = config
        self.scheduler = scheduler
        self.state = TypewriterState()
        self._pending: Optional[TimerHandle] = None
        self._subscribers: List[Callable[[str], None]] = []
        self._started = False
        self._disposed = False

    @property
    def display_text(self) -> str:
        return self.state.display_text

    @property
    def running(self) -> bool:
        return self._pending is not None and self._pending.active

    @property
    def disposed(self) -> bool:
        return self._disposed

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """Register a text-change callback. Returns the unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def start(self) -> None:
        if self._disposed or self._started:
            return
        self._started = True
        if self.config.is_empty:
            logger.warning("Typewriter started with no texts; rendering empty text")
            return
        self._schedule(self.config.type_speed)

    def dispose(self) -> None:
        self._disposed = True
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        self._subscribers.clear()

    def _schedule(self, delay: float) -> None:
        self._pending = self.scheduler.call_later(delay, self._tick)

    def _tick(self) -> None:
        if self._disposed:
            return
        previous = self.state.display_text
        self.state, delay = advance(self.config, self.state)
        if self.state.display_text != previous:
            for callback in list(self._subscribers):
                callback(self.state.display_text)
        # a subscriber may have torn the effect down
        if self._disposed:
            return
        self._schedule(delay)

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False


def build_timeline(config: TypewriterConfig, cycles: int = 1) -> List[Tuple[str, float]]:
    """
    Precompute the frames of `cycles` full passes through every text.

    Each frame is (display_text, hold_ms): the text shown and how long it
    stays before the next tick. Replaying the list in a loop reproduces the
    effect exactly.
    """
    if config.is_empty or cycles <= 0:
        return []

    scheduler = ManualScheduler()
    effect = TypewriterEffect(config, scheduler)
    frames: List[Tuple[str, float]] = [('', config.type_speed)]

    ticks_per_cycle = sum(2 * len(text) + 1 if text else 3 for text in config.texts)
    with effect:
        for _ in range(ticks_per_cycle * cycles):
            scheduler.advance_to_next()
            frames.append((effect.display_text, effect._pending.when - scheduler.now))

    # The closing frame is the empty text that opens the next cycle.
    frames.pop()
    return _merge_holds(frames)


def _merge_holds(frames: Sequence[Tuple[str, float]]) -> List[Tuple[str, float]]:
    merged: List[Tuple[str, float]] = []
    for text, hold in frames:
        if merged and merged[-1][0] == text:
            merged[-1] = (text, merged[-1][1] + hold)
        else:
            merged.append((text, hold))
    return merged


__all__ = [
    'Phase',
    'TypewriterConfig',
    'TypewriterState',
    'TypewriterEffect',
    'advance',
    'build_timeline',
    'DEFAULT_TYPE_SPEED_MS',
    'DEFAULT_DELETE_SPEED_MS',
    'DEFAULT_DELAY_BETWEEN_MS',
]
