"""
Effects Module - Side effects requested by state transitions

Transition functions stay pure: they return the next state plus a tuple of
effect values. An EffectRunner then performs them against the host
(scheduler + document) in order.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, Iterable, Optional

from .document import Document, KeyListener
from .scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LockScroll:
    pass


@dataclass(frozen=True)
class UnlockScroll:
    pass


@dataclass(frozen=True)
class AttachKeyListener:
    pass


@dataclass(frozen=True)
class DetachKeyListener:
    pass


@dataclass(frozen=True)
class FocusAfterRender:
    element_id: str


@dataclass(frozen=True)
class ScheduleTimer:
    name: str
    delay_ms: float


@dataclass(frozen=True)
class CancelTimer:
    name: str


class EffectRunner:
    """
    Interprets effects for one component.

    Args:
        owner: identity used for the scroll lock
        scheduler: host event loop
        document: host page
        key_listener: listener installed by AttachKeyListener
        on_timer: called with the timer name when a ScheduleTimer fires
    """

    def __init__(self, owner: Hashable, scheduler: Scheduler, document: Document,
                 key_listener: KeyListener, on_timer: Callable[[str], None]):
        self.owner = owner
        self.scheduler = scheduler
        self.document = document
        self.key_listener = key_listener
        self.on_timer = on_timer
        self.timers: Dict[str, TimerHandle] = {}
        self._handlers = {
            LockScroll: self._lock_scroll,
            UnlockScroll: self._unlock_scroll,
            AttachKeyListener: self._attach,
            DetachKeyListener: self._detach,
            FocusAfterRender: self._focus_after_render,
            ScheduleTimer: self._schedule,
            CancelTimer: self._cancel,
        }

    def run(self, effects: Iterable) -> None:
        for effect in effects:
            handler = self._handlers.get(type(effect))
            if handler is None:
                raise TypeError(f"Unknown effect: {effect!r}")
            handler(effect)

    def pending(self, name: str) -> Optional[TimerHandle]:
        handle = self.timers.get(name)
        if handle is not None and handle.active:
            return handle
        return None

    def cancel_all(self) -> None:
        for handle in self.timers.values():
            handle.cancel()
        self.timers.clear()

    # ========== HANDLERS ========== #

    def _lock_scroll(self, effect):
        self.document.scroll_lock.acquire(self.owner)

    def _unlock_scroll(self, effect):
        self.document.scroll_lock.release(self.owner)

    def _attach(self, effect):
        self.document.add_key_listener(self.key_listener)

    def _detach(self, effect):
        self.document.remove_key_listener(self.key_listener)

    def _focus_after_render(self, effect):
        self._replace('focus', self.scheduler.call_soon(
            lambda: self.document.focus(effect.element_id)))

    def _schedule(self, effect):
        name = effect.name
        self._replace(name, self.scheduler.call_later(
            effect.delay_ms, lambda: self._fire(name)))

    def _cancel(self, effect):
        handle = self.timers.pop(effect.name, None)
        if handle is not None:
            handle.cancel()

    def _replace(self, name, handle):
        previous = self.timers.get(name)
        if previous is not None:
            previous.cancel()
        self.timers[name] = handle

    def _fire(self, name):
        self.timers.pop(name, None)
        self.on_timer(name)


__all__ = [
    'LockScroll',
    'UnlockScroll',
    'AttachKeyListener',
    'DetachKeyListener',
    'FocusAfterRender',
    'ScheduleTimer',
    'CancelTimer',
    'EffectRunner',
]
