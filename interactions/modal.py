"""
Modal Module - Project detail overlay lifecycle

`transition()` maps (ModalState, intent) to the next state and the effects
to perform. ModalController wires it to a scheduler and a document:

- open: selection set and overlay visible at once; scroll locked, Escape
  listener installed, close control focused after the next render pass
- close: overlay hidden at once; scroll unlocked, listener removed; the
  selection is kept for CLOSE_DELAY_MS so the exit transition can render it
- teardown: every timer, listener and lock released
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Tuple

from .document import Document
from .effects import (
    AttachKeyListener,
    CancelTimer,
    DetachKeyListener,
    EffectRunner,
    FocusAfterRender,
    LockScroll,
    ScheduleTimer,
    UnlockScroll,
)
from .scheduler import Scheduler

logger = logging.getLogger(__name__)

CLOSE_DELAY_MS = 300
DISMISS_ELEMENT_ID = 'project-modal-close'
ESCAPE_KEY = 'Escape'

CLEAR_TIMER = 'clear-selection'
FOCUS_TIMER = 'focus'


@dataclass(frozen=True)
class ModalState:
    selected_project: Optional[Any] = None
    is_open: bool = False

    def __post_init__(self):
        if self.is_open and self.selected_project is None:
            raise ValueError("An open modal needs a selected project")


# Intents

@dataclass(frozen=True)
class Open:
    project: Any


@dataclass(frozen=True)
class Close:
    pass


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class ClearSelection:
    pass


@dataclass(frozen=True)
class Teardown:
    pass


CLOSED = ModalState()


def transition(state: ModalState, intent, close_delay: float = CLOSE_DELAY_MS,
               dismiss_element_id: str = DISMISS_ELEMENT_ID) -> Tuple[ModalState, tuple]:
    """Pure modal state machine. Returns (next state, effects)."""
    if isinstance(intent, Open):
        opened = ModalState(selected_project=intent.project, is_open=True)
        if state.is_open:
            return opened, (FocusAfterRender(dismiss_element_id),)
        return opened, (
            CancelTimer(CLEAR_TIMER),
            LockScroll(),
            AttachKeyListener(),
            FocusAfterRender(dismiss_element_id),
        )

    if isinstance(intent, KeyPress):
        if intent.key == ESCAPE_KEY:
            return transition(state, Close(), close_delay, dismiss_element_id)
        return state, ()

    if isinstance(intent, Close):
        if not state.is_open:
            return state, ()
        return ModalState(selected_project=state.selected_project, is_open=False), (
            UnlockScroll(),
            DetachKeyListener(),
            CancelTimer(FOCUS_TIMER),
            ScheduleTimer(CLEAR_TIMER, close_delay),
        )

    if isinstance(intent, ClearSelection):
        if state.is_open:
            return state, ()
        return CLOSED, ()

    if isinstance(intent, Teardown):
        return CLOSED, (
            CancelTimer(CLEAR_TIMER),
            CancelTimer(FOCUS_TIMER),
            DetachKeyListener(),
            UnlockScroll(),
        )

    raise TypeError(f"Unknown modal intent: {intent!r}")


class ModalController:
    """
    Owns the ModalState of one project gallery.

    Args:
        scheduler: host event loop (close delay, focus after render)
        document: host page (scroll lock, key listeners, focus)
        close_delay: ms the selection survives a close, for the exit animation
        dismiss_element_id: element focused when the modal opens
    """

    def __init__(self, scheduler: Scheduler, document: Document,
                 close_delay: float = CLOSE_DELAY_MS,
                 dismiss_element_id: str = DISMISS_ELEMENT_ID):
        if close_delay < 0:
            raise ValueError(f"close_delay must not be negative, got {close_delay!r}")
        self.close_delay = close_delay
        self.dismiss_element_id = dismiss_element_id
        self.document = document
        self.state = CLOSED
        self._subscribers: List[Callable[[ModalState], None]] = []
        self._runner = EffectRunner(
            owner=self,
            scheduler=scheduler,
            document=document,
            key_listener=self.handle_key,
            on_timer=self._on_timer,
        )

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def selected_project(self):
        return self.state.selected_project

    def subscribe(self, callback: Callable[[ModalState], None]) -> Callable[[], None]:
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def open(self, project) -> None:
        self.dispatch(Open(project))

    def close(self) -> None:
        self.dispatch(Close())

    def handle_key(self, key: str) -> None:
        self.dispatch(KeyPress(key))

    def dispose(self) -> None:
        self.dispatch(Teardown())
        self._runner.cancel_all()

    def dispatch(self, intent) -> ModalState:
        previous = self.state
        self.state, effects = transition(
            previous, intent, self.close_delay, self.dismiss_element_id)
        self._runner.run(effects)
        if self.state != previous:
            logger.debug(f"Modal {type(intent).__name__}: open={self.state.is_open}")
            for callback in list(self._subscribers):
                callback(self.state)
        return self.state

    def _on_timer(self, name: str) -> None:
        if name == CLEAR_TIMER:
            self.dispatch(ClearSelection())

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()
        return False


__all__ = [
    'ModalState',
    'ModalController',
    'Open',
    'Close',
    'KeyPress',
    'ClearSelection',
    'Teardown',
    'transition',
    'CLOSED',
    'CLOSE_DELAY_MS',
    'DISMISS_ELEMENT_ID',
    'ESCAPE_KEY',
]
