"""
Interactions Package - Timed UI state machines of the portfolio page

Framework independent: nothing here imports Flask. The web layer drives these
components with a ManualScheduler to produce render state.
"""

from .scheduler import TimerHandle, Scheduler, ManualScheduler, AsyncioScheduler
from .document import ScrollLock, SCROLL_LOCK, Document
from .typewriter import (
    Phase,
    TypewriterConfig,
    TypewriterState,
    TypewriterEffect,
    advance,
    build_timeline
)
from .modal import (
    ModalState,
    ModalController,
    transition,
    CLOSE_DELAY_MS,
    DISMISS_ELEMENT_ID,
    ESCAPE_KEY
)
from .logging_config import setup_logging

__all__ = [
    # Scheduler
    'TimerHandle',
    'Scheduler',
    'ManualScheduler',
    'AsyncioScheduler',

    # Document
    'ScrollLock',
    'SCROLL_LOCK',
    'Document',

    # Typewriter
    'Phase',
    'TypewriterConfig',
    'TypewriterState',
    'TypewriterEffect',
    'advance',
    'build_timeline',

    # Modal
    'ModalState',
    'ModalController',
    'transition',
    'CLOSE_DELAY_MS',
    'DISMISS_ELEMENT_ID',
    'ESCAPE_KEY',

    # Logging
    'setup_logging'
]
