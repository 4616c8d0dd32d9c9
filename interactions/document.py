"""
Document Module - Page-level resources shared by interactive components

- ScrollLock: the single, process-wide "background scrolling disabled" flag.
  Owners acquire and release it; it stays locked while any owner holds it.
- Document: keyboard listener registry and the set of mounted, focusable
  elements.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Hashable, List, Optional, Set

logger = logging.getLogger(__name__)

KeyListener = Callable[[str], None]


class ScrollLock:
    """Owner-keyed scroll lock"""

    def __init__(self):
        self._owners: Set[Hashable] = set()

    @property
    def locked(self) -> bool:
        return bool(self._owners)

    def acquire(self, owner: Hashable) -> None:
        if owner not in self._owners:
            self._owners.add(owner)
            logger.debug(f"Scroll lock acquired by {owner!r} ({len(self._owners)} holder(s))")

    def release(self, owner: Hashable) -> None:
        # Releasing something that is not held is allowed: close and teardown
        # can both run for the same owner.
        if owner in self._owners:
            self._owners.discard(owner)
            logger.debug(f"Scroll lock released by {owner!r} ({len(self._owners)} holder(s))")

    def holds(self, owner: Hashable) -> bool:
        return owner in self._owners

    @contextmanager
    def held(self, owner: Hashable):
        """Hold the lock for the duration of a block, released on any exit"""
        self.acquire(owner)
        try:
            yield self
        finally:
            self.release(owner)

    def reset(self) -> None:
        self._owners.clear()


SCROLL_LOCK = ScrollLock()


class Document:
    """
    The host page as seen by the interactive components.

    Args:
        scroll_lock: lock to use; defaults to the process-wide SCROLL_LOCK
    """

    def __init__(self, scroll_lock: Optional[ScrollLock] = None):
        self.scroll_lock = scroll_lock if scroll_lock is not None else SCROLL_LOCK
        self._listeners: List[KeyListener] = []
        self._mounted: Set[str] = set()
        self.focused: Optional[str] = None

    # ========== KEYBOARD ========== #

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_key_listener(self, listener: KeyListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_key_listener(self, listener: KeyListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch_key(self, key: str) -> None:
        """Deliver a key press to every listener installed at dispatch time"""
        for listener in list(self._listeners):
            listener(key)

    # ========== FOCUS ========== #

    def mount(self, element_id: str) -> None:
        self._mounted.add(element_id)

    def unmount(self, element_id: str) -> None:
        self._mounted.discard(element_id)
        if self.focused == element_id:
            self.focused = None

    def is_mounted(self, element_id: str) -> bool:
        return element_id in self._mounted

    def focus(self, element_id: str) -> bool:
        """Move focus to a mounted element. Returns False (no-op) when absent."""
        if element_id not in self._mounted:
            logger.debug(f"Focus target {element_id!r} is not mounted; skipping")
            return False
        self.focused = element_id
        return True


__all__ = ['ScrollLock', 'SCROLL_LOCK', 'Document', 'KeyListener']
