"""Tests for the project modal state machine and controller."""

from __future__ import annotations

import pytest

from interactions.document import Document
from interactions.effects import (
    AttachKeyListener,
    CancelTimer,
    DetachKeyListener,
    FocusAfterRender,
    LockScroll,
    ScheduleTimer,
    UnlockScroll,
)
from interactions.modal import (
    CLOSED,
    DISMISS_ELEMENT_ID,
    Close,
    ClearSelection,
    KeyPress,
    ModalController,
    ModalState,
    Open,
    Teardown,
    transition,
)
from interactions.scheduler import ManualScheduler
from models import Project


@pytest.fixture()
def modal(scheduler: ManualScheduler, document: Document) -> ModalController:
    controller = ModalController(scheduler, document, close_delay=300)
    document.mount(DISMISS_ELEMENT_ID)
    return controller


# ── transition ────────────────────────────────────────────────────────────

def test_open_from_closed_effects(project_one: Project) -> None:
    state, effects = transition(CLOSED, Open(project_one))
    assert state == ModalState(project_one, True)
    assert LockScroll() in effects
    assert AttachKeyListener() in effects
    assert FocusAfterRender(DISMISS_ELEMENT_ID) in effects


def test_open_while_open_replaces_without_reacquiring(project_one: Project, project_two: Project) -> None:
    state, _ = transition(CLOSED, Open(project_one))
    state, effects = transition(state, Open(project_two))
    assert state == ModalState(project_two, True)
    assert LockScroll() not in effects
    assert AttachKeyListener() not in effects


def test_close_keeps_selection_and_schedules_clear(project_one: Project) -> None:
    state, _ = transition(CLOSED, Open(project_one))
    state, effects = transition(state, Close(), close_delay=250)
    assert state == ModalState(project_one, False)
    assert UnlockScroll() in effects
    assert DetachKeyListener() in effects
    assert any(isinstance(e, ScheduleTimer) and e.delay_ms == 250 for e in effects)


def test_close_when_closed_is_noop() -> None:
    assert transition(CLOSED, Close()) == (CLOSED, ())


def test_escape_only_closes_when_open(project_one: Project) -> None:
    assert transition(CLOSED, KeyPress("Escape")) == (CLOSED, ())

    opened, _ = transition(CLOSED, Open(project_one))
    assert transition(opened, KeyPress("Escape")) == transition(opened, Close())
    assert transition(opened, KeyPress("Enter")) == (opened, ())


def test_clear_selection_ignored_while_open(project_one: Project) -> None:
    opened, _ = transition(CLOSED, Open(project_one))
    assert transition(opened, ClearSelection()) == (opened, ())

    closing = ModalState(project_one, False)
    assert transition(closing, ClearSelection()) == (CLOSED, ())


def test_teardown_releases_everything(project_one: Project) -> None:
    opened, _ = transition(CLOSED, Open(project_one))
    state, effects = transition(opened, Teardown())
    assert state == CLOSED
    assert UnlockScroll() in effects
    assert DetachKeyListener() in effects
    assert sum(isinstance(e, CancelTimer) for e in effects) == 2


def test_open_state_requires_project() -> None:
    with pytest.raises(ValueError):
        ModalState(None, True)


def test_unknown_intent_rejected() -> None:
    with pytest.raises(TypeError):
        transition(CLOSED, "open")


# ── ModalController ───────────────────────────────────────────────────────

def test_open_then_close_clears_after_delay(modal: ModalController, scheduler: ManualScheduler,
                                            document: Document, project_one: Project) -> None:
    modal.open(project_one)
    assert modal.is_open
    assert modal.selected_project.id == 1
    assert document.scroll_lock.locked

    modal.close()
    assert not modal.is_open
    assert not document.scroll_lock.locked
    assert modal.selected_project.id == 1

    scheduler.advance(299)
    assert modal.selected_project.id == 1

    scheduler.advance(1)
    assert modal.selected_project is None
    assert scheduler.pending == 0


def test_focus_moves_after_render_pass(modal: ModalController, scheduler: ManualScheduler,
                                       document: Document, project_one: Project) -> None:
    modal.open(project_one)
    assert document.focused is None

    scheduler.run_soon()
    assert document.focused == DISMISS_ELEMENT_ID


def test_focus_noop_when_dismiss_control_missing(scheduler: ManualScheduler, document: Document,
                                                 project_one: Project) -> None:
    modal = ModalController(scheduler, document)
    modal.open(project_one)
    scheduler.run_soon()
    assert document.focused is None
    assert modal.is_open


def test_escape_equals_close(modal: ModalController, scheduler: ManualScheduler,
                             document: Document, project_one: Project) -> None:
    modal.open(project_one)
    document.dispatch_key("Escape")
    assert modal.state == ModalState(project_one, False)
    assert document.listener_count == 0
    assert not document.scroll_lock.locked

    scheduler.advance(300)
    assert modal.state == CLOSED


def test_escape_while_closed_has_no_effect(modal: ModalController, document: Document) -> None:
    changes: list[ModalState] = []
    modal.subscribe(changes.append)

    document.dispatch_key("Escape")
    modal.handle_key("Escape")
    assert modal.state == CLOSED
    assert changes == []


def test_repeated_opens_install_one_listener(modal: ModalController, document: Document,
                                             project_one: Project, project_two: Project) -> None:
    modal.open(project_one)
    modal.open(project_two)
    modal.open(project_one)
    assert document.listener_count == 1

    modal.close()
    modal.open(project_two)
    assert document.listener_count == 1


def test_switching_projects_never_observes_closed_state(modal: ModalController,
                                                        project_one: Project,
                                                        project_two: Project) -> None:
    changes: list[ModalState] = []
    modal.subscribe(changes.append)

    modal.open(project_one)
    modal.open(project_two)

    assert all(state.is_open for state in changes)
    assert modal.state == ModalState(project_two, True)


def test_reopen_during_exit_transition_keeps_selection(modal: ModalController,
                                                       scheduler: ManualScheduler,
                                                       project_one: Project,
                                                       project_two: Project) -> None:
    modal.open(project_one)
    modal.close()
    scheduler.advance(100)
    modal.open(project_two)

    scheduler.advance(1000)
    assert modal.state == ModalState(project_two, True)


def test_close_twice_is_noop(modal: ModalController, scheduler: ManualScheduler,
                             project_one: Project) -> None:
    modal.open(project_one)
    modal.close()
    modal.close()
    assert scheduler.pending == 1


def test_dispose_while_open_restores_scroll(modal: ModalController, scheduler: ManualScheduler,
                                            document: Document, project_one: Project) -> None:
    modal.open(project_one)
    modal.dispose()

    assert not document.scroll_lock.locked
    assert document.listener_count == 0
    assert scheduler.pending == 0
    assert modal.state == CLOSED

    modal.dispose()
    assert not document.scroll_lock.locked


def test_dispose_during_exit_transition_cancels_clear(modal: ModalController,
                                                      scheduler: ManualScheduler,
                                                      project_one: Project) -> None:
    modal.open(project_one)
    modal.close()
    modal.dispose()
    assert scheduler.pending == 0


def test_context_manager_releases_on_error(scheduler: ManualScheduler, document: Document,
                                           project_one: Project) -> None:
    with pytest.raises(RuntimeError):
        with ModalController(scheduler, document) as modal:
            modal.open(project_one)
            raise RuntimeError("render failed")
    assert not document.scroll_lock.locked
    assert document.listener_count == 0


def test_two_modals_share_scroll_lock(scheduler: ManualScheduler, document: Document,
                                      project_one: Project, project_two: Project) -> None:
    first = ModalController(scheduler, document)
    second = ModalController(scheduler, document)
    first.open(project_one)
    second.open(project_two)

    first.close()
    assert document.scroll_lock.locked
    second.close()
    assert not document.scroll_lock.locked


def test_negative_close_delay_rejected(scheduler: ManualScheduler, document: Document) -> None:
    with pytest.raises(ValueError):
        ModalController(scheduler, document, close_delay=-1)
