from __future__ import annotations

import pytest

from memory_core.binder import Binder
from memory_core.data_models import Easing, FlipState, Orientation
from memory_core.deck_builder import DeckBuilder
from memory_core.ui_logic.flip_controller import FlipController, FlipEvent
from tests.fakes import RecordingRenderer


@pytest.fixture
def bound_slots(slots, templates):
    Binder().bind(slots, DeckBuilder().build(templates))
    return slots


def test_select_toggles_hidden_to_shown_and_back(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)

    assert controller.select(3) is True
    assert bound_slots[3].flip_state is FlipState.SHOWN
    assert bound_slots[3].orientation is Orientation.FACE_UP

    assert controller.select(3) is True
    assert bound_slots[3].flip_state is FlipState.HIDDEN
    assert bound_slots[3].orientation is Orientation.FACE_DOWN


def test_select_touches_only_the_selected_slot(bound_slots, renderer):
    FlipController(bound_slots, renderer).select(9)
    assert [s.index for s in bound_slots if s.flip_state is FlipState.SHOWN] == [9]


def test_each_flip_issues_one_animation_request(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)
    controller.select(0)

    assert len(renderer.requests) == 1
    request = renderer.requests[0]
    assert request.slot_index == 0
    assert request.target_orientation is Orientation.FACE_UP
    assert request.duration_ms == 250
    assert request.easing is Easing.EASE_IN_OUT


def test_animation_settings_are_configurable(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer, duration_ms=400, easing=Easing.LINEAR)
    controller.select(1)
    assert renderer.requests[0].duration_ms == 400
    assert renderer.requests[0].easing is Easing.LINEAR


def test_rapid_reselect_is_last_writer_wins(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)
    for _ in range(3):
        controller.select(5)

    assert [r.target_orientation for r in renderer.requests] == [
        Orientation.FACE_UP,
        Orientation.FACE_DOWN,
        Orientation.FACE_UP,
    ]
    assert bound_slots[5].flip_state is FlipState.SHOWN


@pytest.mark.parametrize("index", [16, 20, -1, -16])
def test_out_of_range_selection_is_ignored(bound_slots, renderer, index):
    controller = FlipController(bound_slots, renderer)

    assert controller.select(index) is False
    assert renderer.requests == []
    assert all(slot.flip_state is FlipState.HIDDEN for slot in bound_slots)


def test_unbound_slot_selection_is_ignored(slots, renderer):
    controller = FlipController(slots, renderer)

    assert controller.select(2) is False
    assert renderer.requests == []
    assert slots[2].flip_state is FlipState.HIDDEN
    assert slots[2].orientation is Orientation.FACE_DOWN


def test_callbacks_receive_flip_events(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)
    events: list[FlipEvent] = []
    controller.register_callback(events.append)
    controller.register_callback(events.append)

    controller.select(7)
    controller.select(20)

    assert len(events) == 1
    assert events[0].slot_index == 7
    assert events[0].previous_state is FlipState.HIDDEN
    assert events[0].new_state is FlipState.SHOWN
    assert events[0].request is renderer.requests[0]

    controller.unregister_callback(events.append)
    controller.select(7)
    assert len(events) == 1


def test_failing_callback_does_not_block_flips(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)

    def broken(event: FlipEvent) -> None:
        raise RuntimeError("listener bug")

    seen: list[FlipEvent] = []
    controller.register_callback(broken)
    controller.register_callback(seen.append)

    assert controller.select(4) is True
    assert len(seen) == 1


def test_animation_completed_changes_nothing(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)
    controller.select(1)
    controller.animation_completed(1)
    controller.animation_completed(99)

    assert bound_slots[1].flip_state is FlipState.SHOWN
    assert len(renderer.requests) == 1


def test_state_summary(bound_slots, renderer):
    controller = FlipController(bound_slots, renderer)
    controller.select(2)
    controller.select(11)

    assert controller.get_shown_indices() == [2, 11]
    summary = controller.get_state_summary()
    assert summary['slot_count'] == 16
    assert summary['bound_count'] == 16
    assert summary['shown'] == [2, 11]


def test_renderer_failure_does_not_interrupt_the_flip(bound_slots):
    class BrokenRenderer(RecordingRenderer):
        def animate(self, request):
            super().animate(request)
            raise RuntimeError("tween crashed")

    renderer = BrokenRenderer()
    controller = FlipController(bound_slots, renderer)
    events: list[FlipEvent] = []
    controller.register_callback(events.append)

    assert controller.select(6) is True
    assert bound_slots[6].flip_state is FlipState.SHOWN
    assert bound_slots[6].orientation is Orientation.FACE_UP
    assert [e.slot_index for e in events] == [6]

    assert controller.select(6) is True
    assert bound_slots[6].flip_state is FlipState.HIDDEN
    assert len(renderer.requests) == 2
