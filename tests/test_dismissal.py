"""Tests for the outside-interaction dismissal state machine."""

from graph_controls.ui.dismissal import DismissalController, DismissalState

INSIDE = object()
OUTSIDE = object()


def _contains(target):
    return target is INSIDE


def _controller(source, **kwargs):
    return DismissalController(source, contains=_contains, **kwargs)


class TestTransitions:
    def test_starts_closed_without_listener(self, source):
        controller = _controller(source)
        assert controller.state is DismissalState.CLOSED
        assert not controller.is_open
        assert source.attached == 0

    def test_toggle_opens_and_attaches(self, source):
        controller = _controller(source)
        controller.toggle()
        assert controller.state is DismissalState.OPEN
        assert controller.listener_attached
        assert source.attached == 1

    def test_toggle_pair_returns_to_closed(self, source):
        controller = _controller(source)
        controller.toggle()
        controller.toggle()
        assert controller.state is DismissalState.CLOSED
        assert source.attached == 1
        assert source.detached == 1
        assert source.listeners == []

    def test_open_is_idempotent(self, source):
        controller = _controller(source)
        controller.open()
        controller.open()
        assert source.attached == 1
        assert len(source.listeners) == 1

    def test_close_while_closed_does_not_detach(self, source):
        controller = _controller(source)
        controller.close()
        controller.close()
        assert source.detached == 0


class TestOutsideInteraction:
    def test_outside_pointer_closes(self, source):
        controller = _controller(source)
        controller.open()
        source.fire(OUTSIDE)
        assert controller.state is DismissalState.CLOSED
        assert source.detached == 1
        assert source.listeners == []

    def test_inside_pointer_keeps_open(self, source):
        controller = _controller(source)
        controller.open()
        source.fire(INSIDE)
        assert controller.is_open
        assert source.detached == 0

    def test_closed_controller_ignores_direct_pointer(self, source):
        controller = _controller(source)
        controller.handle_pointer(OUTSIDE)
        assert controller.state is DismissalState.CLOSED
        assert source.detached == 0

    def test_unknown_containment_leaves_state(self, source):
        controller = DismissalController(source, contains=lambda target: None)
        controller.open()
        source.fire(OUTSIDE)
        assert controller.is_open
        assert controller.listener_attached

    def test_missing_target_leaves_state(self, source):
        controller = _controller(source)
        controller.open()
        source.fire(None)
        assert controller.is_open

    def test_reopen_after_outside_close(self, source):
        controller = _controller(source)
        controller.open()
        source.fire(OUTSIDE)
        controller.toggle()
        assert controller.is_open
        assert source.attached == 2
        assert source.detached == 1


class TestTeardown:
    def test_dispose_while_open_detaches(self, source):
        controller = _controller(source)
        controller.open()
        controller.dispose()
        assert controller.disposed
        assert not controller.listener_attached
        assert source.detached == 1
        assert source.listeners == []

    def test_dispose_while_closed_does_nothing(self, source):
        controller = _controller(source)
        controller.dispose()
        controller.dispose()
        assert source.detached == 0

    def test_disposed_controller_cannot_reopen(self, source):
        controller = _controller(source)
        controller.dispose()
        controller.open()
        assert not controller.is_open
        assert source.attached == 0

    def test_context_manager_disposes(self, source):
        with _controller(source) as controller:
            controller.open()
        assert source.detached == 1
        assert source.listeners == []


class TestChangeCallback:
    def test_on_change_reports_each_transition(self, source):
        changes = []
        controller = _controller(source, on_change=changes.append)
        controller.toggle()
        source.fire(INSIDE)
        source.fire(OUTSIDE)
        controller.close()
        assert changes == [True, False]
