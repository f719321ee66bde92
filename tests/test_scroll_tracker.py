"""
Tests for scroll-derived chrome signals.

Viewport: 800px tall, hero "home" spans 0..900, root margin top -80px,
so the hero stops intersecting once scroll_y reaches 820.
"""

import pytest

from controllers.scroll_tracker import ScrollTracker


@pytest.fixture
def tracker(viewport):
    changes = []
    tracker = ScrollTracker(viewport, on_change=changes.append)
    tracker.changes = changes
    tracker.start()
    yield tracker
    tracker.teardown()


class TestChromeSolid:

    def test_transparent_at_top(self, tracker):
        assert tracker.chrome_solid is False

    def test_threshold_is_exclusive(self, viewport, tracker):
        viewport.scroll_to(20)
        assert tracker.chrome_solid is False

        viewport.scroll_to(21)
        assert tracker.chrome_solid is True

    def test_back_to_top_clears(self, viewport, tracker):
        viewport.scroll_to(500)
        viewport.scroll_to(0)
        assert tracker.chrome_solid is False


class TestScrollTopVisibility:

    def test_hidden_while_hero_visible(self, viewport, tracker):
        viewport.scroll_to(819)
        assert tracker.scroll_top_visible is False

    def test_shown_before_hero_fully_leaves(self, viewport, tracker):
        viewport.scroll_to(820)
        assert tracker.scroll_top_visible is True

    def test_independent_of_chrome_signal(self, viewport, tracker):
        viewport.scroll_to(100)
        assert tracker.chrome_solid is True
        assert tracker.scroll_top_visible is False


class TestNotifications:

    def test_notifies_only_on_change(self, viewport, tracker):
        viewport.scroll_to(50)
        viewport.scroll_to(60)
        viewport.scroll_to(70)

        assert len(tracker.changes) == 1
        assert tracker.changes[0].chrome_solid is True

    def test_failing_listener_does_not_break_tracking(self, viewport):
        def boom(signals):
            raise RuntimeError("listener failed")

        tracker = ScrollTracker(viewport, on_change=boom)
        tracker.start()
        viewport.scroll_to(1000)

        assert tracker.signals.chrome_solid is True
        assert tracker.signals.scroll_top_visible is True


class TestLifecycle:

    def test_teardown_disconnects_everything(self, viewport):
        tracker = ScrollTracker(viewport)
        tracker.start()
        assert viewport.listener_count == 2

        tracker.teardown()
        assert viewport.listener_count == 0

        viewport.scroll_to(1000)
        assert tracker.chrome_solid is False

    def test_start_is_idempotent(self, viewport):
        tracker = ScrollTracker(viewport)
        tracker.start()
        tracker.start()
        assert viewport.listener_count == 2
        tracker.teardown()

    def test_no_restart_after_teardown(self, viewport):
        tracker = ScrollTracker(viewport)
        tracker.teardown()
        with pytest.raises(RuntimeError):
            tracker.start()
