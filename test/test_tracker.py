from phylowriter.tracker import EmissionTracker


def test_tracker_starts_empty():
    tracker = EmissionTracker()
    assert len(tracker) == 0
    assert not tracker.contains("weight")


def test_mark_is_idempotent():
    tracker = EmissionTracker()
    tracker.mark("weight")
    tracker.mark("weight")
    assert tracker.contains("weight")
    assert "weight" in tracker
    assert len(tracker) == 1


def test_seeded_names():
    tracker = EmissionTracker(["b", "a"])
    assert list(tracker) == ["a", "b"]


def test_trackers_are_independent():
    first = EmissionTracker()
    second = EmissionTracker()
    first.mark("color")
    assert "color" not in second
