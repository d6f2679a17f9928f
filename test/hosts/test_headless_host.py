"""Unit tests for the headless host and its scene tree."""

import time
from unittest.mock import patch

import pytest

from frame_specs.hosts.headless import HeadlessHost, Node


class TestNode:
    def test_add_and_find_child(self):
        parent = Node("parent")
        child = parent.add_child(Node("child"))

        assert child.parent is parent
        assert parent.get_child_count() == 1
        assert parent.find_child("child") is child
        assert parent.find_child("missing") is None

    def test_child_cannot_have_two_parents(self):
        child = Node("child")
        Node("a").add_child(child)

        with pytest.raises(ValueError, match="already has parent"):
            Node("b").add_child(child)

    def test_free_detaches_subtree(self):
        parent = Node("parent")
        child = parent.add_child(Node("child"))
        grandchild = child.add_child(Node("grandchild"))

        child.free()

        assert parent.get_child_count() == 0
        assert child.freed and grandchild.freed
        assert child.parent is None

    def test_freed_node_cannot_be_attached(self):
        node = Node("gone")
        node.free()

        with pytest.raises(ValueError, match="freed"):
            Node("parent").add_child(node)

    def test_remove_non_child(self):
        with pytest.raises(ValueError, match="not a child"):
            Node("a").remove_child(Node("b"))

    def test_get_children_is_a_copy(self):
        parent = Node("parent")
        parent.add_child(Node("child"))

        parent.get_children().clear()

        assert parent.get_child_count() == 1


class TestHeadlessHost:
    def test_free_children_empties_node(self):
        host = HeadlessHost()
        holder = host.root.add_child(Node("TestRunner"))
        spawned = [holder.add_child(Node(f"n{i}")) for i in range(3)]

        host.free_children(holder)

        assert holder.get_child_count() == 0
        assert all(node.freed for node in spawned)
        assert holder.freed is False

    def test_run_until_quit(self):
        host = HeadlessHost(frame_delta=0.5)
        deltas = []

        def on_frame(delta):
            deltas.append(delta)
            if len(deltas) == 3:
                host.quit(7)

        assert host.run(on_frame) == 7
        assert deltas == [0.5, 0.5, 0.5]
        assert host.frame_count == 3

    def test_frame_cap(self):
        host = HeadlessHost(max_frames=5)

        with pytest.raises(RuntimeError, match="did not quit within 5 frames"):
            host.run(lambda delta: None)

        assert host.frame_count == 5

    def test_invalid_frame_delta(self):
        with pytest.raises(ValueError, match="frame_delta must be positive"):
            HeadlessHost(frame_delta=0)

    @patch("frame_specs.hosts.headless.time.sleep")
    def test_realtime_sleeps_each_frame(self, mock_sleep):
        host = HeadlessHost(frame_delta=0.02, realtime=True)

        host.run(lambda delta: host.quit())

        mock_sleep.assert_called_once_with(0.02)

    @patch("frame_specs.hosts.headless.time.sleep")
    def test_simulated_time_does_not_sleep(self, mock_sleep):
        host = HeadlessHost(realtime=False)

        host.run(lambda delta: host.quit())

        mock_sleep.assert_not_called()


@pytest.mark.slow
def test_realtime_frames_take_wall_clock_time():
    host = HeadlessHost(frame_delta=0.01, realtime=True)
    frames = []

    def on_frame(delta):
        frames.append(delta)
        if len(frames) == 3:
            host.quit()

    start = time.monotonic()
    host.run(on_frame)

    assert time.monotonic() - start >= 0.03
