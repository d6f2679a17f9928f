#!/usr/bin/env python3
"""
Example specs for the headless host.

Run with:
    frame-specs run examples/headless-specs/scene_specs.py --max-frames 10000

Each test receives the runner's root node. Anything attached under it is
freed before the next test starts. Tests that need time to pass call wait()
and use tick() to tell which pass they are on.
"""

from frame_specs import Node, assert_approx_eq, test, tick, wait

GRAVITY = 9.8
STEP_MS = 100


class Ball(Node):
    def __init__(self, height: float) -> None:
        super().__init__("Ball")
        self.height = height
        self.velocity = 0.0

    def step(self, seconds: float) -> None:
        self.velocity += GRAVITY * seconds
        self.height = max(0.0, self.height - self.velocity * seconds)


@test
def starts_with_empty_root(root):
    assert root.get_child_count() == 0


@test
def spawns_ball(root):
    root.add_child(Ball(height=10.0))
    assert root.find_child("Ball") is not None


@test
def ball_lands_after_a_few_steps(root):
    if tick() == 0:
        root.add_child(Ball(height=1.0))

    ball = root.find_child("Ball")
    ball.step(STEP_MS / 1000.0)

    if ball.height > 0.0:
        wait(STEP_MS)

    assert_approx_eq(ball.height, 0.0, 1e-9)


@test
def previous_ball_was_freed(root):
    assert root.find_child("Ball") is None
