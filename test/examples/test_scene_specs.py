"""Run the example scene specs through a headless host."""

import importlib
import sys
from pathlib import Path

from frame_specs.hosts.headless import HeadlessHost
from frame_specs.runner import run_headless

# Add the examples directory so we can import the module
EXAMPLES_DIR = Path(__file__).resolve().parent.parent.parent / "examples" / "headless-specs"
sys.path.insert(0, str(EXAMPLES_DIR))


def _load(monkeypatch):
    monkeypatch.delitem(sys.modules, "scene_specs", raising=False)
    return importlib.import_module("scene_specs")


class TestSceneSpecs:
    def test_registers_four_tests(self, context, monkeypatch):
        _load(monkeypatch)

        assert len(context.registry) == 4

    def test_all_pass_headless(self, context, monkeypatch, capsys):
        _load(monkeypatch)
        host = HeadlessHost(frame_delta=0.05, max_frames=10000)

        exit_code = run_headless(host, context)

        assert exit_code == 0
        assert "4 examples, 0 failures" in capsys.readouterr().out

    def test_ball_replays_until_landing(self, context, monkeypatch):
        scene_specs = _load(monkeypatch)
        ball = scene_specs.Ball(height=1.0)
        steps = 0
        while ball.height > 0.0:
            ball.step(scene_specs.STEP_MS / 1000.0)
            steps += 1

        assert steps > 1
