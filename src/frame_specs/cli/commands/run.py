"""Run command for the frame-specs CLI."""

import importlib
import importlib.util
import logging
import os
import sys
from pathlib import Path
from types import ModuleType

import click

from frame_specs.constants import FRAME_DELTA, LOG_LEVEL, MAX_FRAMES, NO_COLOR, REALTIME
from frame_specs.hosts.headless import HeadlessHost
from frame_specs.runner import run_headless
from frame_specs.utils.output import set_color

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def load_target(target: str) -> ModuleType:
    """Import a test module by file path or dotted name.

    Importing runs the module's top-level test()/focus() registrations.
    """
    path = Path(target)
    if target.endswith(".py") or path.is_file():
        if not path.is_file():
            raise click.ClickException(f"Test file not found: {target}")
        # Prefixed so a file named like an installed module does not replace it
        module_name = f"frame_specs_target_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise click.ClickException(f"Cannot load test file: {target}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        spec.loader.exec_module(module)
        return module

    # Dotted names resolve from the working directory like `python -m`
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    return importlib.import_module(target)


@click.command()
@click.argument("target")
@click.option(
    "--frame-delta",
    type=float,
    default=FRAME_DELTA,
    show_default=True,
    help="Seconds elapsed per headless frame",
)
@click.option(
    "--max-frames",
    type=int,
    default=MAX_FRAMES,
    show_default=True,
    help="Abort after this many frames (0 = unlimited)",
)
@click.option("--realtime", is_flag=True, default=REALTIME, help="Sleep between frames")
@click.option("--no-color", is_flag=True, default=NO_COLOR, help="Disable colored output")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=LOG_LEVEL if LOG_LEVEL in LOG_LEVELS else "WARNING",
    show_default=True,
    help="Logging level for harness diagnostics",
)
def run(target, frame_delta, max_frames, realtime, no_color, log_level):
    """Run the tests registered by TARGET in a headless host."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if no_color:
        set_color(False)

    try:
        load_target(target)
        host = HeadlessHost(frame_delta=frame_delta, max_frames=max_frames, realtime=realtime)
        exit_code = run_headless(host)
    except click.ClickException:
        raise
    except ImportError as e:
        raise click.ClickException(f"Failed to import {target}: {e}")
    except Exception as e:
        raise click.ClickException(str(e))

    sys.exit(exit_code)
