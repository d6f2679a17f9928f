"""Entry point for the frame-specs CLI."""

import click

from frame_specs.cli.commands.run import run


@click.group()
def cli():
    """frame-specs: frame-driven test harness."""
    pass


cli.add_command(run)


if __name__ == "__main__":
    cli()
