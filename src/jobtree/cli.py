# cli.py
from __future__ import annotations

import sys

import click

from jobtree import settings
from jobtree.model import Job, JobImpl, MultipleJob, SingleJob
from jobtree.payload import build_entry, build_job
from jobtree.registry import default_registry
from jobtree.ui.console import Console, set_console, get_console


def _fail(exc: Exception) -> None:
    console = get_console()
    console.print_exception(exc)
    sys.exit(1)


def _impl_from_args(ids: tuple[int, ...], tree: str | None) -> JobImpl:
    """
    Pick the job implementation described by the command line.

    --tree wins over ids; a single id becomes a SingleJob, several ids a MultipleJob.
    """
    if tree:
        return build_job(tree)
    if len(ids) == 1:
        return SingleJob(ids[0])
    return MultipleJob([SingleJob(i) for i in ids])


@click.group()
@click.option(
    "--debug",
    is_flag=True,
    default=settings.DEBUG,
    help="Enable debug mode (show stack traces and detailed output)",
)
def cli(debug):
    """jobtree: composite job trees and recursive size aggregation."""
    console = Console(debug=debug)
    set_console(console)


@cli.command()
@click.argument("ids", nargs=-1, type=int)
@click.option("--tree", default=None, help='Job tree as JSON, e.g. {"jobs": [{"id": 1}, {"id": 2}]}')
@click.option("--stop/--no-stop", default=False, help="Stop the tree after running it")
def run(ids, tree, stop):
    """Run a job tree and print its output and statuses."""
    console = get_console()

    if not ids and not tree:
        console.print_error(
            "Nothing to run",
            "Pass one or more job ids or a --tree payload.",
            suggestion="jobtree run 10 11\njobtree run --tree '{\"jobs\": [{\"id\": 1}]}'",
        )
        sys.exit(2)

    try:
        impl = _impl_from_args(ids, tree)
        job = Job(impl)

        console.print_run_output("RUN", job.run())
        console.print_job_statuses(impl)

        if stop:
            console.print_run_output("STOP", job.stop())
            console.print_job_statuses(impl)
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        _fail(e)


@cli.command()
@click.option("--tree", required=True, help='Entry tree as JSON, e.g. {"kind": "directory", "name": "root", "children": []}')
def size(tree):
    """Print a filesystem tree with sizes and its total."""
    console = get_console()
    try:
        root = build_entry(tree)
        console.print_header("TREE")
        console.print_tree(root)
        console.print_total(root.calculate_size())
    except KeyboardInterrupt:
        console.print_info("\nInterrupted by user")
        sys.exit(130)
    except Exception as e:
        _fail(e)


@cli.command()
def types():
    """List component kinds known to the default registry."""
    get_console().print_types(default_registry().available_types())


if __name__ == "__main__":
    cli()
