"""Rich table rendering for installed runtimes."""

from rich import box
from rich.table import Table

from jvmswitch.core.runtime import Runtime


def build_runtime_table(runtimes: list[Runtime]) -> Table:
    """Build a rounded table with one 1-based row per runtime, in registry order."""
    table = Table(box=box.ROUNDED)
    table.add_column("#", justify="right")
    table.add_column("Version")
    table.add_column("Name")
    table.add_column("Arch")

    for i, runtime in enumerate(runtimes, start=1):
        table.add_row(str(i), runtime.version, runtime.name, runtime.arch)

    return table
