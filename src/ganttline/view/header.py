# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from ganttline.view.state import get_show_header


def header(console: Console, source_name: str, sub_header: Optional[str] = None) -> None:
    """Print the report header naming the record source.

    Args:
        console: Console the report is printed to
        source_name: The file the records were loaded from
        sub_header: Optional sub-header text to display
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]ganttline[/dark_orange]", (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))
    console.print(Padding(f"[plum1]{source_name}[/plum1]", (0, 1)))
