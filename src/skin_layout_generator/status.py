"""Status messages and the folder progress bar."""

from __future__ import annotations

import sys
from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Optional

from tqdm import tqdm


def format_status(action: str, detail: str) -> str:
    """Return ``action`` and ``detail`` joined into one status line."""

    action = action.strip()
    detail = detail.strip()
    if not action:
        return detail
    if not detail:
        return action
    return f"{action} {detail}"


@dataclass
class StatusReporter(AbstractContextManager["StatusReporter"]):
    """Logs status lines above a progress bar that ticks once per folder.

    ``quiet`` silences both the messages and the bar. The bar is disabled by
    default when stdout is not a terminal, in which case messages are printed.
    """

    total: Optional[int] = None
    description: str = "Folders"
    unit: str = "folder"
    quiet: bool = False
    disable: Optional[bool] = None

    def __post_init__(self) -> None:
        self._bar = None
        if self.disable is None:
            self.disable = self.quiet or not sys.stdout.isatty()
        if self.total is not None:
            self.set_total(self.total)

    def log(self, message: str) -> None:
        if self.quiet:
            return
        if self._bar is not None and not self.disable:
            tqdm.write(message, file=sys.stdout)
        else:
            print(message, file=sys.stdout, flush=True)

    def log_status(self, action: str, detail: str) -> None:
        self.log(format_status(action, detail))

    def set_total(self, total: int) -> None:
        self.total = total
        if self._bar is None:
            self._bar = tqdm(
                total=total,
                desc=self.description,
                unit=self.unit,
                dynamic_ncols=True,
                leave=False,
                file=sys.stdout,
                disable=self.disable,
            )
        else:
            self._bar.total = total
            self._bar.refresh()

    def advance(self, amount: int = 1) -> None:
        if self._bar is not None:
            self._bar.update(amount)

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None

    def __exit__(self, exc_type, exc, exc_tb):
        self.close()
        return False
