"""
Operator Interaction
====================

The sync engine never talks to a terminal directly. It reports progress
through a SyncReporter and asks questions through a Prompter, both supplied
by the caller. The CLI passes rich/typer backed implementations; tests pass
canned ones.
"""

from typing import Dict, List, Optional, Protocol, Sequence

from wpsync_common import get_logger

logger = get_logger(__name__)


class Prompter(Protocol):
    """Blocking yes/no question to the operator."""

    def confirm(self, message: str, default: bool = False) -> bool:
        ...


class SyncReporter(Protocol):
    """Progress and result output for a sync run."""

    def log(self, message: str, style: Optional[str] = None) -> None:
        ...

    def success(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def table(self, rows: Sequence[Dict[str, str]], columns: Sequence[str]) -> None:
        ...


class AutoConfirm:
    """Answers every question with a fixed response (``--yes`` / non-interactive)."""

    def __init__(self, answer: bool = True):
        self.answer = answer

    def confirm(self, message: str, default: bool = False) -> bool:
        logger.debug(f"Auto-answering '{message}' with {'yes' if self.answer else 'no'}")
        return self.answer


class LoggingReporter:
    """Reporter that forwards everything to the wpsync logger."""

    def __init__(self):
        self.lines: List[str] = []

    def log(self, message: str, style: Optional[str] = None) -> None:
        self.lines.append(message)
        logger.info(message)

    def success(self, message: str) -> None:
        self.lines.append(message)
        logger.info(message)

    def warning(self, message: str) -> None:
        self.lines.append(message)
        logger.warning(message)

    def table(self, rows: Sequence[Dict[str, str]], columns: Sequence[str]) -> None:
        for row in rows:
            line = " | ".join(str(row.get(column, "")) for column in columns)
            self.lines.append(line)
            logger.info(line)
