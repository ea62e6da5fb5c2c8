"""Input sources the interactive prompts read answers from."""

from __future__ import annotations

import logging
import re
import sys
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO

import click

logger = logging.getLogger(__name__)

_WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


class InputSource(ABC):
    @abstractmethod
    def read_line(self, prompt: str) -> str:
        """Show ``prompt`` and return one line of input without its terminator.

        Raises:
            EOFError: No more input is available.
        """
        ...

    @abstractmethod
    def write(self, message: str) -> None:
        """Emit one line of output."""
        ...

    def read_int(self, prompt: str) -> int:
        """Read a line and parse it as a base-10 integer.

        Raises:
            ValueError: The line is not a whole number.
        """
        text = self.read_line(prompt)
        if not _WHOLE_NUMBER.fullmatch(text.strip()):
            raise ValueError(f"Expected a whole number, got {text!r}")
        return int(text.strip())


class StreamInput(InputSource):
    """Reads answers from a file, or from standard input when no path is given."""

    def __init__(self, path: Path | None = None):
        self.path = path
        self._stream: IO[str] | None = None
        self._owned = False

    # ------------------------------------------------------------------ #
    # Stream management
    # ------------------------------------------------------------------ #

    def open(self) -> None:
        if self.path is not None:
            self._stream = open(self.path, encoding="utf-8")
            self._owned = True
            logger.debug("Reading answers from %s", self.path)
        else:
            self._stream = sys.stdin
            self._owned = False

    def close(self) -> None:
        if self._stream is not None and self._owned:
            self._stream.close()
        self._stream = None
        self._owned = False

    def __enter__(self) -> "StreamInput":
        self.open()
        return self

    def __exit__(self, *_) -> None:
        self.close()

    @property
    def stream(self) -> IO[str]:
        if self._stream is None:
            raise RuntimeError("Input not open. Use as context manager or call open().")
        return self._stream

    # ------------------------------------------------------------------ #
    # InputSource
    # ------------------------------------------------------------------ #

    def read_line(self, prompt: str) -> str:
        stream = self.stream
        click.echo(prompt)
        line = stream.readline()
        if line == "":
            raise EOFError("No more input")
        return line.rstrip("\r\n")

    def write(self, message: str) -> None:
        click.echo(message)


class ScriptedInput(InputSource):
    """Serves a fixed list of answers and records everything shown."""

    def __init__(self, answers: list[str]):
        self._answers = list(answers)
        self.transcript: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.transcript.append(prompt)
        if not self._answers:
            raise EOFError("No more input")
        return self._answers.pop(0)

    def write(self, message: str) -> None:
        self.transcript.append(message)

    @property
    def remaining(self) -> int:
        return len(self._answers)
