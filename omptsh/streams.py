"""Where the pattern data comes from and where the result goes"""

import sys
from typing import Optional, Protocol, TextIO

import click
import pyperclip


class ResourceAccessError(OSError):
    pass


class TextSource(Protocol):
    """A TextSource gives back the whole input in one go"""

    name: str

    def read(self) -> str:
        ...


class TextSink(Protocol):
    """A TextSink receives the whole output in one go"""

    name: str

    def write(self, text: str) -> None:
        ...


class ClipboardSource:
    name = "Clipboard"

    def read(self) -> str:
        try:
            return pyperclip.paste()
        except pyperclip.PyperclipException as e:
            raise ResourceAccessError(
                f"Could not read the clipboard : {e}"
            ) from None


class ClipboardSink:
    name = "Clipboard"

    def write(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            raise ResourceAccessError(
                f"Could not write to the clipboard : {e}"
            ) from None


class StdinSource:
    """Reads up to the first blank line, so that pattern data can be pasted
    in an interactive terminal"""

    name = "STDIN"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def read(self) -> str:
        stream = sys.stdin if self.stream is None else self.stream
        lines = []
        for line in stream:
            if not line.strip():
                break
            lines.append(line)

        return "".join(lines)


class StdoutSink:
    name = "STDOUT"

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream

    def write(self, text: str) -> None:
        # color=True keeps click from stripping the escapes when stdout is
        # not a terminal
        click.echo(text, file=self.stream, nl=not text.endswith("\n"), color=True)


def source_for(use_stdin: bool) -> TextSource:
    if use_stdin:
        return StdinSource()
    else:
        return ClipboardSource()


def sink_for(use_stdout: bool) -> TextSink:
    if use_stdout:
        return StdoutSink()
    else:
        return ClipboardSink()
