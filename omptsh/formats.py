"""
Recognize the module format of an OpenMPT pattern dump

OpenMPT puts a one line header on top of the pattern data it copies to the
clipboard, for instance :

    ModPlug Tracker  IT
    |C-501v64SA1|...........

The 3 characters following "ModPlug Tracker " tell which kind of module the
data comes from. Tags are padded with a leading space when the format name
is only 2 letters long.
"""
from enum import Enum
from typing import FrozenSet

HEADER = "ModPlug Tracker "


class Format(str, Enum):
    MOD = "MOD"
    XM = " XM"
    S3M = "S3M"
    IT = " IT"
    MPT = "MPT"


# ProTracker-like formats, effect commands are hex digits
MOD_FORMATS = frozenset({Format.MOD, Format.XM})

# ScreamTracker-like formats, effect commands are letters
SCREAM_TRACKER_FORMATS = frozenset({Format.S3M, Format.IT, Format.MPT})


class UnrecognizedFormat(ValueError):
    pass


def detect_format(text: str) -> Format:
    if not text.startswith(HEADER):
        raise UnrecognizedFormat("Missing OpenMPT header")

    tag = text[len(HEADER) : len(HEADER) + 3]
    if len(tag) != 3:
        raise UnrecognizedFormat(f"Truncated format tag : {tag!r}")

    try:
        return Format(tag)
    except ValueError:
        raise UnrecognizedFormat(f"Unknown format tag : {tag!r}") from None


def format_family(format_: Format) -> FrozenSet[Format]:
    if format_ in MOD_FORMATS:
        return MOD_FORMATS
    elif format_ in SCREAM_TRACKER_FORMATS:
        return SCREAM_TRACKER_FORMATS
    else:
        raise ValueError(f"Format has no family : {format_}")
