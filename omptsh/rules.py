"""Which role each column character plays, depending on where it sits in a
channel cell

    |C-501v64SA1
    ^^  ^ ^  ^
    ||  | |  effect command (and every 3rd column after that)
    ||  | volume command
    ||  instrument
    |note
    channel separator
"""
from typing import Dict, FrozenSet

from .formats import MOD_FORMATS, SCREAM_TRACKER_FORMATS, Format, format_family
from .palette import Role

NOTE_NAMES = set("ABCDEFG")

VOLUME_COMMANDS = {
    **{c: Role.VOLUME for c in "abcdv"},
    **{c: Role.PANNING for c in "lpr"},
    **{c: Role.PITCH for c in "efghu"},
}

# S3M / IT / MPTM
SCREAM_TRACKER_EFFECTS = {
    **{c: Role.VOLUME for c in "DKLMNR"},
    **{c: Role.PANNING for c in "PXY"},
    **{c: Role.PITCH for c in "EFGHU+*"},
    **{c: Role.GLOBAL for c in "ABCTVW"},
}

# MOD / XM
MOD_EFFECTS = {
    **{c: Role.VOLUME for c in "567AC"},
    **{c: Role.PANNING for c in "8PY"},
    **{c: Role.PITCH for c in "1234X"},
    **{c: Role.GLOBAL for c in "BDFGH"},
}

EFFECT_COMMANDS: Dict[FrozenSet[Format], Dict[str, Role]] = {
    SCREAM_TRACKER_FORMATS: SCREAM_TRACKER_EFFECTS,
    MOD_FORMATS: MOD_EFFECTS,
}


def note_role(c: str) -> Role:
    return Role.NOTE if c in NOTE_NAMES else Role.DEFAULT


def instrument_role(c: str) -> Role:
    # anything below '0' is a placeholder ('.' or ' ')
    return Role.INSTRUMENT if c >= "0" else Role.DEFAULT


def volume_command_role(c: str) -> Role:
    return VOLUME_COMMANDS.get(c, Role.DEFAULT)


def effect_command_role(c: str, format_: Format) -> Role:
    return EFFECT_COMMANDS[format_family(format_)].get(c, Role.DEFAULT)
