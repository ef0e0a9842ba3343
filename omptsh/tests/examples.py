"""Pattern data as copied from OpenMPT, along with the expected highlighting
using the default colors"""

from omptsh.formats import Format


def sgr(n: int) -> str:
    return f"\u001b[{n}m"


WHITE, RED, GREEN, BLUE, MAGENTA, CYAN = (sgr(n) for n in (37, 31, 32, 34, 35, 36))

it_pattern = (
    "ModPlug Tracker  IT\n"
    "|C-501v64SA1|...........\n"
    "|D#4..p32D0.|E-5........\n"
)

it_highlighted = (
    "ModPlug Tracker  IT\n"
    f"{WHITE}|{MAGENTA}C-5{BLUE}01{GREEN}v64{WHITE}SA1|...........\n"
    f"|{MAGENTA}D#4{WHITE}..{CYAN}p32{GREEN}D00{WHITE}|{MAGENTA}E-5{WHITE}........\n"
)

mod_pattern = (
    "ModPlug Tracker MOD\n"
    "|C-501...F06\n"
    "|...01...A0.\n"
)

mod_highlighted = (
    "ModPlug Tracker MOD\n"
    f"{WHITE}|{MAGENTA}C-5{BLUE}01{WHITE}...{RED}F06\n"
    f"{WHITE}|...{BLUE}01{WHITE}...{GREEN}A00\n"
)

data = [
    (Format.IT, it_pattern, it_highlighted),
    (Format.MOD, mod_pattern, mod_highlighted),
]
