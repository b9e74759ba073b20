"""evicutil: encrypt and decrypt eVic VTC Mini firmware images."""

import argparse
import os
import pathlib
import sys

import colorama

from .api_files import DECRYPTED_SUFFIX, ENCRYPTED_SUFFIX, resolve_output, transform_file
from .errors import EvicError
from .version import __version__

NAME = "evicutil"

# command -> (default output suffix, help)
COMMANDS = {
    "encrypt": (ENCRYPTED_SUFFIX, "Encrypt a decrypted firmware image so the device accepts it"),
    "decrypt": (DECRYPTED_SUFFIX, "Decrypt a vendor firmware image"),
}


def _cli_config_path() -> pathlib.Path:
    cfg = os.getenv("EVIC_CLI_CONFIG")
    if cfg:
        return pathlib.Path(cfg).expanduser()
    xdg = os.getenv("XDG_CONFIG_HOME")
    if xdg:
        return pathlib.Path(xdg) / "evic" / "cli.conf"
    appdata = os.getenv("APPDATA")
    if appdata:
        return pathlib.Path(appdata) / "evic" / "cli.conf"
    return pathlib.Path("~/.config/evic/cli.conf").expanduser()


def _cli_plain_mode() -> bool:
    if os.getenv("EVIC_CLI_PLAIN"):
        return True
    if os.getenv("NO_COLOR"):
        return True
    style = (os.getenv("EVIC_CLI_STYLE") or "").strip().lower()
    if style in {"plain", "boring", "0", "false", "off"}:
        return True
    if style in {"color", "emoji", "on"}:
        return False
    cfg_path = _cli_config_path()
    try:
        if cfg_path.exists():
            data = cfg_path.read_text(encoding="utf-8").lower()
            if "plain=1" in data or "plain=true" in data:
                return True
            if "style=plain" in data or "mode=plain" in data:
                return True
    except OSError:
        pass
    return False


class _CliTheme:
    def __init__(self, plain: bool):
        self.plain = plain
        self.reset = "" if plain else colorama.Style.RESET_ALL
        self.bold = "" if plain else colorama.Style.BRIGHT
        self.red = "" if plain else colorama.Fore.RED
        self.green = "" if plain else colorama.Fore.GREEN

    def _wrap(self, msg: str, color: str, emoji: str) -> str:
        if self.plain:
            return msg
        return f"{self.bold}{color}{emoji} {msg}{self.reset}"

    def ok(self, msg: str) -> str:
        return self._wrap(msg, self.green, "✅")

    def err(self, msg: str) -> str:
        return self._wrap(msg, self.red, "❌")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=NAME,
        description="Encrypt and decrypt eVic VTC Mini firmware images",
    )
    parser.add_argument(
        "-v", "--version",
        action="version",
        version=f"{NAME} {__version__}",
        help="output version information and exit",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    for command, (suffix, help_text) in COMMANDS.items():
        sub = subparsers.add_parser(command, help=help_text, description=help_text)
        sub.add_argument("path", help="Input firmware image")
        sub.add_argument(
            "-o",
            dest="output",
            metavar="NAME",
            help=f"set output filename (default: input name with {suffix!r} inserted before the extension)",
        )
    return parser


def cli(argv=None) -> int:
    colorama.just_fix_windows_console()
    theme = _CliTheme(_cli_plain_mode())
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    suffix, _ = COMMANDS[args.command]
    try:
        out_path = resolve_output(args.path, args.output, suffix)
        transform_file(args.path, out_path)
    except (EvicError, OSError) as exc:
        print(theme.err(f"{args.path}: {exc}"), file=sys.stderr)
        return 1

    print(theme.ok(f"{args.path} -> {out_path}"))
    return 0


def main(argv=None) -> int:
    try:
        return cli(argv)
    except KeyboardInterrupt:
        print("Exiting...")
        return 130


if __name__ == "__main__":
    raise SystemExit(main())
