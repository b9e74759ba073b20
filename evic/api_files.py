"""File-oriented convenience wrappers."""

import pathlib
import typing

from .errors import CliError
from .firmware import FirmwareImage

DEFAULT_STEM = "firmware"
DEFAULT_EXTENSION = "bin"

ENCRYPTED_SUFFIX = "_encrypted"
DECRYPTED_SUFFIX = "_decrypted"

PathLike = typing.Union[str, pathlib.Path]


def _paths_equal(a: pathlib.Path, b: pathlib.Path) -> bool:
    try:
        return a.resolve() == b.resolve()
    except OSError:
        return a.absolute() == b.absolute()


def load(path: PathLike) -> FirmwareImage:
    """Open `path` and run it through the codec."""
    with open(path, "rb") as handle:
        return FirmwareImage.transform(handle)


def suffixed_file_path(path: PathLike, suffix: str) -> pathlib.Path:
    """Insert `suffix` between the file stem and its extension.

    `test.bin` becomes `test_decrypted.bin`; a path with no extension
    gets `.bin`, so `test` becomes `test_decrypted.bin` as well.
    """
    path = pathlib.Path(path)
    stem = path.stem or DEFAULT_STEM
    extension = path.suffix[1:] if path.suffix else DEFAULT_EXTENSION
    return path.with_name(f"{stem}{suffix}.{extension}")


def resolve_output(path: PathLike, output: typing.Optional[PathLike], suffix: str) -> pathlib.Path:
    src = pathlib.Path(path)
    if output:
        out_path = pathlib.Path(output)
    else:
        out_path = suffixed_file_path(src, suffix)
    if _paths_equal(out_path, src):
        raise CliError("Refusing to overwrite input file; choose a different output path")
    return out_path


def transform_file(path: PathLike, output: PathLike) -> pathlib.Path:
    """Transform the firmware at `path` and write it to `output`.

    The output file is only created once the input has been read and
    transformed, so a rejected image leaves nothing behind.
    """
    firmware = load(path)
    out_path = pathlib.Path(output)
    with open(out_path, "wb") as handle:
        firmware.save(handle)
    return out_path


__all__ = [
    "DECRYPTED_SUFFIX",
    "ENCRYPTED_SUFFIX",
    "load",
    "resolve_output",
    "suffixed_file_path",
    "transform_file",
]
