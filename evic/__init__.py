"""Firmware codec for the eVic VTC Mini.

Usage::

    import evic

    with open("firmware.bin", "rb") as src:
        image = evic.transform(src)
    with open("firmware_decrypted.bin", "wb") as dst:
        evic.save(image, dst)
"""

from .api_files import load, resolve_output, suffixed_file_path, transform_file
from .errors import CliError, EvicError, FirmwareEmpty, FirmwareError, FirmwareTooLarge
from .firmware import ROM_CAPACITY, FirmwareImage, key_byte, save, transform
from .version import __version__

__all__ = [
    "CliError",
    "EvicError",
    "FirmwareEmpty",
    "FirmwareError",
    "FirmwareImage",
    "FirmwareTooLarge",
    "ROM_CAPACITY",
    "__version__",
    "key_byte",
    "load",
    "resolve_output",
    "save",
    "suffixed_file_path",
    "transform",
    "transform_file",
]
