"""Exception hierarchy shared by the codec, the file wrappers and the CLI."""


class EvicError(Exception):
    """Base class for every error raised by evic itself."""


class FirmwareError(EvicError):
    """The supplied firmware image cannot be processed."""


class FirmwareTooLarge(FirmwareError):
    def __init__(self, size: int, capacity: int):
        self.size = size
        self.capacity = capacity
        super().__init__(
            f"the firmware image ({size} bytes) exceeds the device's ROM capacity ({capacity} bytes)"
        )


class FirmwareEmpty(FirmwareError):
    def __init__(self):
        super().__init__("the firmware image is empty")


class CliError(EvicError):
    """Raised for command line problems that argparse does not catch itself."""


__all__ = [
    "CliError",
    "EvicError",
    "FirmwareEmpty",
    "FirmwareError",
    "FirmwareTooLarge",
]
