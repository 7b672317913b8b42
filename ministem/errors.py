from enum import Enum


def format_mode(mode) -> str:
    if isinstance(mode, Enum):
        return f"{type(mode).__name__}.{mode.name}"

    return repr(mode)


def format_unsupported_mode(driver, mode, supported_modes) -> str:
    supported = '", "'.join(format_mode(m) for m in supported_modes)
    return (
        f'Driver "{driver}" does not support mode "{format_mode(mode)}". '
        f'Supported modes: ["{supported}"].'
    )


def format_driver_not_found(locale: str, drivers: dict) -> str:
    message = f'No driver found for locale "{locale}".'

    if not drivers:
        return message + " No drivers are registered."

    available = "; ".join(f"{driver} [{driver.locale}]" for driver in drivers.values())
    return message + f" Available drivers: {available}."


class StemmerError(Exception):
    """Base class of errors raised by ministem."""


class UnsupportedModeError(StemmerError, ValueError):
    """Errors raised by Driver.stem for a mode outside its supported modes."""

    def __init__(self, driver, mode, supported_modes) -> None:
        self.driver = driver
        self.mode = mode
        self.supported_modes = tuple(supported_modes)
        super().__init__(format_unsupported_mode(driver, mode, self.supported_modes))


class DriverNotFoundError(StemmerError, LookupError):
    """Errors raised by Stemmer.driver when no driver serves the locale."""

    def __init__(self, locale: str, drivers: dict | None = None) -> None:
        self.locale = locale
        self.drivers = dict(drivers or {})
        super().__init__(format_driver_not_found(locale, self.drivers))
