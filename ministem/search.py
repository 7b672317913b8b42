import logging
from typing import Iterable

from .driver import Driver
from .errors import DriverNotFoundError
from .mode import Mode

logger = logging.getLogger(__name__)


class Stemmer:
    """
    Registry of drivers keyed by their two-letter locale.

    Register drivers before stemming from several threads, the registry itself
    takes no locks.
    """

    def __init__(self, drivers: Iterable[Driver] = ()) -> None:
        self._drivers: dict[str, Driver] = {}

        for driver in drivers:
            self.add(driver)

    @staticmethod
    def normalize(locale: str) -> str:
        """Reduce a locale such as "en_US" or "EN-gb" to its language code"""
        return locale[:2].lower()

    def add(self, driver: Driver) -> "Stemmer":
        """
        Register driver under its locale, replacing any previous one

        The locale is stored as given while lookups use the two-letter code,
        so a driver built with e.g. "en-gb" is never found.
        """
        if driver.locale != self.normalize(driver.locale):
            logger.warning(
                "Driver %s registered for locale %r is unreachable, lookups use %r",
                driver,
                driver.locale,
                self.normalize(driver.locale),
            )

        if driver.locale in self._drivers:
            logger.debug(
                "Replacing driver %s with %s for locale %r",
                self._drivers[driver.locale],
                driver,
                driver.locale,
            )
        else:
            logger.debug("Registering driver %s for locale %r", driver, driver.locale)

        self._drivers[driver.locale] = driver
        return self

    def delete(self, locale: str) -> None:
        """Remove the driver serving locale, if any"""
        locale = self.normalize(locale)
        if locale in self._drivers:
            logger.debug("Removing driver %s for locale %r", self._drivers[locale], locale)
            del self._drivers[locale]

    def has_driver(self, locale: str) -> bool:
        """Return True if a driver serves locale"""
        return self.normalize(locale) in self._drivers

    def driver(self, locale: str) -> Driver:
        """
        Fetch the driver serving locale

        Raises:
            DriverNotFoundError: no driver is registered for the locale
        """
        lang = self.normalize(locale)

        if lang not in self._drivers:
            raise DriverNotFoundError(lang, self._drivers)

        return self._drivers[lang]

    def drivers(self) -> dict[str, Driver]:
        """Return a snapshot of the registered drivers"""
        return dict(self._drivers)

    def stem(self, word: str, locale: str, mode: Mode = Mode.LIGHT) -> str:
        """
        Stem word with the driver serving locale

        Raises:
            DriverNotFoundError: no driver is registered for the locale
            UnsupportedModeError: the driver does not support mode
        """
        return self.driver(locale).stem(word, mode)
