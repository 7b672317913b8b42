from abc import ABC, abstractmethod

from .errors import UnsupportedModeError
from .mode import Mode


class Driver(ABC):
    """
    Stemming algorithm for a single language.

    Subclasses declare the modes they handle in SUPPORTED_MODES and implement
    _stem, which is only ever called with one of them.
    """

    SUPPORTED_MODES: tuple[Mode, ...] = (Mode.LIGHT, Mode.AGGRESSIVE)

    def __init__(self, locale: str) -> None:
        self.locale = locale

    def supported_modes(self) -> tuple[Mode, ...]:
        return self.__class__.SUPPORTED_MODES

    def stem(self, word: str, mode: Mode = Mode.LIGHT) -> str:
        """
        Reduce word to its stem

        Raises:
            UnsupportedModeError: mode is not one of SUPPORTED_MODES
        """
        if mode not in self.__class__.SUPPORTED_MODES:
            raise UnsupportedModeError(self, mode, self.__class__.SUPPORTED_MODES)

        return self._stem(word, mode)

    @abstractmethod
    def _stem(self, word: str, mode: Mode) -> str: ...

    def __str__(self) -> str:
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(locale={self.locale!r})"
