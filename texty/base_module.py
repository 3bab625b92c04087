# texty/base_module.py
import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class TextModule(ABC):
    """
    Abstract base class for all text analysis modules.
    Each module will implement its own 'analyze' method.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}  # Module-specific config
        self.global_config = self.config.get("Global", {})  # Global config if passed down

    @abstractmethod
    def analyze(self, text: str):
        """
        Analyzes the given text for the attributes this module covers.

        Args:
            text (str): The raw text to analyze.

        Returns:
            The module's structured result for this text.
        """
        pass

    def get_module_name(self) -> str:
        """Returns the name of the module."""
        return self.module_name

    def get_int_option(self, key: str, default: int) -> int:
        """Reads an integer option from the module config, falling back to `default`."""
        value = self.config.get(key, default)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.debug("%s: ignoring non-integer option %s=%r", self.module_name, key, value)
            return default

    def debug(self, message: str, *args) -> None:
        if self.global_config.get("debug"):
            logger.debug("%s: " + message, self.module_name, *args)
