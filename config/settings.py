"""Configuration management for the banking ledger."""
import logging
import os
from dataclasses import dataclass

LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass
class Settings:
    """Configuration settings for the banking ledger.

    This class centralizes all configuration values used by the console
    front-end and the logging setup.
    """

    # Display Configuration
    currency_symbol: str = '$'
    display_places: int = 2

    # Logging Configuration
    log_file: str = 'bank.log'
    log_level: str = 'INFO'
    log_format: str = '%(asctime)s:%(levelname)s:%(name)s: %(message)s'

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for ``log_level``."""
        return getattr(logging, self.log_level)

    @classmethod
    def load(cls) -> 'Settings':
        """Load settings from environment variables.

        Returns:
            Settings: A Settings instance with values from environment variables.

        Raises:
            ValueError: If an environment variable holds an invalid value.
        """
        defaults = cls()

        log_level = os.getenv('BANK_LOG_LEVEL', defaults.log_level).upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(f"BANK_LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        places = os.getenv('BANK_DISPLAY_PLACES')
        if places is None:
            display_places = defaults.display_places
        else:
            try:
                display_places = int(places)
            except ValueError:
                raise ValueError("BANK_DISPLAY_PLACES must be a non-negative integer")
            if display_places < 0:
                raise ValueError("BANK_DISPLAY_PLACES must be a non-negative integer")

        return cls(
            currency_symbol=os.getenv('BANK_CURRENCY_SYMBOL', defaults.currency_symbol),
            display_places=display_places,
            log_file=os.getenv('BANK_LOG_FILE', defaults.log_file),
            log_level=log_level,
        )
