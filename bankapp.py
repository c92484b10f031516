import logging
from dotenv import load_dotenv
from config.settings import Settings
from src.console.menu import BankMenu
from src.services.bank_service import BankService


def setup_logging(settings: Settings) -> logging.Logger:
    logger = logging.getLogger('src')
    logger.setLevel(settings.log_level_value)
    handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
    handler.setFormatter(logging.Formatter(settings.log_format))
    logger.addHandler(handler)
    return logger


def main():
    load_dotenv()

    # Load settings from environment variables
    settings = Settings.load()
    setup_logging(settings)

    bank = BankService()
    BankMenu(bank, settings).run()


if __name__ == '__main__':
    main()
