from enum import Enum
from typing import List, Optional

from loguru import logger as loguru_logger
from telebot import TeleBot

from config import LOG_TO_TELEGRAM, LOGS_FILE_PATH, LOGS_ROTATION, TELEGRAM_BOT_TOKEN, TELEGRAM_IDS


class LogType(Enum):
    SUCCESS = ("success", "🟢")
    ERROR = ("error", "🔴")
    INFO = ("info", "⚪️")
    DEBUG = ("debug", "🔵")
    EXCEPTION = ("exception", "❗️")
    WARNING = ("warning", "🟠")

    @property
    def method(self) -> str:
        return self.value[0]

    @property
    def icon(self) -> str:
        return self.value[1]


class Logger:
    """
    Console/file logger with optional mirroring of selected records to Telegram.
    Errors are mirrored by default.
    """

    def __init__(self, telegram_ids: Optional[List[str]] = None) -> None:
        self.loguru_logger = loguru_logger
        self.tg_logger = Logger._setup_telegram_bot()
        self.telegram_ids = telegram_ids if telegram_ids is not None else TELEGRAM_IDS
        Logger._configure_file_logging()

    def _log(self, log_type: LogType, msg: str, log_to_telegram: bool = False) -> None:
        getattr(self.loguru_logger.opt(depth=2), log_type.method)(msg)

        if LOG_TO_TELEGRAM and log_to_telegram:
            self.log_to_telegram(msg=msg, log_type=log_type)

    def success(self, msg: str, log_to_telegram: bool = False) -> None:
        self._log(log_type=LogType.SUCCESS, msg=msg, log_to_telegram=log_to_telegram)

    def info(self, msg: str, log_to_telegram: bool = False) -> None:
        self._log(log_type=LogType.INFO, msg=msg, log_to_telegram=log_to_telegram)

    def error(self, msg: str, log_to_telegram: bool = True) -> None:
        self._log(log_type=LogType.ERROR, msg=msg, log_to_telegram=log_to_telegram)

    def debug(self, msg: str, log_to_telegram: bool = False) -> None:
        self._log(log_type=LogType.DEBUG, msg=msg, log_to_telegram=log_to_telegram)

    def exception(self, msg: str, log_to_telegram: bool = False) -> None:
        self._log(log_type=LogType.EXCEPTION, msg=msg, log_to_telegram=log_to_telegram)

    def warning(self, msg: str, log_to_telegram: bool = False) -> None:
        self._log(log_type=LogType.WARNING, msg=msg, log_to_telegram=log_to_telegram)

    def log_to_telegram(self, log_type: LogType, msg: str) -> None:
        if self.tg_logger is None:
            return
        for chat_id in self.telegram_ids:
            try:
                self.tg_logger.send_message(chat_id=chat_id, text=f"{log_type.icon} {msg}")
            except Exception as e:
                self.loguru_logger.error(f"Telegram log to `{chat_id}` failed with error: {e}")

    @staticmethod
    def _setup_telegram_bot() -> Optional[TeleBot]:
        if LOG_TO_TELEGRAM and TELEGRAM_BOT_TOKEN:
            return TeleBot(token=TELEGRAM_BOT_TOKEN, disable_web_page_preview=True)
        return None

    @staticmethod
    def _configure_file_logging() -> None:
        loguru_logger.add(sink=LOGS_FILE_PATH, rotation=LOGS_ROTATION)


logger = Logger()
