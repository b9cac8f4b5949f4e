import os

from dotenv import load_dotenv

load_dotenv()

"""
НАСТРОЙКА СЕТИ
"""
# RPC эндпоинт и приватный ключ берутся из файла .env
RPC_URL = os.getenv("RPC_URL", "")

PRIVATE_KEY = os.getenv("PRIVATE_KEY", "")

# Прокси в формате 'username:password@ip_address:port' (необязательно)
PROXY = os.getenv("PROXY") or None

"""
НАСТРОЙКИ СВАПА
"""
# Количество входного токена (USDC) для свапа
SWAP_AMOUNT = 1

# Комиссия пула, по которой ищется пул в фабрике (500, 3000, 10000)
POOL_FEE_TIER = 3000

# Через сколько секунд после отправки свап станет недействительным
SWAP_DEADLINE_SECONDS = 1800

# Минимальное количество выходного токена (в wei). Не может быть меньше 1
AMOUNT_OUT_MINIMUM = 1

# Лимит цены sqrtPriceX96. Если `None`, используется граница в сторону свапа
SQRT_PRICE_LIMIT_X96 = None

"""
НАСТРОЙКИ ТРАНЗАКЦИЙ
"""
# Диапазон для задержки после аппрува
POST_APPROVE_DELAY_RANGE = [5, 10]

# Максимальное время ожидания подтверждения транзакции (в секундах)
VERIFY_TX_TIMEOUT = 300

"""
НАСТРОЙКА ЛОГОВ
"""
# Логи в телеграм
LOG_TO_TELEGRAM = os.getenv("LOG_TO_TELEGRAM", "").strip().lower() in ("1", "true", "yes")
TELEGRAM_IDS = [chat_id.strip() for chat_id in os.getenv("TELEGRAM_IDS", "").split(",") if chat_id.strip()]
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN", "")

# Путь к файлу логов и размер, после которого файл ротируется
LOGS_FILE_PATH = "data/logs/logs.log"
LOGS_ROTATION = "10 MB"
