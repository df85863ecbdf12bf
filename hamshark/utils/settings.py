# hamshark/utils/settings.py
import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# backend
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./hamshark.db")
REPOSITORY_BACKEND = os.getenv("REPOSITORY_BACKEND", "memory").lower()  # memory | sql
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", REDIS_URL)
CELERY_RESULT_BACKEND = os.getenv("CELERY_RESULT_BACKEND", "redis://localhost:6379/2")
CELERY_TASK_ALWAYS_EAGER = os.getenv("CELERY_TASK_ALWAYS_EAGER", "0") == "1"

# storefront side
ORDER_SERVICE_URL = os.getenv("ORDER_SERVICE_URL", "http://localhost:8000/api")
ORDER_SERVICE_TIMEOUT = float(os.getenv("ORDER_SERVICE_TIMEOUT", 10))
CART_STORE = os.getenv("CART_STORE", "file").lower()  # file | redis | memory
CART_STORE_DIR = os.getenv("CART_STORE_DIR", "./.hamshark")
CART_STORAGE_KEY = "hamshark-cart"
CUSTOM_MEALS_STORAGE_KEY = "hamshark-custom-meals"
CART_POLL_INTERVAL_SECONDS = float(os.getenv("CART_POLL_INTERVAL_SECONDS", 1))
DEFAULT_TRUCK_LOCATION = os.getenv("DEFAULT_TRUCK_LOCATION", "Tech Park - Sector 5")

# pricing
TAX_RATE = Decimal(os.getenv("TAX_RATE", "0.05"))
FREE_DELIVERY_THRESHOLD = Decimal(os.getenv("FREE_DELIVERY_THRESHOLD", "300"))
DELIVERY_FEE = Decimal(os.getenv("DELIVERY_FEE", "25"))
LOYALTY_POINT_DIVISOR = Decimal(os.getenv("LOYALTY_POINT_DIVISOR", "10"))
GIFT_SCHEME = os.getenv("GIFT_SCHEME", "both").lower()  # tiered | legacy | both
