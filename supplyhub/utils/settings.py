# supplyhub/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

# redis | file | memory
CART_STORAGE_BACKEND = os.getenv("CART_STORAGE_BACKEND", "file")
CART_STORAGE_PATH = os.getenv("CART_STORAGE_PATH", ".supplyhub/profile.json")
CART_STORAGE_KEY = os.getenv("CART_STORAGE_KEY", "supplyhub_cart")

# multiplier for simulated API latency, 0 disables it
LATENCY_SCALE = float(os.getenv("LATENCY_SCALE", 1.0))

SEED_MOCK_DATA = os.getenv("SEED_MOCK_DATA", "1").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# platform fee, fixed for every order
COMMISSION_RATE = "0.03"
SUBSCRIPTION_PRICE = 300
LOW_STOCK_THRESHOLD = 10
