from decimal import Decimal
from dotenv import load_dotenv
import os

load_dotenv()

class Settings:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./museum.db")
    GENERAL_ADMISSION_PRICE = Decimal(os.getenv("GENERAL_ADMISSION_PRICE", "10.00"))

    SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
    ALGORITHM = os.getenv("ALGORITHM", "HS256")
    ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30"))
    ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
    # bcrypt hash; admin login is refused while this is empty. Generate one with
    # python -c "from museum_api.auth.security import get_password_hash; print(get_password_hash('secret'))"
    ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH", "")

    SEED_DATABASE = os.getenv("SEED_DATABASE", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

settings = Settings()
