import os
import threading
from dotenv import load_dotenv

load_dotenv()

class BackendSettings:
    _instance = None
    _lock = threading.Lock()

    def __init__(self):
        self.DEBUG_MODE = os.environ.get("DEBUG_MODE","development")
        self.LOG_LEVEL = os.environ.get("LOG_LEVEL","INFO").upper()
        self.API_PREFIX = os.environ.get("API_PREFIX","/api").rstrip("/")

        # Database settings
        self.POSTGRES_URL = os.environ.get("POSTGRES_URL","localhost:5432")
        self.POSTGRES_USER = os.environ.get("POSTGRES_USER","postgres")
        self.POSTGRES_PASSWORD = os.environ.get("POSTGRES_PASSWORD","postgres")
        self.POSTGRES_DB = os.environ.get("POSTGRES_DB","ucsb")
        self.DATABASE_URL = os.environ.get("DATABASE_URL", None)
        self.DB_POOL_SIZE = int(os.environ.get("DB_POOL_SIZE","10"))
        self.DB_MAX_OVERFLOW = int(os.environ.get("DB_MAX_OVERFLOW","5"))

        # Authentication settings
        self.AUTH_TOKENS_CONFIG = os.environ.get("AUTH_TOKENS_CONFIG", None)  # Path to token registry file

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super(BackendSettings, cls).__new__(cls)
        return cls._instance

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_URL}/{self.POSTGRES_DB}"

    @property
    def is_production(self) -> bool:
        return self.DEBUG_MODE == "production"

settings = BackendSettings()
