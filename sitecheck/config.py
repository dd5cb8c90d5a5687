import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    SITECHECK_WORKERS: int = int(os.getenv("SITECHECK_WORKERS") or os.cpu_count() or 1)
    SITECHECK_TIMEOUT_S: float = float(os.getenv("SITECHECK_TIMEOUT_S", "5"))
    SITECHECK_RETRIES: int = int(os.getenv("SITECHECK_RETRIES", "0"))
    SITECHECK_REPORT_PATH: str = os.getenv("SITECHECK_REPORT_PATH", "status.json")
    SITECHECK_LOG_LEVEL: str = os.getenv("SITECHECK_LOG_LEVEL", "INFO").upper()


settings = Settings()
