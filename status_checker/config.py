import os
from dotenv import load_dotenv

load_dotenv()


class Settings:
    # Raw values; build_run_config validates them so bad input is a config error.
    CHECKER_WORKERS: str = os.getenv("CHECKER_WORKERS") or str(os.cpu_count() or 1)
    CHECKER_TIMEOUT_S: str = os.getenv("CHECKER_TIMEOUT_S", "5")
    CHECKER_CONNECT_TIMEOUT_S: str | None = os.getenv("CHECKER_CONNECT_TIMEOUT_S") or None
    CHECKER_RETRIES: str = os.getenv("CHECKER_RETRIES", "0")
    CHECKER_RETRY_DELAY_MS: str = os.getenv("CHECKER_RETRY_DELAY_MS", "100")
    CHECKER_OUTPUT_PATH: str = os.getenv("CHECKER_OUTPUT_PATH", "status.json")
    CHECKER_USER_AGENT: str = os.getenv(
        "CHECKER_USER_AGENT", "status-checker/1.0 (+python-requests)"
    )
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
