"""
Configuration for the Agriculture Sector Map service
All values come from the environment
"""

import os
import logging

def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

class Settings:
    """Environment-driven service settings"""

    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Upstream agriculture data service (real-data and region-details routes)
    AGRICULTURE_API_URL: str = os.getenv("AGRICULTURE_API_URL", "http://localhost:8080").strip().rstrip('/')
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "25"))
    FETCH_REGION_DETAILS: bool = _env_flag("FETCH_REGION_DETAILS", "true")

    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Agriculture Sector Map"
    VERSION: str = "1.0.0"

    # CORS origins, comma separated
    ALLOWED_HOSTS: list = [host.strip() for host in os.getenv("ALLOWED_HOSTS", "*").split(",") if host.strip()]

    VALID_ENVIRONMENTS = ("production", "staging", "development", "test")

    LOG_FORMATS = {
        "production": '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}',
        "default": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    }

    def __init__(self):
        self.validate_configuration()
        self.setup_logging()

    def validate_configuration(self):
        """Reject settings the service cannot start with"""

        if self.ENVIRONMENT not in self.VALID_ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT must be one of {', '.join(self.VALID_ENVIRONMENTS)}, got '{self.ENVIRONMENT}'"
            )

        if self.REQUEST_TIMEOUT <= 0:
            raise ValueError("REQUEST_TIMEOUT must be a positive number of seconds")

        if not self.AGRICULTURE_API_URL.startswith(("http://", "https://")):
            raise ValueError("AGRICULTURE_API_URL must be an http(s) URL")

        if self.ENVIRONMENT == "production" and "localhost" in self.AGRICULTURE_API_URL:
            logging.warning("⚠️ AGRICULTURE_API_URL points at localhost; the map will likely run on the fallback dataset")

    def setup_logging(self):
        """JSON lines in production, readable lines everywhere else"""

        log_format = self.LOG_FORMATS["production" if self.ENVIRONMENT == "production" else "default"]
        logging.basicConfig(
            level=getattr(logging, self.LOG_LEVEL.upper(), logging.INFO),
            format=log_format,
            handlers=[logging.StreamHandler()]
        )

settings = Settings()
