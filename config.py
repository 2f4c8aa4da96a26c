import logging
import os

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "philschmid/bart-large-cnn-samsum"
DEFAULT_API_URL = "https://api-inference.huggingface.co/models"
PLACEHOLDER_KEY = "your_huggingface_token_here"


def _env_int(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning("Invalid value for %s: %r, using %s", name, value, default)
        return default


def _env_float(name, default):
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        logger.warning("Invalid value for %s: %r, using %s", name, value, default)
        return default


class Config:
    """Static settings for the backend, built once at startup."""

    def __init__(self, hf_api_key=None, hf_model=DEFAULT_MODEL,
                 hf_api_url=DEFAULT_API_URL, request_timeout=60,
                 upload_folder="uploads", max_upload_mb=16,
                 cors_origins="*", port=5000, debug=False, log_level="INFO"):
        if hf_api_key == PLACEHOLDER_KEY:
            hf_api_key = None
        self.hf_api_key = hf_api_key
        self.hf_model = hf_model
        self.hf_api_url = hf_api_url.rstrip("/")
        self.request_timeout = request_timeout
        self.upload_folder = upload_folder
        self.max_upload_mb = max_upload_mb
        self.cors_origins = cors_origins
        self.port = port
        self.debug = debug
        self.log_level = log_level

    @property
    def model_url(self):
        return f"{self.hf_api_url}/{self.hf_model}"

    @property
    def cors_origin_list(self):
        if self.cors_origins.strip() == "*":
            return "*"
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @classmethod
    def from_env(cls):
        """
        Build the configuration from environment variables.

        A .env file in the working directory is loaded first. The API key is
        not validated here: a missing key only shows up when the provider
        rejects the first summarization request.
        """
        load_dotenv()
        return cls(
            hf_api_key=os.getenv("HF_API_KEY"),
            hf_model=os.getenv("HF_MODEL") or DEFAULT_MODEL,
            hf_api_url=os.getenv("HF_API_URL") or DEFAULT_API_URL,
            request_timeout=_env_float("HF_TIMEOUT", 60),
            upload_folder=os.getenv("UPLOAD_FOLDER") or "uploads",
            max_upload_mb=_env_int("MAX_UPLOAD_MB", 16),
            cors_origins=os.getenv("CORS_ORIGINS") or "*",
            port=_env_int("PORT", 5000),
            debug=os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes"),
            log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        )

    def __repr__(self):
        key = "set" if self.hf_api_key else "missing"
        return f"Config(model={self.hf_model!r}, api_key={key}, timeout={self.request_timeout})"
