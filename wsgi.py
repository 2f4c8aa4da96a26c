from app import configure_logging, create_app
from config import Config

settings = Config.from_env()
configure_logging(settings.log_level)
app = create_app(settings)
