# pixshop/config.py
import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

# Load environment variables
load_dotenv()

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent.parent


def _env_int(name: str) -> Optional[int]:
    value = (os.getenv(name) or "").strip()
    return int(value) if value.isdigit() else None


class Config:
    """Configuration settings for the bot"""

    # Discord settings
    DISCORD_TOKEN: Optional[str] = os.getenv("DISCORD_TOKEN")
    CLIENT_ID: Optional[int] = _env_int("CLIENT_ID")
    GUILD_ID: Optional[int] = _env_int("GUILD_ID")

    # Store settings
    ADMIN_ROLE_ID: Optional[int] = _env_int("ADMIN_ROLE_ID")
    SALES_CATEGORY_ID: Optional[int] = _env_int("SALES_CATEGORY_ID")
    TICKET_CLOSE_DELAY: float = float(os.getenv("TICKET_CLOSE_DELAY", "5"))

    # Other settings
    TIMEZONE: str = os.getenv("TZ", "America/Sao_Paulo")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Paths
    DB_PATH = Path(os.getenv("DB_PATH", str(BASE_DIR / "db.json")))
    LOG_DIR = Path(os.getenv("LOG_DIR", str(BASE_DIR / "logs")))

    REQUIRED = (
        "DISCORD_TOKEN",
        "CLIENT_ID",
        "GUILD_ID",
        "ADMIN_ROLE_ID",
        "SALES_CATEGORY_ID",
    )

    @classmethod
    def validate(cls) -> None:
        """Fail fast when a required setting is missing"""
        for name in cls.REQUIRED:
            if not getattr(cls, name):
                raise ValueError(f"No {name} set in environment")


def setup_logging():
    """Configure logging settings"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    Config.LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = Config.LOG_DIR / "bot.log"

    logging.basicConfig(
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        format=log_format,
        handlers=[
            logging.FileHandler(log_file),
            logging.StreamHandler()
        ]
    )
    # discord.py is chatty at INFO
    logging.getLogger("discord.gateway").setLevel(logging.WARNING)
