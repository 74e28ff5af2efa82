"""Configuration management for the KingMenu application."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Meal plan
DEFAULT_USER_ID: Final[str] = os.getenv('DEFAULT_USER_ID', 'local-user')
UPCOMING_WINDOW_DAYS: Final[int] = int(os.getenv('UPCOMING_WINDOW_DAYS', '7'))
UPCOMING_LIMIT: Final[int] = int(os.getenv('UPCOMING_LIMIT', '10'))

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = BASE_DIR / 'data'
DISHES_FILE: Final[Path] = Path(os.getenv('DISHES_FILE', str(DATA_DIR / 'dishes.json')))
