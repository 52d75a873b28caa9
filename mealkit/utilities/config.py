"""Configuration management for the meal-kit label service."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

from mealkit.utilities import constants

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Label printing
USE_BY_DAYS: Final[int] = int(os.getenv('USE_BY_DAYS', str(constants.USE_BY_DAYS)))
DEFAULT_LABEL_QUANTITY: Final[int] = int(os.getenv('DEFAULT_LABEL_QUANTITY', str(constants.DEFAULT_LABEL_QUANTITY)))
LABEL_BRAND_NAME: Final[str] = os.getenv('LABEL_BRAND_NAME', 'Fit Food Tasty')
LABEL_FOOTER_TEXT: Final[str] = os.getenv('LABEL_FOOTER_TEXT', 'www.fitfoodtasty.co.uk')

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
TEMPLATES_DIR: Final[Path] = BASE_DIR / 'templates'
