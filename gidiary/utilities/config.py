"""Configuration management for the GI Diary fuel service."""
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
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'INFO').upper()

# Fuel planning
MAX_QUANTITY_PER_PRODUCT: Final[int] = int(os.getenv('MAX_QUANTITY_PER_PRODUCT', '5'))

# Live session display
READY_WINDOW_MINUTES: Final[int] = int(os.getenv('READY_WINDOW_MINUTES', '2'))

# Analysis
MIN_SESSIONS_FOR_RECOMMENDATIONS: Final[int] = int(os.getenv('MIN_SESSIONS_FOR_RECOMMENDATIONS', '5'))
