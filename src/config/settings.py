"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

load_dotenv()


# --- Message metadata ---
ERRORMESSAGE_KEY: str = os.getenv("ERRORMESSAGE_KEY", "errormessage")

# --- Runtime ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
