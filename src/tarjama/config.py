"""
Service configuration.

Values come from the environment (a .env file is loaded if present).
"""

import os
from dotenv import load_dotenv

load_dotenv()

TRANSLATIONS_FILE = os.getenv("TRANSLATIONS_FILE", "translations.json")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3030"))
