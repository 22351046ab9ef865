"""
core/config.py — Single responsibility: load environment variables from .env
and expose them as module-level constants.

Variable names match the existing deployment's .env files.
"""

from dotenv import load_dotenv
import os

load_dotenv()

MONGO_URL: str = os.getenv("Mongo_URL", "")
DB_NAME: str = os.getenv("dbName", "")
COLLECTION_NAME: str = os.getenv("Collection", "")

# pymongo waits this long for a reachable server before giving up.
# Kept as the raw string; MongoSettings parses it.
SERVER_SELECTION_TIMEOUT_MS: str = os.getenv("MONGO_SERVER_SELECTION_TIMEOUT_MS", "5000")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
