"""Configuration module for the JSON flattener application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Application settings
DEBUG = os.environ.get("DEBUG", "False").lower() in ["true", "1", "yes"]

# Folder paths
INPUT_FOLDER = os.environ.get("INPUT_FOLDER", os.path.join(BASE_DIR, "langs"))
OUTPUT_FOLDER = os.environ.get("OUTPUT_FOLDER", os.path.join(BASE_DIR, "output"))
LOGS_FOLDER = os.environ.get("LOGS_FOLDER", os.path.join(BASE_DIR, "logs"))

# Flattening and serialization
KEY_SEPARATOR = os.environ.get("KEY_SEPARATOR", "_")
JSON_INDENT = int(os.environ.get("JSON_INDENT", "2"))
JSON_SUFFIX = ".json"

# Watch mode
WATCH_MODE = os.environ.get("WATCH_MODE", "False").lower() in ["true", "1", "yes"]
WATCH_POLL_INTERVAL = float(os.environ.get("WATCH_POLL_INTERVAL", "1"))

# Retry settings
FILE_ACCESS_MAX_ATTEMPTS = 10
FILE_ACCESS_DELAY = 1
