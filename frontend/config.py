import os

API_URL = os.getenv("API_URL", "http://localhost:8000")

APP_NAME = "MongoDB Web Manager"

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))  # seconds

DEFAULT_CONNECTION_STRING = os.getenv("DEFAULT_CONNECTION_STRING", "mongodb://localhost:27017")
