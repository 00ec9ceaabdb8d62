# ballotbox/config.py
# Central place for settings and constants, read from the environment / .env

import os
from dotenv import load_dotenv

load_dotenv()

# --- Database ---
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", "ballotbox")
# How long pymongo waits for a reachable server before failing a call
MONGO_TIMEOUT_MS = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))

ELECTIONS_COLLECTION = "elections"
VOTES_COLLECTION = "votes"
USERS_COLLECTION = "users"

# --- Security & JWT ---
SECRET_KEY = os.getenv("SECRET_KEY", "a_very_secret_key_for_dev_only")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# --- Voting rules ---
MIN_OPTIONS = 2
# Creators may not vote in their own elections unless this is switched on
ALLOW_CREATOR_VOTE = os.getenv("ALLOW_CREATOR_VOTE", "false").lower() in ("1", "true", "yes")

# --- API ---
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if o.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
