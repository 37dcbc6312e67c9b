import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# JSON snapshot of the browser store (students, classes, attendance, settings)
DATA_FILE = os.getenv("DATA_FILE", "data/ebd_data.json")

DEBUG = True

# Write demo data on startup when DATA_FILE does not exist yet
AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "1")))

LOW_FREQUENCY_THRESHOLD = int(os.getenv("LOW_FREQUENCY_THRESHOLD", "4"))
RANKING_LIMIT = int(os.getenv("RANKING_LIMIT", "6"))
PODIUM_SIZE = int(os.getenv("PODIUM_SIZE", "3"))
