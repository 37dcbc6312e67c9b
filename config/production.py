import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = os.getenv("DATA_FILE", "/var/lib/ebd-gestor/ebd_data.json")

DEBUG = False

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))

LOW_FREQUENCY_THRESHOLD = int(os.getenv("LOW_FREQUENCY_THRESHOLD", "4"))
RANKING_LIMIT = int(os.getenv("RANKING_LIMIT", "6"))
PODIUM_SIZE = int(os.getenv("PODIUM_SIZE", "3"))
