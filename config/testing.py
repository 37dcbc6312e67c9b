import os

SECRET_KEY = "test-secret"

DATA_FILE = os.getenv("DATA_FILE", "data/ebd_test_data.json")

DEBUG = False
TESTING = True

AUTO_SEED_DATA = bool(int(os.getenv("AUTO_SEED_DATA", "0")))

LOW_FREQUENCY_THRESHOLD = 4
RANKING_LIMIT = 6
PODIUM_SIZE = 3
