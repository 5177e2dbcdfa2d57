import os

# Get the base directory of the package (the directory containing this file)
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Bundled reference data ships inside the package
DATA_DIR = os.path.join(BASE_DIR, 'data')

ACCENTS_PATH = os.path.abspath(os.path.join(DATA_DIR, 'accents.txt'))

# Default Mochi API endpoint
MOCHI_BASE_URL = "https://app.mochi.cards/api/"
