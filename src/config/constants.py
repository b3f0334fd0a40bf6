# Path: src/config/constants.py
from pathlib import Path


PROJECT_ROOT = Path(__file__).resolve().parents[2]

CONFIG_PATH = PROJECT_ROOT / "src" / "config"
KOSH_CONFIG_FILE = CONFIG_PATH / "kosh_config.yaml"

DB_PATH_ENV_VAR = "KOSH_DB_PATH"
