import os

API_VERSION = "1.4"

USER_VOLUMECTL_DIR = os.path.join(os.path.expanduser("~"), ".volumectl")
DEFAULT_CONFIG_PATH = os.path.join(USER_VOLUMECTL_DIR, "config.yaml")

CONFIG_PATH_ENV = "VOLUMECTL_CONFIG"
TARGET_ENV = "VOLUMECTL_TARGET"
TOKEN_ENV = "VOLUMECTL_TOKEN"
TIMEOUT_ENV = "VOLUMECTL_TIMEOUT"

DEFAULT_TIMEOUT_SECS = 60.0

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

NO_VOLUMES_MESSAGE = "No volumes available."
