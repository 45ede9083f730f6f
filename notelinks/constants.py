"""Constants shared across notelinks."""

NOTELINKS_HOME_EXT = ".notelinks"
NOTELINKS_HOME_ENV = "NOTELINKS_HOME"
CONFIG_FILE_NAME = "config.json"
LOG_FILE_NAME = "notelinks.log"

# Citation lookups may return another reference; bound the chain.
DEFAULT_MAX_DEPTH = 3
