from pathlib import Path

# Where the address book snapshot lives, relative to the working directory
DEFAULT_DATA_DIR = Path("data")
DEFAULT_FILENAME = "bae_addressbook"
SNAPSHOT_SUFFIX = ".json"
