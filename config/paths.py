import pathlib

SETTINGS_FILE = pathlib.Path("settings.json").resolve()
LOG_FILE = pathlib.Path("basic.log").resolve()
