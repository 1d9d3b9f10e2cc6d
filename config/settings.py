from dataclasses import dataclass
import json

from config.paths import SETTINGS_FILE
from config.front import FRAMERATE, DEFAULT_WINDOW_SIZE


LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
MIN_WINDOW_SIZE = 200


@dataclass
class Settings:
    framerate: int = FRAMERATE
    window_width: int = DEFAULT_WINDOW_SIZE[0]
    window_height: int = DEFAULT_WINDOW_SIZE[1]
    show_debug: bool = True
    log_level: str = 'WARNING'

    def dump(self):
        with open(SETTINGS_FILE, 'w') as f:
            json.dump(self.__dict__, f)

    def fix_invalid(self):
        self.framerate = max(15, min(240, int(self.framerate)))
        self.window_width = max(MIN_WINDOW_SIZE, int(self.window_width))
        self.window_height = max(MIN_WINDOW_SIZE, int(self.window_height))
        self.show_debug = bool(self.show_debug)
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            print(f'[SettingsWarning] Unknown log level "{self.log_level}". Using WARNING.')
            self.log_level = 'WARNING'

    def get_window_size(self) -> tuple[int, int]:
        return self.window_width, self.window_height

    @staticmethod
    def create_default() -> 'Settings':
        s = Settings()
        s.dump()
        return s

    @staticmethod
    def load() -> 'Settings':
        if not SETTINGS_FILE.exists():
            print('[SettingsWarning] Settings file does not exist. Creating a new settings file with default values.')
            return Settings.create_default()
        with open(SETTINGS_FILE, 'r') as f:
            try:
                json_data = json.load(f)
            except json.JSONDecodeError:
                print('[SettingsError] Settings file corrupted. Creating settings file with default values.')
                return Settings.create_default()
        if not isinstance(json_data, dict):
            print('[SettingsError] Settings file does not contain an object. Creating settings file with default values.')
            return Settings.create_default()
        # check against all fields
        s = Settings()
        for field in Settings.__dataclass_fields__.keys():
            if field in json_data:
                setattr(s, field, json_data[field])
            else:
                print(f'[SettingsWarning] Settings file does not contain field "{field}". Using default value.')
        if unknown_keys := json_data.keys() - Settings.__dataclass_fields__.keys():
            print(f'[SettingsWarning] Settings file contains unknown fields: {unknown_keys}.\nThe foreign fields are deprecated and will be ignored.')
        try:
            s.fix_invalid()
        except (TypeError, ValueError):
            print('[SettingsError] Settings file contains invalid values. Creating settings file with default values.')
            return Settings.create_default()
        print(f'[Settings] Settings file loaded successfully. Using the following settings:\n{s}')
        s.dump()
        return s
