"""axislib.config.

Copyright (c) 2025 Will Bickerstaff
Licensed under the MIT License.
See LICENSE file in the root directory of this project.

Description: Locate & parse a configuration file
Author: Will Bickerstaff
Version: 0.1
"""

import logging
import configparser
from gpsaxis.common import Axis


class ConfigNotLoaded(Exception):
    """Exception raised when the configuration fails to load."""

    pass


class ConfigLoader:
    """Singleton-based configuration loader for the coordinate tools.

    This class loads configurations from a specified file, validates its
    structure, and falls back to default values if a configuration file is
    invalid or unavailable.
    """

    _instance = None
    _FALLBACK_VALUES = {
        # ------------------------------------------------------------#
        "GENERAL": {
            "log_level":                {"value": "INFO",
                                         "type": str},

            "log_file":                 {"value": "gpsaxis.log",
                                         "type": str},
        },
        # ------------------------------------------------------------#
        "PARSE": {
            "default_axis":             {"value": "latitude",
                                         "type": str},
        },
        # ------------------------------------------------------------#
        "OUTPUT": {
            "decimal_places":           {"value": 6,
                                         "type": int},

            "show_decimal":             {"value": True,
                                         "type": bool},
        },
    }

    def __new__(cls, *args, **kwargs):
        """Ensure only one instance of ConfigLoader is created.

        Returns
        -------
            ConfigLoader: A single instance of the `ConfigLoader` class.
        """
        if cls._instance is None:
            cls._instance = super(ConfigLoader, cls).__new__(cls)
            # Track initialization status with a private attribute
            cls._instance.__initialized = False
        return cls._instance

    def __init__(self, config_path: str = "config.ini"):
        """Initialize ConfigLoader with configuration file path.

        Initialization is controlled by the `__initialized` flag, the path
        given on the first call is the one used.

        Args
        ----
            config_path (str): Path to the configuration file. Defaults
                            to "config.ini".
        """
        if not self.__initialized:
            self.config_path = config_path
            self.config = configparser.ConfigParser()
            self._valid_config = False
            self.load_config()
            self.__initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton so the next call loads a fresh config."""
        cls._instance = None

    @property
    def valid_config(self) -> bool:
        """bool: Indicates if the current configuration is valid."""
        return self._valid_config

    @property
    def log_file(self) -> str:
        """str: Path to the log file."""
        return self.get_config_value(config=self.config,
                                     section="GENERAL",
                                     option="log_file")

    @property
    def log_level(self) -> str:
        """str: Logging level."""
        return self.get_config_value(config=self.config,
                                     section="GENERAL",
                                     option="log_level")

    @property
    def default_axis(self) -> Axis:
        """Axis used for values parsed without an explicit axis."""
        axis_str = self.get_config_value(config=self.config,
                                         section="PARSE",
                                         option="default_axis").upper()
        try:
            return Axis[axis_str]
        except KeyError:
            logging.warning("CONFIG: Invalid PARSE.default_axis in config "
                            "file (%s) Using LATITUDE.", axis_str)
            return Axis.LATITUDE

    @property
    def decimal_places(self) -> int:
        """int: Places used when printing decimal degrees."""
        places = self.get_config_value(config=self.config,
                                       section="OUTPUT",
                                       option="decimal_places")
        if places < 0:
            logging.warning("CONFIG: OUTPUT.decimal_places cannot be "
                            "negative (%s), using 0", places)
            return 0
        return places

    @property
    def show_decimal(self) -> bool:
        """bool: Print decimal degrees next to the canonical text."""
        return self.get_config_value(config=self.config,
                                     section="OUTPUT",
                                     option="show_decimal")

    def load_config(self) -> None:
        """Load and validate configuration values or fall back to defaults.

        Raises
        ------
            ConfigNotLoaded: If the configuration file cannot be parsed.
        """
        try:
            if not self.__validate_and_load(self.config_path):
                logging.warning(
                    "CONFIG: Invalid configuration, using fallback values.")
                self.config.read_dict(self._fallback_dict())
            else:
                self._valid_config = True
        except (OSError, UnicodeDecodeError, configparser.Error) as e:
            logging.error("CONFIG: Failed to load configuration file: %s", e)
            raise ConfigNotLoaded("Configuration could not be loaded.")

    @classmethod
    def _fallback_dict(cls) -> dict:
        """Fallback table reduced to {section: {option: value}}."""
        return {section: {option: str(spec["value"])
                          for option, spec in options.items()}
                for section, options in cls._FALLBACK_VALUES.items()}

    @staticmethod
    def _convert_to_type(raw_value, specified_type):
        """Convert a raw config value to its specified type.

        Args
        ----
            raw_value (str): The raw value from the configuration file.
            specified_type (type): The expected type (int, float, str, bool).

        Returns
        -------
            The converted value.
        """
        if specified_type == int:
            return int(raw_value)
        elif specified_type == float:
            return float(raw_value)
        elif specified_type == str:
            str_val = str(raw_value)
            if str_val.startswith('"') and str_val.endswith('"'):
                return str_val[1:-1]
            return str_val
        elif specified_type == bool:
            return str(raw_value).lower() in ("true", "1", "yes", "on")

        return raw_value

    def _get_default_value(self, section: str, option: str):
        """Retrieve the fallback value for a specific section and option."""
        return self._FALLBACK_VALUES.get(section, {}).\
            get(option, {}).get("value")

    def get_config_value(self, config, section, option):
        """Retrive config option from section.

        The type of the value is defined in `_FALLBACK_VALUES`, a missing or
        unconvertible value falls back to the default with a warning.

        Args
        ----
            config (ConfigParser): The configuration parser instance.
            section (str): The config section, such as "OUTPUT".
            option (str): The option name in the section.

        Returns
        -------
            The configuration value, cast to the appropriate type.
        """
        default_value = self._get_default_value(section, option)
        specified_type = self._FALLBACK_VALUES.get(section, {}).\
            get(option, {}).get("type", str)

        try:
            raw_value = config.get(section, option, fallback=default_value)
            return ConfigLoader._convert_to_type(raw_value, specified_type)
        except (configparser.NoSectionError,
                configparser.NoOptionError, ValueError) as e:
            logging.warning(
                "CONFIG: Value for %s.%s is missing or invalid in the config "
                "file, using default value %s of type [%s]: %s",
                section, option, default_value, str(specified_type), e)
            return self._convert_to_type(default_value, specified_type)

    def __validate_and_load(self, file_path: str) -> bool:
        """Load and validate the configuration file.

        Returns
        -------
            bool: True if the file was read and has every required section.
        """
        config = configparser.ConfigParser()
        try:
            read_ok = config.read(file_path, encoding="utf-8")
            if not read_ok:
                logging.info("CONFIG: No config file at %s", file_path)
                return False
            logging.info("CONFIG: Read config file from %s", file_path)

            if not self.__validate_config_structure(config):
                return False

            logging.debug("CONFIG: config file at %s is valid", file_path)
            self.config = config
            return True
        except configparser.Error as e:
            logging.error(
                "CONFIG: Parsing error for config file %s: %s", file_path, e)
            return False

    def __validate_config_structure(self,
                                    config: configparser.ConfigParser) -> bool:
        """Ensure all required sections are present and log empty sections."""
        for section in self._FALLBACK_VALUES.keys():
            if section not in config:
                logging.error("CONFIG: config file is invalid, required "
                              "section is missing: %s", section)
                return False
            elif not config.items(section):
                logging.warning("CONFIG: Section [%s] in config file "
                                "contains no values.", section)
        return True
