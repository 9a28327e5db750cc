# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import platformdirs
from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

APP_NAME = "opus"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"
LOG_PATH: Path = platformdirs.user_log_path(APP_NAME)

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_TASKS_PATH: Path = DATA_PATH / "tasks.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    sync_enabled: bool
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "sync_enabled": False,
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_TASKS_PATH

    DATA_PATH = data_path
    DATA_TASKS_PATH = DATA_PATH / "tasks.yaml"


def load_data_path_configuration(override: Optional[str] = None) -> None:
    """
    Resolve DATA_PATH from the command line override or the config file.

    This must be called before the task storage is created.
    """
    if override is not None:
        set_data_path(Path(override))
        return

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is not None and config.get("data_path") is not None:
        set_data_path(Path(config["data_path"]))  # type: ignore[arg-type]
