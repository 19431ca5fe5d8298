# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from ganttline import configuration
from ganttline.service.options import merge_options


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        config: dict[str, Any] = dict(configuration.get_default_configuration())

        if configuration.APP_CONFIG_PATH.is_file():
            stored = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
            if stored is not None:
                if not isinstance(stored, dict):
                    raise ValueError(
                        f"{configuration.APP_CONFIG_PATH} must contain a mapping"
                    )
                # Keys missing from older files keep their defaults
                merge_options(config, stored)

        self._config = cast(configuration.Configuration, config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> None:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        min_row_height: Optional[int] = None,
        min_bar_width: Optional[int] = None,
        default_color: Optional[str] = None,
        time_format: Optional[str] = None,
        container_width: Optional[int] = None,
        remove_container_width: bool = False,
        show_header: Optional[bool] = None,
    ) -> None:
        self.is_dirty = True

        if min_row_height is not None:
            self.config["min_row_height"] = min_row_height
        if min_bar_width is not None:
            self.config["min_bar_width"] = min_bar_width
        if default_color is not None:
            self.config["default_color"] = default_color
        if time_format is not None:
            self.config["time_format"] = time_format
        if container_width is not None:
            self.config["container_width"] = container_width
        if remove_container_width:
            self.config["container_width"] = None
        if show_header is not None:
            self.config["show_header"] = show_header


CONFIGURATION_REPO = ConfigurationRepository()
