from abc import ABC, abstractmethod
from copy import deepcopy
from os import PathLike
from pathlib import Path
from typing import Any, Collection, Dict, Generator, Mapping

import typepigeon
import yaml


class Configuration(ABC, Mapping):
    fields: Dict[str, type]
    defaults: Dict[str, Any] = None

    def __init__(self, **configuration):
        self.__configuration = {field: None for field in self.fields}
        if len(configuration) > 0:
            self.update(configuration)

        if self.defaults is not None:
            update_none(self.__configuration, deepcopy(self.defaults))

        missing_fields = [field for field in self.fields if field not in self.__configuration]
        if len(missing_fields) > 0:
            raise ValueError(
                f'missing {len(missing_fields)} fields required by "{self.__class__.__name__}" - {list(missing_fields)}'
            )

    @classmethod
    @abstractmethod
    def from_file(cls, filename: PathLike) -> 'Configuration':
        raise NotImplementedError()

    def __copy__(self) -> 'Configuration':
        return self.__class__(**deepcopy(self.__configuration))

    def __contains__(self, key: str) -> bool:
        return key in self.__configuration

    def __getitem__(self, key: str) -> Any:
        return self.__configuration[key]

    def __setitem__(self, key: str, value: Any):
        if key in self.fields:
            field_type = self.fields[key]
            if not isinstance(field_type, type):
                field_type = type(field_type)
            if value is not None and not isinstance(value, field_type):
                value = typepigeon.convert_value(value, self.fields[key])
        else:
            raise KeyError(f'"{key}" is not a field of "{self.__class__.__name__}"')
        self.__configuration[key] = value

    def update(self, other: Mapping):
        for key, value in other.items():
            if key in self:
                if isinstance(self[key], Configuration):
                    self[key].update(value)
                    continue
                else:
                    field_type = self.fields[key]
                    if (
                        isinstance(field_type, type)
                        and issubclass(field_type, Configuration)
                        and value is not None
                    ):
                        converted_value = field_type(**value)
                    elif isinstance(field_type, Mapping) and value is not None:
                        converted_value = convert_key_pairs(value, field_type)
                    else:
                        converted_value = typepigeon.convert_value(value, field_type)
                    if self[key] is None or self[key] != converted_value:
                        value = converted_value
            self[key] = value

    def to_dict(self) -> Dict[str, Any]:
        """ plain nested dictionary of the configuration values """

        return {
            key: value.to_dict() if isinstance(value, Configuration) else deepcopy(value)
            for key, value in self.__configuration.items()
        }

    def __eq__(self, other: 'Configuration') -> bool:
        return other.__configuration == self.__configuration

    def __repr__(self):
        configuration = ', '.join(
            [f'{key}={repr(value)}' for key, value in self.__configuration.items()]
        )
        return f'{self.__class__.__name__}({configuration})'

    def __len__(self) -> int:
        return len(self.__configuration)

    def __iter__(self) -> Generator:
        yield from self.__configuration

    def __delitem__(self, key):
        del self.__configuration[key]

    @abstractmethod
    def to_file(self, filename: PathLike = None, overwrite: bool = False):
        raise NotImplementedError()


class ConfigurationSection:
    name: str


class ConfigurationYAML(Configuration):
    @classmethod
    def from_file(cls, filename: PathLike) -> 'Configuration':
        with open(filename) as input_file:
            configuration = yaml.safe_load(input_file)
        if configuration is None:
            configuration = {}
        return cls(**configuration)

    def to_file(self, filename: PathLike = None, overwrite: bool = True):
        if not isinstance(filename, Path):
            filename = Path(filename)
        if overwrite or not filename.exists():
            content = typepigeon.convert_to_json(self.to_dict())
            with open(filename, 'w') as output_file:
                yaml.safe_dump(content, output_file)


def convert_key_pairs(value_mapping: Mapping, type_mapping: Mapping[str, type]) -> Mapping:
    value_mapping = dict(**value_mapping)
    keys = list(value_mapping)
    for key in keys:
        if key in type_mapping:
            value = value_mapping[key]
            value_type = type_mapping[key]
            if value is None:
                pass
            elif not isinstance(value_type, Collection) and issubclass(
                value_type, Configuration
            ):
                value = value_type(**value)
            elif isinstance(value, dict):
                value = convert_key_pairs(value, value_type)
            else:
                value = typepigeon.convert_value(value, value_type)
            value_mapping[key] = value
    return value_mapping


def update_none(values: Dict[str, Any], defaults: Dict[str, Any]):
    for key, default_value in defaults.items():
        if key not in values or values[key] is None:
            values[key] = default_value
        elif isinstance(values[key], Mapping) and isinstance(default_value, Mapping):
            update_none(values[key], default_value)
