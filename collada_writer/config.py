from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .constants import Constraints, Defaults


@dataclass(frozen=True, slots=True)
class WriterConfig:
    collada_version: str = Constraints.COLLADA_VERSION
    indent: int = Defaults.INDENT
    xml_declaration: bool = Defaults.XML_DECLARATION
    authoring_tool: str | None = Defaults.AUTHORING_TOOL
    unit_name: str = Defaults.UNIT_NAME
    unit_meter: float = Defaults.UNIT_METER
    up_axis: str = Defaults.UP_AXIS

    def __post_init__(self) -> None:
        if self.collada_version not in Constraints.SUPPORTED_VERSIONS:
            raise ValueError(
                f"collada_version must be one of {Constraints.SUPPORTED_VERSIONS}, "
                f"got {self.collada_version!r}"
            )
        if not 0 <= self.indent <= Constraints.MAX_INDENT:
            raise ValueError(
                f"indent must be between 0 and {Constraints.MAX_INDENT}, got {self.indent}"
            )
        if self.unit_meter <= 0:
            raise ValueError(f"unit_meter must be positive, got {self.unit_meter}")
        if not self.unit_name:
            raise ValueError("unit_name must not be empty")
        if self.up_axis not in Constraints.UP_AXES:
            raise ValueError(
                f"up_axis must be one of {Constraints.UP_AXES}, got {self.up_axis!r}"
            )

    @classmethod
    def from_env(cls) -> WriterConfig:
        raw_tool = os.getenv("COLLADA_AUTHORING_TOOL")
        authoring_tool = Defaults.AUTHORING_TOOL
        if raw_tool is not None:
            authoring_tool = raw_tool.strip() or None
        return cls(
            indent=int(os.getenv("COLLADA_INDENT", str(Defaults.INDENT))),
            authoring_tool=authoring_tool,
            unit_name=os.getenv("COLLADA_UNIT_NAME", Defaults.UNIT_NAME),
            unit_meter=float(os.getenv("COLLADA_UNIT_METER", str(Defaults.UNIT_METER))),
            up_axis=os.getenv("COLLADA_UP_AXIS", Defaults.UP_AXIS).strip().upper(),
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> WriterConfig:
        config = WriterConfig.from_env()
        if config_file is None:
            config_file = Path(Defaults.CONFIG_FILE)
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except Exception as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(config_file: Path, base_config: WriterConfig) -> WriterConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        output = _get_table(data, "output")
        asset = _get_table(data, "asset")
        collada_version = base_config.collada_version
        if (value := output.get("collada_version")) is not None:
            collada_version = str(value)
        indent = base_config.indent
        if (value := output.get("indent")) is not None:
            indent = _coerce_int(value, key="output.indent")
        xml_declaration = base_config.xml_declaration
        if (value := output.get("xml_declaration")) is not None:
            xml_declaration = _coerce_bool(value, key="output.xml_declaration")
        authoring_tool = base_config.authoring_tool
        if "authoring_tool" in asset:
            raw = asset.get("authoring_tool")
            cleaned = str(raw).strip() if raw is not None else ""
            authoring_tool = cleaned or None
        unit_name = base_config.unit_name
        if (value := asset.get("unit_name")) is not None:
            unit_name = str(value)
        unit_meter = base_config.unit_meter
        if (value := asset.get("unit_meter")) is not None:
            unit_meter = _coerce_float(value, key="asset.unit_meter")
        up_axis = base_config.up_axis
        if (value := asset.get("up_axis")) is not None:
            up_axis = str(value).strip().upper()
        return WriterConfig(
            collada_version=collada_version,
            indent=indent,
            xml_declaration=xml_declaration,
            authoring_tool=authoring_tool,
            unit_name=unit_name,
            unit_meter=unit_meter,
            up_axis=up_axis,
        )


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_float(value: object, *, key: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be numeric, got bool")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value)
    raise ValueError(f"{key} must be numeric or string, got {type(value).__name__}")


def _coerce_int(value: object, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an int, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        return int(value)
    raise ValueError(f"{key} must be int-like or string, got {type(value).__name__}")


def _coerce_bool(value: object, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ValueError(f"{key} must be a boolean, got {value!r}")
