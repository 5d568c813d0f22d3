from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console

from ..application.write_document_use_case import (
    WriteDocumentDependencies,
    WriteDocumentUseCase,
)
from ..config import ConfigLoader
from .logging.console_logger import ConsoleLogger
from .logging.null_logger import NullLogger
from .repositories.scene_loader import SceneLoader

if TYPE_CHECKING:
    from pathlib import Path

    from ..application.ports.services import LoggerPort, SceneLoaderPort
    from ..config import WriterConfig


class DependencyContainer:
    pass

    def __init__(
        self,
        verbose: int = 0,
        console: Console | None = None,
        use_null_logger: bool = False,
        config_file: Path | None = None,
    ) -> None:
        super().__init__()
        self.verbose = verbose
        self.console = console or Console()
        self.use_null_logger = use_null_logger
        self.config_file = config_file
        self._logger_instance: LoggerPort | None = None
        self._scene_loader_instance: SceneLoaderPort | None = None
        self._config_instance: WriterConfig | None = None

    def create_logger(self) -> LoggerPort:
        if self._logger_instance is None:
            if self.use_null_logger:
                self._logger_instance = NullLogger()
            else:
                self._logger_instance = ConsoleLogger(
                    console=self.console, verbosity=self.verbose
                )
        return self._logger_instance

    def create_config(self) -> WriterConfig:
        if self._config_instance is None:
            self._config_instance = ConfigLoader.load(config_file=self.config_file)
        return self._config_instance

    def create_scene_loader(self) -> SceneLoaderPort:
        if self._scene_loader_instance is None:
            self._scene_loader_instance = SceneLoader()
        return self._scene_loader_instance

    def create_write_document_use_case(self) -> WriteDocumentUseCase:
        dependencies = WriteDocumentDependencies(
            logger=self.create_logger(),
            scene_loader=self.create_scene_loader(),
        )
        return WriteDocumentUseCase(dependencies)

    def reset_singletons(self) -> None:
        self._logger_instance = None
        self._scene_loader_instance = None
        self._config_instance = None

    def override_logger(self, logger: LoggerPort) -> None:
        self._logger_instance = logger

    def override_scene_loader(self, scene_loader: SceneLoaderPort) -> None:
        self._scene_loader_instance = scene_loader

    def override_config(self, config: WriterConfig) -> None:
        self._config_instance = config


def create_default_container(verbose: int = 0) -> DependencyContainer:
    return DependencyContainer(verbose=verbose)
