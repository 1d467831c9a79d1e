# infrastructure/suite/loader_registry.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Union

from domain.suite import SuiteConfig
from infrastructure.suite.base_loader import SuiteLoaderBase, SuiteLoadError
from infrastructure.suite.json_loader import JsonSuiteLoader
from infrastructure.suite.yaml_loader import YamlSuiteLoader


class SuiteLoaderRegistry:
    """Picks a suite config loader by file extension."""

    def __init__(self) -> None:
        self._loaders: Dict[str, SuiteLoaderBase] = {}
        yaml_loader = YamlSuiteLoader()
        self.register(".yaml", yaml_loader)
        self.register(".yml", yaml_loader)
        self.register(".json", JsonSuiteLoader())

    def register(self, extension: str, loader: SuiteLoaderBase) -> None:
        self._loaders[extension.lower()] = loader

    def extensions(self) -> List[str]:
        return sorted(self._loaders)

    def get_loader(self, path: Path) -> SuiteLoaderBase:
        ext = path.suffix.lower()
        if ext not in self._loaders:
            raise SuiteLoadError(
                f"Unsupported suite config format: {ext or path.name} (expected one of {', '.join(self.extensions())})"
            )
        return self._loaders[ext]

    def load(self, path: Union[str, Path]) -> SuiteConfig:
        p = Path(path)
        return self.get_loader(p).load_from_file(p)


def load_suite_config(path: Union[str, Path]) -> SuiteConfig:
    return SuiteLoaderRegistry().load(path)
