# infrastructure/suite/__init__.py
from infrastructure.suite.base_loader import SuiteLoadError, SuiteLoaderBase
from infrastructure.suite.json_loader import JsonSuiteLoader
from infrastructure.suite.loader_registry import SuiteLoaderRegistry, load_suite_config
from infrastructure.suite.yaml_loader import YamlSuiteLoader

__all__ = [
    "load_suite_config",
    "SuiteLoadError",
    "SuiteLoaderBase",
    "SuiteLoaderRegistry",
    "JsonSuiteLoader",
    "YamlSuiteLoader",
]
