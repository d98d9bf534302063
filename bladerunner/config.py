"""
Config Repository - Laravel-style configuration access
Access configuration values using dot notation
"""

import os
import threading
from typing import Any, Dict, Optional, Union
from pathlib import Path

from bladerunner.support.env_helper import EnvHelper


class Repository:
    """
    Configuration repository with dot notation access

    Accepts nested dicts, flat dotted keys, or a mix of both:

        Repository({'view': {'paths': ['resources/views']}})
        Repository({'view.paths': ['resources/views']})

    Usage:
        paths = config.get('view.paths')
        compiled = config['view.compiled']   # None when missing
        config.set('view.namespaces.mail', ['resources/mail'])
    """

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        self._lock = threading.Lock()
        self._items: Dict[str, Any] = {}
        for key, value in (items or {}).items():
            self.set(key, value)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            key: Config key in dot notation (e.g., 'view.paths')
            default: Default value if key not found
        """
        value: Any = self._items
        for part in key.split('.'):
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default
        return value

    def set(self, key: str, value: Any):
        """
        Set configuration value, creating intermediate sections as needed

        Nested dict values are merged into existing sections.
        """
        with self._lock:
            parts = key.split('.')
            section = self._items
            for part in parts[:-1]:
                if not isinstance(section.get(part), dict):
                    section[part] = {}
                section = section[part]

            last = parts[-1]
            if isinstance(value, dict) and isinstance(section.get(last), dict):
                _merge(section[last], value)
            else:
                section[last] = _copy(value)

    def has(self, key: str) -> bool:
        sentinel = object()
        return self.get(key, sentinel) is not sentinel

    def all(self) -> Dict[str, Any]:
        return self._items

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any):
        self.set(key, value)

    def __contains__(self, key: str) -> bool:
        return self.has(key)

    def __repr__(self):
        return f'Repository({self._items!r})'


def view_defaults(base_path: Union[str, Path, None] = None) -> Dict[str, Any]:
    """
    Default view configuration rooted at base_path (the working directory by default)

    VIEW_PATHS and VIEW_COMPILED_PATH from the environment (or .env) win over
    the built-in locations.
    """
    from bladerunner.defaults import (
        DEFAULT_VIEW_PATH,
        DEFAULT_VIEW_COMPILED_PATH,
        ENV_VIEW_PATHS,
        ENV_VIEW_COMPILED_PATH,
    )
    base = Path(base_path) if base_path is not None else Path.cwd()

    paths = EnvHelper.get_list(ENV_VIEW_PATHS) or [DEFAULT_VIEW_PATH]
    compiled = EnvHelper.get(ENV_VIEW_COMPILED_PATH, DEFAULT_VIEW_COMPILED_PATH)

    return {
        'view.paths': [str(base / path) if not os.path.isabs(path) else path for path in paths],
        'view.compiled': str(base / compiled) if not os.path.isabs(compiled) else compiled,
        'view.namespaces': {},
    }


def load_environment(env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
    """Load a .env file so view_defaults() can see its overrides"""
    return EnvHelper.load(env_path, override=override)


def _merge(target: Dict[str, Any], source: Dict[str, Any]):
    for key, value in source.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = _copy(value)


def _copy(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _copy(item) for key, item in value.items()}
    return value
