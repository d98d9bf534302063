"""
EnvHelper - read environment overrides for the view layer
Values come from os.environ, optionally seeded from a .env file
"""

import os
import threading
from pathlib import Path
from typing import Optional, Any, List, Union
from dotenv import load_dotenv


class EnvHelper:
    """
    Environment variable reader with .env support

    Usage:
        EnvHelper.load('/path/to/.env')
        compiled = EnvHelper.get('VIEW_COMPILED_PATH', 'storage/views')
        paths = EnvHelper.get_list('VIEW_PATHS')
    """

    _lock = threading.Lock()
    _env_path: Optional[Path] = None
    _loaded: bool = False

    @classmethod
    def load(cls, env_path: Union[str, Path, None] = None, override: bool = False) -> bool:
        """
        Load a .env file into the environment

        Args:
            env_path: Path to .env file (defaults to .env in the working directory)
            override: Whether to override existing environment variables

        Returns:
            bool: True if a file was found and loaded
        """
        with cls._lock:
            if env_path is not None:
                cls._env_path = Path(env_path)
            elif cls._env_path is None:
                cls._env_path = Path.cwd() / '.env'

            cls._loaded = True

            if not cls._env_path.is_file():
                return False

            return load_dotenv(cls._env_path, override=override)

    @classmethod
    def get(cls, key: str, default: Any = None) -> Optional[str]:
        """
        Get environment variable value

        Example:
            compiled = EnvHelper.get('VIEW_COMPILED_PATH', 'storage/views')
        """
        if not cls._loaded:
            cls.load()

        return os.getenv(key, default)

    @classmethod
    def get_bool(cls, key: str, default: bool = False) -> bool:
        value = cls.get(key)
        if value is None:
            return default

        return value.lower() in ('true', '1', 'yes', 'on')

    @classmethod
    def get_list(cls, key: str, default: Optional[List[str]] = None) -> Optional[List[str]]:
        """
        Get a list stored as an os.pathsep separated value

        Example:
            VIEW_PATHS=resources/views:packages/blog/views
        """
        value = cls.get(key)
        if not value:
            return default

        return [item for item in value.split(os.pathsep) if item]

    @classmethod
    def has(cls, key: str) -> bool:
        if not cls._loaded:
            cls.load()

        return key in os.environ

    @classmethod
    def reset(cls):
        """Forget the loaded .env path so the next read loads again"""
        with cls._lock:
            cls._env_path = None
            cls._loaded = False
