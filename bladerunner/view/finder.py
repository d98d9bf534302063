"""
File View Finder
Locates view files from logical names such as 'pages.home' or 'mail::welcome'
"""
import os
from typing import Dict, List, Optional, Tuple, Union

from bladerunner.defaults import DEFAULT_VIEW_EXTENSIONS, DEFAULT_HINT_PATH_DELIMITER
from bladerunner.exceptions import ViewNotFoundException
from bladerunner.filesystem import Filesystem


class FileViewFinder:
    """
    Resolve view names to files on disk

    Dots in a name become directory separators and each registered extension
    is tried in order:

        finder = FileViewFinder(Filesystem(), ['resources/views'])
        finder.find('pages.home')    # resources/views/pages/home.blade.html
        finder.add_namespace('mail', 'resources/mail')
        finder.find('mail::welcome') # resources/mail/welcome.blade.html
    """

    HINT_PATH_DELIMITER = DEFAULT_HINT_PATH_DELIMITER

    def __init__(self, files: Filesystem, paths: List[str], extensions: Optional[List[str]] = None):
        self.files = files
        self.paths = [self._resolve_path(path) for path in (paths or [])]
        self.views: Dict[str, str] = {}
        self.hints: Dict[str, List[str]] = {}
        self.extensions = list(extensions) if extensions is not None else list(DEFAULT_VIEW_EXTENSIONS)

    def find(self, name: str) -> str:
        """
        Get the fully qualified location of the view

        Raises:
            ViewNotFoundException: If the view cannot be found or the name is invalid
        """
        if name in self.views:
            return self.views[name]

        if self.has_hint_information(name):
            path = self._find_namespaced_view(name)
        else:
            path = self._find_in_paths(name, self.paths)

        self.views[name] = path
        return path

    def _find_namespaced_view(self, name: str) -> str:
        namespace, view = self._parse_namespace_segments(name)
        return self._find_in_paths(view, self.hints[namespace])

    def _parse_namespace_segments(self, name: str) -> Tuple[str, str]:
        segments = name.split(self.HINT_PATH_DELIMITER)

        if len(segments) != 2 or not segments[0] or not segments[1]:
            raise ViewNotFoundException(f"View [{name}] has an invalid name.")

        if segments[0] not in self.hints:
            raise ViewNotFoundException(f"No hint path defined for [{segments[0]}].")

        return segments[0], segments[1]

    def _find_in_paths(self, name: str, paths: List[str]) -> str:
        for path in paths:
            for file in self._get_possible_view_files(name):
                view_path = os.path.join(path, file)
                if self.files.is_file(view_path):
                    return view_path

        raise ViewNotFoundException(f"View [{name}] not found.")

    def _get_possible_view_files(self, name: str) -> List[str]:
        relative = name.replace('.', os.sep)
        return [f"{relative}.{extension}" for extension in self.extensions]

    def add_location(self, location: str):
        self.paths.append(self._resolve_path(location))

    def prepend_location(self, location: str):
        self.paths.insert(0, self._resolve_path(location))

    def add_namespace(self, namespace: str, hints: Union[str, List[str]]):
        """Append hint paths to a namespace"""
        hints = [hints] if isinstance(hints, str) else list(hints)
        self.hints[namespace] = self.hints.get(namespace, []) + hints

    def prepend_namespace(self, namespace: str, hints: Union[str, List[str]]):
        """Prepend hint paths to a namespace"""
        hints = [hints] if isinstance(hints, str) else list(hints)
        self.hints[namespace] = hints + self.hints.get(namespace, [])

    def replace_namespace(self, namespace: str, hints: Union[str, List[str]]):
        self.hints[namespace] = [hints] if isinstance(hints, str) else list(hints)

    def add_extension(self, extension: str):
        """Register an extension with the finder; it is tried before the others"""
        if extension in self.extensions:
            self.extensions.remove(extension)
        self.extensions.insert(0, extension)

    def has_hint_information(self, name: str) -> bool:
        return self.HINT_PATH_DELIMITER in name

    def flush(self):
        """Flush the cache of located views"""
        self.views = {}

    def set_paths(self, paths: List[str]):
        self.paths = [self._resolve_path(path) for path in paths]
        return self

    def get_paths(self) -> List[str]:
        return self.paths

    def get_views(self) -> Dict[str, str]:
        return self.views

    def get_hints(self) -> Dict[str, List[str]]:
        return self.hints

    def get_extensions(self) -> List[str]:
        return self.extensions

    def get_filesystem(self) -> Filesystem:
        return self.files

    def _resolve_path(self, path) -> str:
        return os.fspath(path)
