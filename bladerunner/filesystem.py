"""
Filesystem
Thin pathlib wrapper shared by the view finder, compiler and engines
"""
import hashlib
import os
import tempfile
from pathlib import Path
from typing import List, Union, Iterable

from bladerunner.exceptions import FileNotFoundException

PathLike = Union[str, Path]


class Filesystem:
    """
    Filesystem helper

    Example:
        files = Filesystem()
        if files.exists(path):
            source = files.get(path)
        files.put(compiled_path, code)
    """

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def get(self, path: PathLike, encoding: str = 'utf-8') -> str:
        """
        Get the contents of a file

        Raises:
            FileNotFoundException: If the path is not a file
        """
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundException(f"File does not exist at path {path}.")
        return path.read_text(encoding=encoding)

    def put(self, path: PathLike, contents: str, encoding: str = 'utf-8') -> int:
        """Write contents to a file, creating parent directories; returns characters written"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        return path.write_text(contents, encoding=encoding)

    def replace(self, path: PathLike, contents: str, encoding: str = 'utf-8'):
        """Write contents to a sibling temp file, then swap it into place"""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        fd, temp_path = tempfile.mkstemp(dir=path.parent, prefix=path.name + '.', suffix='.tmp')
        try:
            with os.fdopen(fd, 'w', encoding=encoding) as handle:
                handle.write(contents)
            os.replace(temp_path, path)
        except BaseException:
            Path(temp_path).unlink(missing_ok=True)
            raise

    def delete(self, paths: Union[PathLike, Iterable[PathLike]]) -> bool:
        """Delete one or many files; returns False if any could not be removed"""
        if isinstance(paths, (str, Path)):
            paths = [paths]

        success = True
        for path in paths:
            try:
                Path(path).unlink()
            except OSError:
                success = False
        return success

    def last_modified(self, path: PathLike) -> float:
        return Path(path).stat().st_mtime

    def is_file(self, path: PathLike) -> bool:
        return Path(path).is_file()

    def is_directory(self, path: PathLike) -> bool:
        return Path(path).is_dir()

    def make_directory(self, path: PathLike, parents: bool = True, exist_ok: bool = True) -> Path:
        path = Path(path)
        path.mkdir(parents=parents, exist_ok=exist_ok)
        return path

    def files(self, directory: PathLike) -> List[Path]:
        """Files directly inside a directory, sorted by name"""
        directory = Path(directory)
        if not directory.is_dir():
            return []
        return sorted(item for item in directory.iterdir() if item.is_file())

    def glob(self, pattern: str) -> List[Path]:
        """Paths matching an absolute or relative glob pattern"""
        pattern_path = Path(pattern)
        if pattern_path.is_absolute():
            anchor = Path(pattern_path.anchor)
            return sorted(anchor.glob(str(pattern_path.relative_to(anchor))))
        return sorted(Path.cwd().glob(pattern))

    def hash(self, path: PathLike) -> str:
        """sha1 of the file contents"""
        return hashlib.sha1(Path(path).read_bytes()).hexdigest()

    def extension(self, path: PathLike) -> str:
        return Path(path).suffix.lstrip('.')
