"""Loading/saving locations for property files."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union
from urllib.parse import unquote, urlparse

import requests

from .config import DELIMITER
from .errors import ResourceUnavailable

logger = logging.getLogger(__name__)


class Resource(ABC):
    """Abstract base class for a readable (and maybe writable) location."""

    def __init__(self, path: str):
        self.path = path

    @abstractmethod
    def exists(self) -> bool:
        """Check if something can be read from this location."""
        pass

    @abstractmethod
    def read_bytes(self) -> bytes:
        """Read the whole content.

        Raises:
            ResourceUnavailable: If the content cannot be read.
        """
        pass

    @abstractmethod
    def write_bytes(self, data: bytes) -> None:
        """Replace the whole content.

        Raises:
            ResourceUnavailable: If the content cannot be written.
        """
        pass

    @abstractmethod
    def with_extension(self, extension: str) -> "Resource":
        """Return a sibling resource whose extension is replaced."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.path == other.path

    def __hash__(self) -> int:
        return hash((type(self), self.path))


def _replace_extension(path: str, extension: str) -> str:
    """Replace everything after the last '.' of the last path segment."""
    head, _, name = path.rpartition(DELIMITER)
    if "." in name:
        name = name[:name.rindex(".")]
    name += extension
    return f"{head}{DELIMITER}{name}" if head or path.startswith(DELIMITER) else name


class FileResource(Resource):
    """A file on the local file system."""

    def __init__(self, path: Union[str, Path]):
        super().__init__(str(path))
        self.file = Path(path)

    def exists(self) -> bool:
        return self.file.is_file()

    def read_bytes(self) -> bytes:
        try:
            return self.file.read_bytes()
        except OSError as ex:
            raise ResourceUnavailable(f"Cannot read {self.path}: {ex}") from ex

    def write_bytes(self, data: bytes) -> None:
        try:
            # Ensure parent directory exists
            self.file.parent.mkdir(parents=True, exist_ok=True)
            self.file.write_bytes(data)
        except OSError as ex:
            raise ResourceUnavailable(f"Cannot write {self.path}: {ex}") from ex

    def with_extension(self, extension: str) -> "FileResource":
        return FileResource(self.file.with_suffix(extension))


class HttpResource(Resource):
    """A read-only file served over HTTP(S)."""

    def __init__(self, url: str, timeout: float = 30):
        super().__init__(url)
        self.timeout = timeout

    def exists(self) -> bool:
        try:
            response = requests.head(self.path, timeout=self.timeout, allow_redirects=True)
        except requests.RequestException as ex:
            logger.debug("HEAD %s failed: %s", self.path, ex)
            return False
        return response.status_code == 200

    def read_bytes(self) -> bytes:
        try:
            response = requests.get(self.path, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as ex:
            raise ResourceUnavailable(f"Cannot fetch {self.path}: {ex}") from ex
        return response.content

    def write_bytes(self, data: bytes) -> None:
        raise ResourceUnavailable(f"{self.path} is read-only")

    def with_extension(self, extension: str) -> "HttpResource":
        parsed = urlparse(self.path)
        path = _replace_extension(parsed.path, extension)
        return HttpResource(parsed._replace(path=path).geturl(), timeout=self.timeout)


def as_resource(location: Union[str, Path, Resource], base_dir: Optional[Union[str, Path]] = None) -> Resource:
    """Resolve a location string to a Resource.

    Args:
        location: http(s):// or file:// URI, or a plain path.
        base_dir: Directory that relative plain paths are resolved against.

    Returns:
        The matching Resource.
    """
    if isinstance(location, Resource):
        return location
    if isinstance(location, Path):
        location = str(location)

    scheme = urlparse(location).scheme.lower()
    if scheme in ("http", "https"):
        return HttpResource(location)
    if scheme == "file":
        return FileResource(unquote(urlparse(location).path))

    if base_dir is not None and not Path(location).is_absolute():
        return FileResource(f"{Path(base_dir).as_posix()}{DELIMITER}{location}")
    return FileResource(location)
