"""
Scans the filesystem for C# source files and handles reading and writing.

Patterns are globs such as 'Models/**/*.cs'. Relative patterns are resolved
against the scanner's base directory; absolute patterns are used as given.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Union


@dataclass(frozen=True)
class SourceFile:
    """A source file that has been read from disk."""
    path: Path
    name: str
    content: str


class SourceScanner:
    """Expands glob patterns to files and reads/writes them as UTF-8."""

    def __init__(self, base_dir: Union[str, Path] = '.'):
        self.base_dir = Path(base_dir)

    def scan(self, patterns: Iterable[str]) -> List[Path]:
        """Expand every pattern; return unique files sorted by path."""
        found = set()
        for pattern in patterns:
            if not pattern:
                continue
            for path in self._glob(pattern.replace('\\', '/')):
                if path.is_file():
                    found.add(path.resolve())
        return sorted(found)

    def _glob(self, pattern: str) -> Iterable[Path]:
        pattern_path = Path(pattern)
        if pattern_path.is_absolute():
            anchor = Path(pattern_path.anchor)
            relative = pattern_path.relative_to(anchor)
            if not relative.parts:
                return []
            return anchor.glob(str(relative))
        return self.base_dir.glob(pattern)

    def read(self, path: Union[str, Path]) -> str:
        """Read a single file."""
        path = Path(path)
        if not path.is_file():
            raise FileNotFoundError(f'File not found: {path}')
        return path.read_text(encoding='utf-8')

    def read_all(self, paths: Iterable[Union[str, Path]]) -> List[SourceFile]:
        """Read several files, keeping their order."""
        results = []
        for path in paths:
            path = Path(path)
            results.append(SourceFile(path=path, name=path.name, content=self.read(path)))
        return results

    def write(self, path: Union[str, Path], content: str) -> Path:
        """Write content to a file, creating parent directories as needed."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding='utf-8')
        return path
