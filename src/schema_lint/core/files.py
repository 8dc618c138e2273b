import logging
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

SCHEMA_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def is_schema_file(path: Path) -> bool:
    return path.suffix.lower() in SCHEMA_EXTENSIONS


def find_schema_files(paths: Iterable[str | Path]) -> list[Path]:
    """Expand files and directories into a sorted, de-duplicated list of schema files."""
    found: set[Path] = set()
    for raw_path in paths:
        path = Path(raw_path)
        if path.is_file():
            found.add(path)
        elif path.is_dir():
            found.update(p for p in path.rglob("*") if p.is_file() and is_schema_file(p))
        else:
            logger.warning("Path does not exist: %s", path)
    return sorted(found)
