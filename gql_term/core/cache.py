"""Local cache of the last fetched introspection result."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from .errors import SchemaCacheError


class SchemaCache:
    """Stores one introspection document as pretty-printed JSON.

    A cache file that is not valid JSON is an error, not a cache miss.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> dict[str, Any] | None:
        """Return the cached document, or None if nothing is cached."""
        if not self.exists():
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                document = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SchemaCacheError(
                f"cached schema {self.path} is not valid JSON ({e}); "
                "use --refresh-schema to fetch it again"
            ) from e
        except OSError as e:
            raise SchemaCacheError(f"cannot read cached schema {self.path}: {e}") from e
        if not isinstance(document, dict):
            raise SchemaCacheError(f"cached schema {self.path} is not a JSON object")
        return document

    def save(self, document: dict[str, Any]):
        """Write the document, replacing any previous cache atomically."""
        try:
            self._write(document)
        except OSError as e:
            raise SchemaCacheError(f"cannot write cached schema {self.path}: {e}") from e

    def _write(self, document: dict[str, Any]):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=".schema-", suffix=".json"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2)
                f.write("\n")
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
