from __future__ import annotations

import copy
import json
import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Callable

from pydantic import BaseModel

logger = logging.getLogger(__name__)

Normalizer = Callable[[Any, int], BaseModel]
DEFAULT_FILE_MODE = 0o644


def _read_document(path: Path) -> dict | None:
    """Load a language document; None when missing, unreadable or not an object."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.debug(f"Could not read {path}: {e}")
        return None
    return data if isinstance(data, dict) else None


class ContentStore:
    """
    A JSON document on disk mapping language code -> ordered list of records.

    The defaults document is loaded once and never written; it seeds the live
    file and is the target of reset(). Writes replace the whole live file, last
    writer wins.
    """

    def __init__(
        self,
        name: str,
        live_path: Path,
        defaults_path: Path,
        normalizer: Normalizer,
        default_lang: str = "me",
    ):
        self.name = name
        self.live_path = Path(live_path)
        self.defaults_path = Path(defaults_path)
        self.normalizer = normalizer
        self.default_lang = default_lang
        self._defaults = _read_document(self.defaults_path) or {}

    # ─── Internals ────────────────────────────────────────────────────────────
    def _pick(self, document: dict, lang: str) -> list:
        records = document.get(lang)
        if isinstance(records, list):
            return records
        fallback = document.get(self.default_lang)
        return fallback if isinstance(fallback, list) else []

    def _load(self) -> dict:
        document = _read_document(self.live_path)
        if document is None:
            return copy.deepcopy(self._defaults)
        return document

    def _file_mode(self) -> int:
        try:
            return stat.S_IMODE(self.live_path.stat().st_mode)
        except OSError:
            return DEFAULT_FILE_MODE

    def _save(self, document: dict) -> None:
        self.live_path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.live_path.parent, prefix=f".{self.live_path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(document, f, ensure_ascii=False, indent=2)
            # mkstemp creates 0600; keep the live file's mode, or 0644 for a new one
            os.chmod(tmp, self._file_mode())
            os.replace(tmp, self.live_path)
        except Exception:
            Path(tmp).unlink(missing_ok=True)
            raise

    # ─── Public API ───────────────────────────────────────────────────────────
    def ensure(self) -> None:
        """Create the live file from the defaults if it does not exist yet."""
        if self.live_path.exists():
            return
        logger.info(f"Seeding {self.name} data at {self.live_path}")
        self._save(copy.deepcopy(self._defaults))

    def defaults(self, lang: str) -> list:
        return copy.deepcopy(self._pick(self._defaults, lang))

    def list(self, lang: str) -> list:
        return self._pick(self._load(), lang)

    def replace(self, lang: str, records: list) -> list[dict]:
        normalized = [self.normalizer(raw, i).model_dump() for i, raw in enumerate(records)]
        document = self._load()
        document[lang] = normalized
        self._save(document)
        logger.info(f"Replaced {self.name}[{lang}] with {len(normalized)} record(s)")
        return normalized

    def reset(self, lang: str) -> list:
        restored = self.defaults(lang)
        document = self._load()
        document[lang] = restored
        self._save(document)
        logger.info(f"Reset {self.name}[{lang}] to {len(restored)} default record(s)")
        return restored
