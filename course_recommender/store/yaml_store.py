from __future__ import annotations

import logging
import os

import yaml

from ..search.types import ProfileRecord
from .memory import MemoryProfileStore

logger = logging.getLogger(__name__)


class YamlProfileStore(MemoryProfileStore):
    """
    Profile catalog read from a YAML file with a top-level ``profiles:`` list.
    Entries without a name are skipped.
    """

    def __init__(self, path: str):
        if not os.path.exists(path):
            raise FileNotFoundError(f"Profile catalog not found at {path}")
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        records = []
        for raw in data.get("profiles", []) or []:
            rec = ProfileRecord.from_mapping(raw or {})
            if rec is None:
                logger.warning("Skipping profile without a name in %s", path)
                continue
            records.append(rec)
        self.path = path
        super().__init__(records)
