from __future__ import annotations

import hashlib
import json
import string
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .comparators import normalize_order

DEFAULT_ORDER: str = string.ascii_lowercase


def _order_from_settings(raw: Any) -> str:
    if raw is None or raw == "" or raw == []:
        return DEFAULT_ORDER
    if not isinstance(raw, (str, list)):
        raise ValueError(
            "[tool.alphasort] order must be a string or a list of characters, "
            f"got {raw!r}"
        )
    try:
        return normalize_order(raw)
    except ValueError as exc:
        raise ValueError(f"[tool.alphasort] order: {exc}") from exc


@dataclass
class AlphasortConfig:
    order: str = DEFAULT_ORDER
    validate: bool = False

    @classmethod
    def load(cls, root: Path) -> AlphasortConfig:
        pyproject = root / "pyproject.toml"
        order: Any = None
        validate = False

        if pyproject.exists():
            with pyproject.open("rb") as handle:
                data = tomllib.load(handle)
            tool_cfg = data.get("tool", {}).get("alphasort", {})
            order = tool_cfg.get("order")
            validate = bool(tool_cfg.get("validate", validate))

        return cls(order=_order_from_settings(order), validate=validate)

    @property
    def signature(self) -> str:
        payload: dict[str, str | bool] = {
            "order": self.order,
            "validate": self.validate,
        }
        serialized = json.dumps(payload, sort_keys=True).encode("utf-8")
        return hashlib.sha256(serialized).hexdigest()
