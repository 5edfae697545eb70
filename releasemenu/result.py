# releasemenu - Interactive release selection menu
# Copyright (c) 2024-2026 Matthew Bright
# Licensed under the MIT License. See LICENSE file for details.

"""Release result data handed to the menu.

These types mirror the result document produced by a release run: one
outcome per controller, each with a status, an optional error, and the
container image changes it would make.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

logger = logging.getLogger(__name__)


class ResultFormatError(ValueError):
    """Raised when a result document does not have the expected shape."""


class UpdateStatus(str, Enum):
    """Outcome of a release for one controller."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"
    IGNORED = "ignored"
    UNKNOWN = "unknown"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value):
        text = str(value).lower()
        if text == "succeeded":
            return cls.SUCCESS
        try:
            return cls(text)
        except ValueError:
            logger.debug(f"Unrecognised status {value!r}, treating as unknown")
            return cls.UNKNOWN


@dataclass(frozen=True)
class ImageRef:
    """An image reference such as ``registry:5000/org/app:1.2``."""

    name: str
    tag: str = ""

    @classmethod
    def parse(cls, text: str) -> "ImageRef":
        # A colon before the last slash belongs to a registry port
        slash = text.rfind("/")
        colon = text.rfind(":")
        if colon > slash:
            return cls(name=text[:colon], tag=text[colon + 1 :])
        return cls(name=text)

    def __str__(self):
        if self.tag:
            return f"{self.name}:{self.tag}"
        return self.name


@dataclass(frozen=True)
class ContainerUpdate:
    container: str
    current: ImageRef
    target: ImageRef

    def to_dict(self) -> dict:
        return {
            "Container": self.container,
            "Current": str(self.current),
            "Target": str(self.target),
        }


@dataclass
class ControllerResult:
    status: UpdateStatus
    error: str = ""
    per_container: list = field(default_factory=list)


class Result(Mapping):
    """Read-only mapping of resource ID to ControllerResult."""

    def __init__(self, results=None):
        self._results = dict(results or {})

    def __getitem__(self, resource_id):
        return self._results[resource_id]

    def __iter__(self):
        return iter(self._results)

    def __len__(self):
        return len(self._results)

    def service_ids(self) -> list[str]:
        """Return resource IDs in lexicographic order."""
        return sorted(self._results)

    @classmethod
    def from_dict(cls, data) -> "Result":
        """Build a Result from a decoded JSON document.

        Accepts both the capitalised keys written by the release tooling
        (``Status``, ``Error``, ``PerContainer``) and lower-case ones.
        """
        if not isinstance(data, dict):
            raise ResultFormatError("Result document must be a JSON object")

        results = {}
        for resource_id, raw in data.items():
            if not isinstance(raw, dict):
                raise ResultFormatError(f"Result for {resource_id} must be an object")
            updates = []
            for raw_update in _get(raw, "PerContainer") or []:
                fields = None
                if isinstance(raw_update, dict):
                    fields = [_get(raw_update, key) for key in ("Container", "Current", "Target")]
                if fields is None or not all(isinstance(value, str) for value in fields):
                    raise ResultFormatError(
                        f"Malformed container update for {resource_id}: {raw_update!r}"
                    )
                container, current, target = fields
                updates.append(
                    ContainerUpdate(
                        container=container,
                        current=ImageRef.parse(current),
                        target=ImageRef.parse(target),
                    )
                )
            results[resource_id] = ControllerResult(
                status=UpdateStatus.parse(_get(raw, "Status") or "unknown"),
                error=_get(raw, "Error") or "",
                per_container=updates,
            )
        return cls(results)


def _get(raw, key):
    if key in raw:
        return raw[key]
    # PerContainer -> per_container, Status -> status
    snake = "".join("_" + c.lower() if c.isupper() else c for c in key).lstrip("_")
    return raw.get(snake)


def load_result(source) -> Result:
    """Load a Result from a JSON file path or an open text stream."""
    try:
        if hasattr(source, "read"):
            data = json.load(source)
        else:
            with open(source, encoding="utf-8") as handle:
                data = json.load(handle)
    except json.JSONDecodeError as error:
        raise ResultFormatError(f"Invalid JSON: {error}") from error
    return Result.from_dict(data)
