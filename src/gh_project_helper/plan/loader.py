"""Plan loading from YAML or JSON files."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gh_project_helper.contracts.exceptions import PlanLoadError
from gh_project_helper.contracts.plan import Plan

_JSON_SUFFIXES = frozenset({".json"})


class PlanLoader:
    """Load plan documents into Plan contracts."""

    def load(self, path: str | Path) -> Plan:
        plan_path = Path(path)
        payload = self._read(plan_path)
        if not isinstance(payload, Mapping):
            raise PlanLoadError(f"plan root must be a mapping: {plan_path}")
        return self.load_payload(payload)

    def load_payload(self, payload: Mapping[str, Any]) -> Plan:
        """Build a plan from an already-parsed structure."""
        try:
            return Plan.model_validate(dict(payload))
        except ValidationError as exc:
            raise PlanLoadError(f"plan schema mismatch: {exc}") from exc

    def _read(self, path: Path) -> Any:
        if not path.exists():
            raise PlanLoadError(f"plan file not found: {path}")
        if not path.is_file():
            raise PlanLoadError(f"plan path is not a file: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PlanLoadError(f"failed reading plan file: {path}") from exc

        if path.suffix.lower() in _JSON_SUFFIXES:
            try:
                return json.loads(text)
            except json.JSONDecodeError as exc:
                raise PlanLoadError(f"invalid JSON in plan file: {path}") from exc
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise PlanLoadError(f"invalid YAML in plan file: {path}: {exc}") from exc
