"""
Comparison view config persistence (platformdirs + JSON).

Persisted items (schema v1):
- comparison_state: ComparisonState dict representation
- active_view: which tab was last open ("overview", "plot" or "compare")

Only view state is persisted; datasets themselves never are.

Behavior:
- If config file missing or unreadable -> defaults are used
- If schema_version mismatches:
  - default: reset to defaults
  - optional: keep loaded but update version
- Unknown keys in loaded JSON are ignored with warnings
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from labcompare.comparison.comparison_state import ComparisonState
from labcompare.utils.logging import get_logger

logger = get_logger(__name__)

# Increment when you make a breaking change to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

VIEWS = ("overview", "plot", "compare")


@dataclass
class ComparisonConfigData:
    """
    JSON-serializable config payload.

    Keep fields JSON-friendly: primitives, lists, dicts.
    """
    schema_version: int = SCHEMA_VERSION
    active_view: str = "plot"
    comparison_state: Dict[str, Any] = field(default_factory=dict)

    def to_json_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "schema_version": self.schema_version,
            "active_view": self.active_view,
            "comparison_state": self.comparison_state,
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "ComparisonConfigData":
        """
        Tolerant loader:
        - ignores unknown keys
        - tolerates partially missing values
        """
        schema_version = int(d.get("schema_version", -1))

        active_view = str(d.get("active_view", "plot"))
        if active_view not in VIEWS:
            logger.warning(f"Unknown active_view {active_view!r}, using 'plot'")
            active_view = "plot"

        comparison_state: Dict[str, Any] = {}
        raw_state = d.get("comparison_state", {})
        if isinstance(raw_state, dict):
            comparison_state = raw_state
        else:
            logger.warning("comparison_state is not a dict, using empty state")

        known_keys = {"schema_version", "active_view", "comparison_state"}
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in comparison config, ignoring")

        return cls(
            schema_version=schema_version,
            active_view=active_view,
            comparison_state=comparison_state,
        )


class ComparisonConfig:
    """
    Manager for loading/saving ComparisonConfigData to disk.
    """

    def __init__(self, *, path: Path, data: Optional[ComparisonConfigData] = None):
        self.path = path
        self.data = data if data is not None else ComparisonConfigData()

    # -----------------------------
    # Construction / persistence
    # -----------------------------
    @staticmethod
    def default_config_path(
        app_name: str = "labcompare",
        filename: str = "comparison_config.json",
        app_author: str | None = None,
    ) -> Path:
        """
        Determine OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/labcompare/comparison_config.json
        Linux:   ~/.config/labcompare/comparison_config.json
        Windows: %APPDATA%\\labcompare\\comparison_config.json
        """
        d = Path(user_config_dir(app_name, app_author))
        return d / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = "labcompare",
        filename: str = "comparison_config.json",
        app_author: str | None = None,
        schema_version: int = SCHEMA_VERSION,
        reset_on_version_mismatch: bool = True,
        create_if_missing: bool = False,
    ) -> "ComparisonConfig":
        """
        Load config from disk.

        If file doesn't exist or is unreadable -> defaults.
        If schema mismatch:
          - reset_on_version_mismatch=True -> defaults
          - else -> keep loaded but overwrite schema_version

        If create_if_missing=True and file is missing -> immediately write defaults.
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename, app_author=app_author)
        default_data = ComparisonConfigData(schema_version=schema_version)

        try:
            raw = path.read_text(encoding="utf-8")
            parsed = json.loads(raw)
            if not isinstance(parsed, dict):
                logger.warning(f"Comparison config file at {path} does not contain a dict, using defaults")
                return cls(path=path, data=default_data)

            loaded = ComparisonConfigData.from_json_dict(parsed)

            if int(loaded.schema_version) != int(schema_version):
                if reset_on_version_mismatch:
                    logger.warning(
                        f"Comparison config schema version mismatch: loaded={loaded.schema_version}, "
                        f"expected={schema_version}, resetting to defaults"
                    )
                    cfg = cls(path=path, data=default_data)
                    if create_if_missing:
                        cfg.save()
                    return cfg
                loaded.schema_version = int(schema_version)

            return cls(path=path, data=loaded)
        except FileNotFoundError:
            logger.debug(f"Comparison config file not found at {path}, using defaults")
            cfg = cls(path=path, data=default_data)
            if create_if_missing:
                cfg.save()
            return cfg
        except json.JSONDecodeError as e:
            logger.warning(f"Comparison config file at {path} is not valid JSON: {e}, using defaults")
            return cls(path=path, data=default_data)
        except (OSError, ValueError) as e:
            logger.warning(f"Error loading comparison config from {path}: {e}, using defaults")
            return cls(path=path, data=default_data)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            json_str = json.dumps(self.data.to_json_dict(), indent=2)
            self.path.write_text(json_str, encoding="utf-8")
            logger.info(f"Saved comparison config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving comparison config to {self.path}: {e}")
            raise

    def get_active_view(self) -> str:
        return self.data.active_view

    def set_active_view(self, view: str) -> None:
        """Set the active view (one of VIEWS)."""
        if view not in VIEWS:
            raise ValueError(f"view must be one of {VIEWS}, got {view!r}")
        self.data.active_view = view

    def get_comparison_state(self) -> ComparisonState:
        """Get ComparisonState from config; defaults if the stored dict is invalid."""
        try:
            return ComparisonState.from_dict(self.data.comparison_state)
        except (TypeError, ValueError) as e:
            logger.warning(f"Error deserializing ComparisonState from config: {e}")
            return ComparisonState()

    def set_comparison_state(self, state: ComparisonState) -> None:
        self.data.comparison_state = state.to_dict()
