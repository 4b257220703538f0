"""Configuration loader for substitution tables.

Loads tables from YAML files with priority resolution:
1. Extra search paths passed by the caller (highest priority)
2. User config: ~/.config/{app_name}/tables/
3. Project config: .{app_name}/tables/ in current directory
4. Package defaults: shipped with sibylline-slice (fallback)
"""

import logging
from pathlib import Path

from .replace import DEFAULT_CLOSE_MARKER, DEFAULT_OPEN_MARKER, BatchReplace

log = logging.getLogger(__name__)

# Lazy import yaml to avoid startup cost
_yaml = None


def _get_yaml():
    """Lazy-load PyYAML."""
    global _yaml
    if _yaml is None:
        import yaml

        _yaml = yaml
    return _yaml


def _get_package_defaults_path() -> Path:
    """Get path to package default tables using importlib.resources."""
    try:
        from importlib.resources import files

        return files("sibylline_slice.table_data") / "_defaults"
    except (ImportError, TypeError):
        # Fallback for editable installs
        return Path(__file__).parent / "table_data" / "_defaults"


class TableConfig:
    """Load substitution tables from config files with priority resolution.

    A table file looks like::

        settings:
          open_marker: "${"
          close_marker: "}"
        tokens:
          "${name}": "replacement"

    ``tokens`` may also be a list of ``{token: ..., replacement: ...}``
    entries, which keeps duplicate tokens (the first one wins on lookup).
    """

    # Tables shipped in package defaults
    AVAILABLE_TABLES = [
        "demo",
    ]

    def __init__(
        self,
        tables: list[str] | None = None,
        app_name: str = "sibylline-slice",
        search_paths: list[str | Path] | None = None,
    ):
        """Initialize and eagerly load the named tables.

        Args:
            tables: Table names to load up front. More can be loaded later
                    through :meth:`get_table`.
            app_name: Application name for config directory resolution
                     (e.g., ~/.config/{app_name}/tables/).
            search_paths: Extra directories checked before the standard
                          locations.
        """
        self._app_name = app_name
        self._config_locations = [Path(p) for p in search_paths or []]
        self._config_locations += [
            Path.home() / ".config" / app_name / "tables",  # User overrides
            Path.cwd() / f".{app_name}" / "tables",  # Project config
        ]

        self._pairs: dict[str, list[tuple[str, str]]] = {}
        self._settings: dict[str, dict] = {}
        for name in tables or []:
            self._load_table(name)

    def _find_config_file(self, name: str):
        """Find the file for a table, checking locations in priority order.

        Returns:
            Path (or importlib Traversable) of the table file, or None.
        """
        filename = f"{name}.yaml"

        for config_dir in self._config_locations:
            config_file = config_dir / filename
            if config_file.is_file():
                return config_file

        default_file = _get_package_defaults_path() / filename
        if default_file.is_file():
            return default_file

        return None

    def _load_table(self, name: str) -> bool:
        """Load a single table. Returns False if no usable file exists."""
        if name in self._pairs:
            return True

        config_file = self._find_config_file(name)
        if config_file is None:
            log.debug("No table file for %r", name)
            return False

        yaml = _get_yaml()
        content = config_file.read_text(encoding="utf-8")

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            log.warning("Skipping unreadable table file %s: %s", config_file, exc)
            return False

        if not isinstance(data, dict):
            log.warning("Skipping table file %s: expected a mapping at top level", config_file)
            return False

        self._settings[name] = data.get("settings") or {}
        self._pairs[name] = self._parse_tokens(data.get("tokens"), config_file)
        log.debug("Loaded table %r from %s (%d tokens)", name, config_file, len(self._pairs[name]))
        return True

    @staticmethod
    def _parse_tokens(tokens, source) -> list[tuple[str, str]]:
        if not tokens:
            return []

        if isinstance(tokens, dict):
            return [(str(token), str(replacement)) for token, replacement in tokens.items()]

        pairs: list[tuple[str, str]] = []
        for entry in tokens:
            if not isinstance(entry, dict) or "token" not in entry:
                log.warning("Ignoring malformed token entry %r in %s", entry, source)
                continue
            pairs.append((str(entry["token"]), str(entry.get("replacement", ""))))
        return pairs

    def get_pairs(self, name: str) -> list[tuple[str, str]]:
        """Get the ordered ``(token, replacement)`` pairs of a table.

        Raises:
            ValueError: If no file for the table can be found.
        """
        if not self._load_table(name):
            raise ValueError(f"Unknown substitution table {name!r}. Available tables: {', '.join(self.list_tables())}")
        return list(self._pairs[name])

    def get_table(self, name: str) -> BatchReplace:
        """Build a :class:`BatchReplace` from a table and its marker settings."""
        pairs = self.get_pairs(name)
        settings = self._settings.get(name, {})
        return BatchReplace(
            *pairs,
            open_marker=settings.get("open_marker", DEFAULT_OPEN_MARKER),
            close_marker=settings.get("close_marker", DEFAULT_CLOSE_MARKER),
        )

    def list_tables(self) -> list[str]:
        """List table names visible from every configured location."""
        names = set(self.AVAILABLE_TABLES)
        for config_dir in self._config_locations:
            if config_dir.is_dir():
                names.update(p.stem for p in config_dir.glob("*.yaml"))
        return sorted(names)

    @classmethod
    def list_available_tables(cls) -> list[str]:
        """List the tables shipped with the package."""
        return cls.AVAILABLE_TABLES.copy()
