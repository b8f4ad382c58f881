"""Configuration loading and management."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
import tomllib

CONFIG_TABLE = "mdscan"
DOTFILE_NAME = ".mdscan.toml"


@dataclass(frozen=True)
class ScanConfig:
    """Tunable parameters for a markdown analysis pass.

    Attributes:
        hint_preview_length: Characters of a flagged line kept in a code hint.
        match_preview_length: Characters of a located match kept for highlighting.
        check_preview_length: Characters of a line quoted by the save-time check.
        average_char_width_ratio: Average glyph width as a fraction of the font
            size, used to estimate the width of a highlighted match.
        scroll_lookahead: Pixels below the scroll offset at which a heading
            already counts as active.
        min_code_score: Number of code features a line needs before the scored
            check reports it.
        preserve_unicode: Keep non-ASCII word characters in anchor identifiers.

    Examples:
        ScanConfig(scroll_lookahead=80, preserve_unicode=True)
    """

    # Previews
    hint_preview_length: int = 30
    match_preview_length: int = 30
    check_preview_length: int = 40

    # Geometry
    average_char_width_ratio: float = 0.6
    scroll_lookahead: float = 100.0

    # Detection
    min_code_score: int = 2

    # Anchors
    preserve_unicode: bool = False


class ConfigError(ValueError):
    """Exception raised when configuration values are invalid.

    Examples:
        raise ConfigError("`min_code_score` must be a positive integer")
    """


def load_config(search_path: Path) -> ScanConfig:
    """Load configuration from the nearest config file.

    Walks parent directories from `search_path` to the filesystem root, reading
    the ``[tool.mdscan]`` table from `pyproject.toml` and the ``[mdscan]`` or
    ``[tool.mdscan]`` table from `.mdscan.toml`. TOML files that cannot be read
    or decoded are skipped.

    Args:
        search_path: Directory used as the starting point for configuration lookup.

    Returns:
        ScanConfig: Loaded configuration, or defaults when nothing is found.

    Raises:
        ConfigError: If a matching table is not a mapping or has unknown keys.

    Examples:
        load_config(Path("docs"))
    """
    current = search_path.resolve()

    while True:
        pyproject_config = _load_from_file(
            current / "pyproject.toml", table_paths=[("tool", CONFIG_TABLE)]
        )
        if pyproject_config is not None:
            return pyproject_config

        dotfile_config = _load_from_file(
            current / DOTFILE_NAME,
            table_paths=[(CONFIG_TABLE,), ("tool", CONFIG_TABLE)],
        )
        if dotfile_config is not None:
            return dotfile_config

        parent = current.parent
        if parent == current:
            break
        current = parent

    return ScanConfig()


_MISSING = object()


def _load_from_file(config_file: Path, table_paths: list[tuple[str, ...]]) -> ScanConfig | None:
    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as stream:
            data = tomllib.load(stream)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    for table_path in table_paths:
        raw_config = _extract_table(data, table_path)
        if raw_config is _MISSING:
            continue
        return _build_config_from_raw(raw_config, config_file, table_path)

    return None


def _extract_table(data: object, table_path: tuple[str, ...]) -> object:
    current = data
    for key in table_path:
        if not isinstance(current, dict) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _build_config_from_raw(
    raw_config: object, config_file: Path, table_path: tuple[str, ...]
) -> ScanConfig:
    table_display = ".".join(table_path)

    if not isinstance(raw_config, dict):
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}")

    if not raw_config:
        return ScanConfig()

    try:
        return ScanConfig(**raw_config)
    except TypeError as error:
        raise ConfigError(f"Invalid `[{table_display}]` settings in {config_file}") from error


def validate_config(config: ScanConfig) -> None:
    """Validate a `ScanConfig` instance.

    Args:
        config: Configuration to validate.

    Raises:
        ConfigError: If a preview length or score is not a positive integer,
            a geometry value is not a non-negative number, or
            `preserve_unicode` is not a boolean.

    Examples:
        validate_config(ScanConfig(min_code_score=3))
    """
    integers = {
        "hint_preview_length": config.hint_preview_length,
        "match_preview_length": config.match_preview_length,
        "check_preview_length": config.check_preview_length,
        "min_code_score": config.min_code_score,
    }
    _ensure_integers(integers)
    _ensure_positive(integers)

    numbers = {
        "average_char_width_ratio": config.average_char_width_ratio,
        "scroll_lookahead": config.scroll_lookahead,
    }
    _ensure_numbers(numbers)
    if config.average_char_width_ratio <= 0:
        raise ConfigError("`average_char_width_ratio` must be a positive number")
    if config.scroll_lookahead < 0:
        raise ConfigError("`scroll_lookahead` must not be negative")

    if not isinstance(config.preserve_unicode, bool):
        raise ConfigError("`preserve_unicode` must be a boolean")


def apply_overrides(config: ScanConfig, **overrides: object) -> ScanConfig:
    """Apply override values to a `ScanConfig`.

    Args:
        config: Base configuration to update.
        overrides: Values keyed by field name; None values are ignored.

    Returns:
        ScanConfig: Updated configuration, or `config` itself when nothing changes.

    Raises:
        TypeError: If an override name is not defined on `ScanConfig`.
    """
    changes = {key: value for key, value in overrides.items() if value is not None}
    if not changes:
        return config
    return replace(config, **changes)


def build_config(search_path: Path, **overrides: object) -> ScanConfig:
    """Load, override, and validate configuration.

    Examples:
        config = build_config(Path.cwd(), scroll_lookahead=60)
    """
    config = load_config(search_path)
    config = apply_overrides(config, **overrides)
    validate_config(config)
    return config


def _ensure_positive(values: dict[str, int]) -> None:
    for key, value in values.items():
        if value <= 0:
            raise ConfigError(f"`{key}` must be a positive integer")


def _ensure_integers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"`{key}` must be an integer")


def _ensure_numbers(values: dict[str, object]) -> None:
    for key, value in values.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"`{key}` must be a number")
