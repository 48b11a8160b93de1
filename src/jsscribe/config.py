"""Configuration management for jsscribe scans."""

from dataclasses import dataclass
from pathlib import Path

import yaml

CONFIG_FILE_NAME = ".jsscribe"


@dataclass
class ScanConfig:
    """Configuration for locating entities in a source file.

    Attributes:
        tab_size: Expand each tab to this many spaces before locating headers.
            0 leaves tabs alone so coordinates index the unmodified source.
        include_exports: Look through ``export`` statements for declarations.
    """
    tab_size: int = 0
    include_exports: bool = True


def load_scan_config(root: Path | None = None) -> ScanConfig:
    """Load scan configuration from a .jsscribe file.

    Args:
        root: Directory holding the config file. If None, uses current directory.

    Returns:
        ScanConfig object with loaded or default values.

    Notes:
        If the file doesn't exist or can't be parsed, returns default config.
        Expected YAML structure:

        ```yaml
        scan:
          tab_size: 4
          include_exports: true
        ```
    """
    if root is None:
        root = Path.cwd()

    config_path = root / CONFIG_FILE_NAME

    if not config_path.exists():
        return ScanConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            return ScanConfig()

        scan_config = data.get("scan", {})
        if not isinstance(scan_config, dict):
            return ScanConfig()

        tab_size = int(scan_config.get("tab_size", ScanConfig.tab_size))
        if tab_size < 0:
            return ScanConfig()

        return ScanConfig(
            tab_size=tab_size,
            include_exports=bool(
                scan_config.get("include_exports", ScanConfig.include_exports)
            ),
        )
    except (yaml.YAMLError, OSError, KeyError, TypeError, ValueError):
        # Return default config on any parsing errors
        return ScanConfig()
