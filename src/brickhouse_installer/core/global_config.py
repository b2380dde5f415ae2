"""Global configuration data structures and loading.

Provides immutable global config data loaded from ~/.brickhouse/config.toml.
The file is optional; every field has a default matching the stock toolchain.
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATE_PACKAGE = "brickhouse/brickhouse"
DEFAULT_TEMPLATE_VERSION = "dev-main"


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable global configuration data.

    Loaded once at CLI entry point and stored in InstallerContext.
    Command-line flags take precedence over these values.

    Attributes:
        php_binary: Name or path of the PHP binary
        composer_binary: Name or path of the Composer binary
        template_package: Composer package the skeleton is created from
        template_version: Version constraint passed to create-project
        template_repository: Optional local checkout of the template package,
            registered with Composer as a "path" repository
    """

    php_binary: str = "php"
    composer_binary: str = "composer"
    template_package: str = DEFAULT_TEMPLATE_PACKAGE
    template_version: str = DEFAULT_TEMPLATE_VERSION
    template_repository: Path | None = None


def global_config_path() -> Path:
    """Get the path to the global config file."""
    return Path.home() / ".brickhouse" / "config.toml"


def load_global_config(path: Path | None = None) -> GlobalConfig:
    """Load global config from ~/.brickhouse/config.toml.

    Args:
        path: Config file path (defaults to ~/.brickhouse/config.toml)

    Returns:
        GlobalConfig with values from the file, or defaults if it doesn't exist

    Raises:
        ValueError: If the file is not valid TOML or a value has the wrong type
    """
    config_path = path if path is not None else global_config_path()

    if not config_path.exists():
        return GlobalConfig()

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {config_path}: {e}") from e

    defaults = GlobalConfig()
    repository = data.get("template_repository")

    return GlobalConfig(
        php_binary=_read_str(data, "php_binary", defaults.php_binary, config_path),
        composer_binary=_read_str(data, "composer_binary", defaults.composer_binary, config_path),
        template_package=_read_str(
            data, "template_package", defaults.template_package, config_path
        ),
        template_version=_read_str(
            data, "template_version", defaults.template_version, config_path
        ),
        template_repository=(
            Path(_read_str(data, "template_repository", "", config_path)).expanduser()
            if repository is not None
            else None
        ),
    )


def _read_str(data: dict, key: str, default: str, config_path: Path) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ValueError(f"'{key}' in {config_path} must be a non-empty string")
    return value
