"""Factory for BuildConfig values in tests."""

from dataclasses import replace

from brickhouse_installer.cli.commands.new.types import BuildConfig

_DEFAULT = BuildConfig(
    directory="myapp",
    force=False,
    quiet=False,
    initialize_git=False,
    api_only=False,
    use_pest=False,
    php_binary="php",
    composer_binary="composer",
)


def build_config(**overrides: object) -> BuildConfig:
    """Return a BuildConfig with everything off, overridden by keyword."""
    return replace(_DEFAULT, **overrides)  # type: ignore[arg-type]
