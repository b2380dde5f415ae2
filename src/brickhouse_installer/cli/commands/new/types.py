"""Data structures for the new command subpackage.

These structures carry the resolved user choices through the build pipeline.
"""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from brickhouse_installer.core.context import InstallerContext


@dataclass(frozen=True)
class BuildConfig:
    """Complete, resolved set of choices for one scaffolding run.

    Built by the input resolver from flags and prompts. Every field is
    concrete: there is no "ask later" state once the pipeline starts.

    Attributes:
        directory: Project directory name, relative to the invocation cwd
        force: Remove an existing directory instead of refusing
        quiet: Suppress echo and output of external commands
        initialize_git: Create a git repository with an initial commit
        api_only: Strip views, assets and front-end tooling
        use_pest: Install Pest (True) or keep PHPUnit (False)
        php_binary: Name or path of the PHP binary
        composer_binary: Name or path of the Composer binary
    """

    directory: str
    force: bool
    quiet: bool
    initialize_git: bool
    api_only: bool
    use_pest: bool
    php_binary: str
    composer_binary: str

    def project_path(self, cwd: Path) -> Path:
        return cwd / self.directory


@dataclass(frozen=True)
class TransformStep:
    """One independently gated post-processing step of the shaper.

    Attributes:
        name: Identifier used in logs and step outcomes
        message: Status line shown before the step runs
        enabled: Decides at run time whether the step applies
        run: Performs the step and returns its exit code
    """

    name: str
    message: str
    enabled: Callable[[BuildConfig, Path], bool]
    run: Callable[["InstallerContext", BuildConfig, Path], int]


@dataclass(frozen=True)
class StepOutcome:
    """Exit code of a shaping step that ran."""

    name: str
    exit_code: int
