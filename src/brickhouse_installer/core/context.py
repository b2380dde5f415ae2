"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from brickhouse_installer.core.global_config import GlobalConfig, load_global_config
from brickhouse_installer.core.process import ProcessRunner, RealProcessRunner
from brickhouse_installer.core.user_feedback import InteractiveFeedback, UserFeedback

STUBS_DIR = Path(__file__).parent.parent / "stubs"


@dataclass(frozen=True)
class InstallerContext:
    """Immutable context holding all dependencies for installer operations.

    Created at CLI entry point and threaded through the build pipeline.
    Frozen to prevent accidental modification at runtime.
    """

    process: ProcessRunner
    feedback: UserFeedback
    global_config: GlobalConfig
    cwd: Path  # Current working directory at CLI invocation
    stubs_dir: Path

    @staticmethod
    def for_test(
        process: ProcessRunner | None = None,
        feedback: UserFeedback | None = None,
        global_config: GlobalConfig | None = None,
        cwd: Path | None = None,
        stubs_dir: Path | None = None,
    ) -> "InstallerContext":
        """Create test context with optional pre-configured integration classes.

        Args:
            process: Optional ProcessRunner. If None, creates empty FakeProcessRunner.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            global_config: Optional GlobalConfig. If None, uses defaults.
            cwd: Optional working directory. If None, uses Path("/test/default/cwd").
            stubs_dir: Optional stub directory. If None, uses the bundled stubs.

        Example:
            >>> process = FakeProcessRunner(exit_codes={("git", "--version"): 1})
            >>> ctx = InstallerContext.for_test(process=process, cwd=tmp_path)
        """
        from tests.fakes.process import FakeProcessRunner
        from tests.fakes.user_feedback import FakeUserFeedback

        if process is None:
            process = FakeProcessRunner()

        if feedback is None:
            feedback = FakeUserFeedback()

        if global_config is None:
            global_config = GlobalConfig()

        return InstallerContext(
            process=process,
            feedback=feedback,
            global_config=global_config,
            cwd=cwd or Path("/test/default/cwd"),
            stubs_dir=stubs_dir or STUBS_DIR,
        )


def create_context() -> InstallerContext:
    """Create production context with real implementations.

    Raises:
        ValueError: If ~/.brickhouse/config.toml exists but is malformed
    """
    return InstallerContext(
        process=RealProcessRunner(),
        feedback=InteractiveFeedback(),
        global_config=load_global_config(),
        cwd=Path.cwd(),
        stubs_dir=STUBS_DIR,
    )
