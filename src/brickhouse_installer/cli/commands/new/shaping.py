"""Post-processing of a freshly materialized project.

The shaper applies SHAPING_STEPS in declared order. Each step is gated on its
own condition, and steps are fail-forward: a failing step halts its own
command sub-sequence, is recorded as a StepOutcome, and later steps still run.
The caller decides what a non-zero outcome means for the run as a whole.
"""

import logging
from pathlib import Path

from brickhouse_installer.core.context import InstallerContext
from brickhouse_installer.core.files import (
    LiteralReplacement,
    copy_stub,
    delete_matching_files,
    replace_in_file,
)

from .execution import run_command, run_sequence
from .types import BuildConfig, StepOutcome, TransformStep

logger = logging.getLogger(__name__)

API_ONLY_MARKER = LiteralReplacement(search="api_only: false", replacement="api_only: true")

# Stub name -> destination relative to the project root
PEST_STUBS: tuple[tuple[str, Path], ...] = (
    ("pest/Unit.php", Path("tests", "Unit", "ExampleTest.php")),
    ("pest/Feature.php", Path("tests", "Feature", "ExampleTest.php")),
    ("pest/TestCase.php", Path("tests", "TestCase.php")),
    ("pest/Pest.php", Path("tests", "Pest.php")),
)

# Stops Pest from asking to star the repository during --init
PEST_ENV = {"PEST_NO_SUPPORT": "true"}

FRONTEND_MANIFESTS = ("package.json", "tailwind.config.js")


def prune_for_api(ctx: InstallerContext, config: BuildConfig, project: Path) -> int:
    """Turn a full-stack skeleton into an API-only one."""
    replace_in_file(project / "config" / "app.config.php", API_ONLY_MARKER)

    views = project / "resources" / "views"
    delete_matching_files(views, "*/*.html.php")
    (views / "components").rmdir()
    (views / "layouts").rmdir()

    assets = project / "assets"
    delete_matching_files(assets, "*")
    assets.rmdir()

    for manifest in FRONTEND_MANIFESTS:
        (project / manifest).unlink()

    copy_stub(ctx.stubs_dir, "routes.api.php", project / "routes" / "app.php")
    return 0


def install_pest(ctx: InstallerContext, config: BuildConfig, project: Path) -> int:
    """Swap PHPUnit for Pest and drop in the Pest example tests.

    The stubs are copied even when a Composer command fails, matching the
    fail-forward behavior of the shaper as a whole.
    """
    commands = [
        [config.composer_binary, "remove", "phpunit/phpunit", "--dev", "--no-update"],
        [config.composer_binary, "require", "pestphp/pest", "--dev", "--no-update"],
        [config.composer_binary, "update"],
        [config.php_binary, "./vendor/bin/pest", "--init"],
    ]
    exit_code = run_sequence(ctx, config, commands, cwd=project, env=PEST_ENV)

    for stub, destination in PEST_STUBS:
        copy_stub(ctx.stubs_dir, stub, project / destination)

    return exit_code


def install_npm_packages(ctx: InstallerContext, config: BuildConfig, project: Path) -> int:
    return run_command(ctx, config, ["npm", "install"], cwd=project)


def build_assets(ctx: InstallerContext, config: BuildConfig, project: Path) -> int:
    return run_command(ctx, config, [config.php_binary, "brickhouse", "build"], cwd=project)


SHAPING_STEPS: tuple[TransformStep, ...] = (
    TransformStep(
        name="api-only",
        message="Updating project to be API-only...",
        enabled=lambda config, project: config.api_only,
        run=prune_for_api,
    ),
    TransformStep(
        name="pest",
        message="Installing Pest...",
        enabled=lambda config, project: config.use_pest,
        run=install_pest,
    ),
    TransformStep(
        name="npm-install",
        message="Installing npm packages...",
        enabled=lambda config, project: (project / "package.json").is_file(),
        run=install_npm_packages,
    ),
    TransformStep(
        name="build-assets",
        message="Building assets...",
        enabled=lambda config, project: not config.api_only,
        run=build_assets,
    ),
)


def shape_project(
    ctx: InstallerContext,
    config: BuildConfig,
    steps: tuple[TransformStep, ...] = SHAPING_STEPS,
) -> list[StepOutcome]:
    """Run every enabled step in order.

    Conditions are evaluated just before each step, so a step sees the
    effects of the ones before it (API pruning removes package.json, which
    disables npm install).

    Returns:
        Outcomes of the steps that ran, in order
    """
    project = config.project_path(ctx.cwd)
    outcomes: list[StepOutcome] = []

    for step in steps:
        if not step.enabled(config, project):
            logger.debug("Skipping step %s", step.name)
            continue

        ctx.feedback.info(step.message)
        exit_code = step.run(ctx, config, project)
        logger.debug("Step %s finished with %d", step.name, exit_code)
        outcomes.append(StepOutcome(name=step.name, exit_code=exit_code))

    return outcomes
