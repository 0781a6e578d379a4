# RUN: python examples/01_annotate_build.py
"""Annotate a finished build: register the step, run the post-build phase.

Demonstrates: AnnotatorSettings.from_env(), configure_logging(),
persisting the per-job toggle, default_registry() and InMemoryBuild.
"""

from build_annotator import (
    AnnotationConfig,
    AnnotatorSettings,
    BuildResult,
    Cause,
    CauseKind,
    InMemoryBuild,
    default_registry,
)
from build_annotator.utils.logging import configure_from_settings


def main() -> None:
    # 1. Process-wide settings and logging
    settings = AnnotatorSettings.from_env()
    configure_from_settings(settings)

    # 2. The toggle as the host would store it with the job configuration
    stored = AnnotationConfig(enabled=True).to_job_config()
    config = AnnotationConfig.from_job_config(stored)

    # 3. A failed build started by an upstream job, with an existing description
    build = InMemoryBuild(
        job="integration-tests",
        number=42,
        result=BuildResult.FAILURE,
        causes=[Cause(kind=CauseKind.UPSTREAM, upstream_project="compile", upstream_build=17)],
        description="flaky network suite",
    )

    # 4. Post-build phase: every registered step runs exactly once
    registry = default_registry(config)
    registry.run_post_build(build)
    build.finalize()

    print(build.get_description())


if __name__ == "__main__":
    main()
