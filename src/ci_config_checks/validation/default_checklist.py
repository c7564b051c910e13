# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""Built-in acceptance checklist for the CI workflow and build configuration.

Acceptance Criteria Coverage:
    - AC-1.2.1: Workflow triggers and Java setup
    - AC-1.2.2: Build goals and artifact publishing
    - AC-1.2.3: SonarCloud integration
    - AC-1.2.4: Gradle dependency caching

SonarCloud analysis is not part of the workflow itself; it runs as a
scheduled automatic scan, so only its configuration files are checked.
"""

from __future__ import annotations

from typing import Final

from ci_config_checks.models import (
    ModelContainsExpectation,
    ModelOrderedKeywordsExpectation,
    ModelPatternExpectation,
    ModelTargetFile,
    ModelValidYamlExpectation,
)

WORKFLOW_FILE: Final[str] = ".github/workflows/ci.yml"
SONAR_PROPERTIES: Final[str] = "sonar-project.properties"
BUILD_GRADLE: Final[str] = "build.gradle"

AC_TRIGGERS_AND_JAVA: Final[str] = "AC-1.2.1"
AC_BUILD_AND_ARTIFACTS: Final[str] = "AC-1.2.2"
AC_SONARCLOUD: Final[str] = "AC-1.2.3"
AC_GRADLE_CACHING: Final[str] = "AC-1.2.4"

# Step labels in the order the workflow must run them
WORKFLOW_STEP_ORDER: Final[tuple[str, ...]] = (
    "Checkout code",
    "Set up Java",
    "Setup Gradle",
    "spotlessCheck",
    "clean build",
    "jacocoTestReport",
    "upload-artifact",
)


def _contains(substring: str, criterion: str, description: str) -> ModelContainsExpectation:
    return ModelContainsExpectation(
        substring=substring,
        criterion=criterion,
        description=description,
    )


def _workflow_target() -> ModelTargetFile:
    return ModelTargetFile(
        path=WORKFLOW_FILE,
        expectations=(
            ModelValidYamlExpectation(
                criterion=AC_TRIGGERS_AND_JAVA,
                description=f"CI workflow file should exist at {WORKFLOW_FILE} and be valid YAML",
            ),
            # Triggers
            _contains("push:", AC_TRIGGERS_AND_JAVA, "Workflow should trigger on push"),
            _contains(
                "branches: [main]",
                AC_TRIGGERS_AND_JAVA,
                "Workflow should trigger on push to main",
            ),
            _contains(
                "pull_request:",
                AC_TRIGGERS_AND_JAVA,
                "Workflow should trigger on pull_request to main",
            ),
            # Java
            _contains(
                "actions/setup-java@v4",
                AC_TRIGGERS_AND_JAVA,
                "Workflow should use actions/setup-java@v4",
            ),
            ModelPatternExpectation(
                pattern=r"java-version:\s*'?21'?",
                criterion=AC_TRIGGERS_AND_JAVA,
                description="Workflow should configure Java 21",
            ),
            _contains(
                "distribution: 'temurin'",
                AC_TRIGGERS_AND_JAVA,
                "Workflow should use Temurin distribution",
            ),
            # Gradle
            _contains(
                "gradle/actions/setup-gradle@v4",
                AC_GRADLE_CACHING,
                "Workflow should use gradle/actions/setup-gradle",
            ),
            _contains(
                "./gradlew spotlessCheck",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should run spotlessCheck",
            ),
            _contains(
                "./gradlew clean build",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should run gradle build",
            ),
            _contains(
                "./gradlew jacocoTestReport",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should generate JaCoCo report",
            ),
            # Artifacts
            _contains(
                "actions/upload-artifact@v4",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should upload JaCoCo reports",
            ),
            _contains(
                "jacoco-report",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should name the JaCoCo artifact",
            ),
            _contains(
                "build/reports/jacoco/test/",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should upload the JaCoCo report directory",
            ),
            _contains(
                "retention-days: 30",
                AC_BUILD_AND_ARTIFACTS,
                "Workflow should set artifact retention",
            ),
            _contains(
                "--build-cache",
                AC_GRADLE_CACHING,
                "Workflow should use Gradle build cache",
            ),
            ModelOrderedKeywordsExpectation(
                keywords=WORKFLOW_STEP_ORDER,
                description="Workflow should have all required steps in order",
            ),
        ),
    )


def _sonar_target() -> ModelTargetFile:
    return ModelTargetFile(
        path=SONAR_PROPERTIES,
        expectations=(
            _contains(
                "sonar.projectKey=tech-support",
                AC_SONARCLOUD,
                "Sonar properties should define project key",
            ),
            _contains(
                "sonar.host.url=https://sonarcloud.io",
                AC_SONARCLOUD,
                "Sonar properties should point to SonarCloud",
            ),
            _contains(
                "sonar.coverage.jacoco.xmlReportPaths",
                AC_SONARCLOUD,
                "Sonar properties should configure JaCoCo XML report path",
            ),
            _contains(
                "jacocoTestReport.xml",
                AC_SONARCLOUD,
                "Sonar properties should reference the JaCoCo XML report",
            ),
        ),
    )


def _build_gradle_target() -> ModelTargetFile:
    return ModelTargetFile(
        path=BUILD_GRADLE,
        expectations=(
            _contains(
                "id 'org.sonarqube' version '6.0.1.5171'",
                f"{AC_BUILD_AND_ARTIFACTS}, {AC_SONARCLOUD}",
                "build.gradle should include sonarqube plugin",
            ),
        ),
    )


def build_default_checklist() -> list[ModelTargetFile]:
    """Return the built-in checklist: workflow, Sonar properties, build.gradle."""
    return [_workflow_target(), _sonar_target(), _build_gradle_target()]


__all__ = [
    "AC_BUILD_AND_ARTIFACTS",
    "AC_GRADLE_CACHING",
    "AC_SONARCLOUD",
    "AC_TRIGGERS_AND_JAVA",
    "BUILD_GRADLE",
    "SONAR_PROPERTIES",
    "WORKFLOW_FILE",
    "WORKFLOW_STEP_ORDER",
    "build_default_checklist",
]
