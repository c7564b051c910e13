# SPDX-License-Identifier: MIT
# Copyright (c) 2026 OmniNode Team
"""CI configuration checks for Gradle/Java project repositories.

Asserts textual properties of a GitHub Actions workflow definition and the
auxiliary build configuration files that accompany it:

- ``.github/workflows/ci.yml``: triggers, Java/Gradle setup, build steps,
  artifact publishing, and the relative order of workflow steps
- ``sonar-project.properties``: SonarCloud project settings
- ``build.gradle``: SonarQube plugin declaration

Key Components:
    - FileAssertionChecker: Evaluates declarative expectations against files
    - build_default_checklist: The built-in acceptance checklist
    - load_checklist_manifest: Loads an alternative checklist from YAML
"""

__all__: list[str] = []
