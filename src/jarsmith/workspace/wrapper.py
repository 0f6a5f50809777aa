"""Wrapper provisioning — pinned-version launcher scripts and their properties.

Only runs when the ``wrapper`` feature flag is set. The launchers locate the
wrapper properties relative to their own directory, so the generated project
stays relocatable. The pinned version is not checked against the remote
distribution server; the build tool reports a bad pin on first use.

Key class: WrapperProvisioner.
"""

import logging
import stat
from dataclasses import dataclass
from pathlib import Path

from ..descriptor import Backend, ProjectDescriptor
from .layout import WorkspaceRoot, write_text

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Gradle
# ---------------------------------------------------------------------------

_GRADLE_PROPERTIES = """\
distributionBase=GRADLE_USER_HOME
distributionPath=wrapper/dists
distributionUrl=https\\://services.gradle.org/distributions/gradle-{version}-bin.zip
networkTimeout=10000
validateDistributionUrl=true
zipStoreBase=GRADLE_USER_HOME
zipStorePath=wrapper/dists
"""

_GRADLEW = """\
#!/bin/sh
# Gradle {version} wrapper launcher for Unix-based systems (generated, do not edit)
APP_HOME=$(cd "$(dirname "$0")" > /dev/null && pwd -P) || exit
CLASSPATH=$APP_HOME/gradle/wrapper/gradle-wrapper.jar

if [ -n "$JAVA_HOME" ] ; then
    JAVACMD=$JAVA_HOME/bin/java
else
    JAVACMD=java
fi

exec "$JAVACMD" $JAVA_OPTS $GRADLE_OPTS "-Dorg.gradle.appname=gradlew" \\
    -classpath "$CLASSPATH" org.gradle.wrapper.GradleWrapperMain "$@"
"""

_GRADLEW_BAT = """\
@rem Gradle {version} wrapper launcher for Windows (generated, do not edit)
@if "%DEBUG%"=="" @echo off
setlocal
set APP_HOME=%~dp0
set CLASSPATH=%APP_HOME%gradle\\wrapper\\gradle-wrapper.jar
if defined JAVA_HOME (set JAVACMD=%JAVA_HOME%\\bin\\java.exe) else (set JAVACMD=java.exe)
"%JAVACMD%" %JAVA_OPTS% %GRADLE_OPTS% "-Dorg.gradle.appname=gradlew" -classpath "%CLASSPATH%" org.gradle.wrapper.GradleWrapperMain %*
endlocal
"""

# ---------------------------------------------------------------------------
# Maven
# ---------------------------------------------------------------------------

_MAVEN_WRAPPER_VERSION = "3.3.2"

_MAVEN_PROPERTIES = """\
wrapperVersion={wrapper_version}
distributionType=bin
distributionUrl=https://repo.maven.apache.org/maven2/org/apache/maven/apache-maven/{version}/apache-maven-{version}-bin.zip
wrapperUrl=https://repo.maven.apache.org/maven2/org/apache/maven/wrapper/maven-wrapper/{wrapper_version}/maven-wrapper-{wrapper_version}.jar
"""

_MVNW = """\
#!/bin/sh
# Maven {version} wrapper launcher for Unix-based systems (generated, do not edit)
MAVEN_PROJECTBASEDIR=$(cd "$(dirname "$0")" > /dev/null && pwd -P) || exit
WRAPPER_JAR=$MAVEN_PROJECTBASEDIR/.mvn/wrapper/maven-wrapper.jar

if [ -n "$JAVA_HOME" ] ; then
    JAVACMD=$JAVA_HOME/bin/java
else
    JAVACMD=java
fi

exec "$JAVACMD" $MAVEN_OPTS "-Dmaven.multiModuleProjectDirectory=$MAVEN_PROJECTBASEDIR" \\
    -classpath "$WRAPPER_JAR" org.apache.maven.wrapper.MavenWrapperMain "$@"
"""

_MVNW_CMD = """\
@REM Maven {version} wrapper launcher for Windows (generated, do not edit)
@echo off
setlocal
set MAVEN_PROJECTBASEDIR=%~dp0
set WRAPPER_JAR=%MAVEN_PROJECTBASEDIR%.mvn\\wrapper\\maven-wrapper.jar
if defined JAVA_HOME (set JAVACMD=%JAVA_HOME%\\bin\\java.exe) else (set JAVACMD=java.exe)
"%JAVACMD%" %MAVEN_OPTS% "-Dmaven.multiModuleProjectDirectory=%MAVEN_PROJECTBASEDIR%" -classpath "%WRAPPER_JAR%" org.apache.maven.wrapper.MavenWrapperMain %*
endlocal
"""


@dataclass(frozen=True)
class _WrapperLayout:
    properties_path: tuple[str, ...]
    properties_template: str
    unix_script: str
    unix_template: str
    windows_script: str
    windows_template: str


_LAYOUTS: dict[Backend, _WrapperLayout] = {
    Backend.GRADLE: _WrapperLayout(
        properties_path=("gradle", "wrapper", "gradle-wrapper.properties"),
        properties_template=_GRADLE_PROPERTIES,
        unix_script="gradlew",
        unix_template=_GRADLEW,
        windows_script="gradlew.bat",
        windows_template=_GRADLEW_BAT,
    ),
    Backend.MAVEN: _WrapperLayout(
        properties_path=(".mvn", "wrapper", "maven-wrapper.properties"),
        properties_template=_MAVEN_PROPERTIES,
        unix_script="mvnw",
        unix_template=_MVNW,
        windows_script="mvnw.cmd",
        windows_template=_MVNW_CMD,
    ),
}


def pinned_version(descriptor: ProjectDescriptor) -> str:
    """Distribution version the wrapper for this backend is pinned to."""
    if descriptor.backend is Backend.GRADLE:
        return descriptor.gradle_version
    return descriptor.maven_version


def make_executable(path: Path) -> None:
    """Add execute permission for owner, group and others."""
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


class WrapperProvisioner:
    """Writes wrapper properties and launchers into the backend project dir."""

    def __init__(self, workspace: WorkspaceRoot) -> None:
        self.workspace = workspace

    def provision(self, descriptor: ProjectDescriptor) -> list[Path]:
        """Emit the wrapper files if the wrapper feature is enabled.

        Returns:
            Written paths (properties, Unix launcher, Windows launcher), or
            an empty list when the feature is off.
        """
        if not descriptor.features.wrapper:
            logger.debug("Wrapper generation disabled")
            return []

        layout = _LAYOUTS[descriptor.backend]
        version = pinned_version(descriptor)
        project_dir = self.workspace.project_dir

        properties = project_dir.joinpath(*layout.properties_path)
        properties.parent.mkdir(parents=True, exist_ok=True)
        write_text(
            properties,
            layout.properties_template.format(
                version=version, wrapper_version=_MAVEN_WRAPPER_VERSION
            ),
        )

        unix = project_dir / layout.unix_script
        write_text(unix, layout.unix_template.format(version=version))
        make_executable(unix)

        windows = project_dir / layout.windows_script
        write_text(windows, layout.windows_template.format(version=version))

        logger.info(
            "Provisioned %s wrapper pinned to %s", descriptor.backend.value, version
        )
        return [properties, unix, windows]
