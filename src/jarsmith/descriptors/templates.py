"""Build descriptor templates, one set per backend.

Fixed boilerplate lives here as ``str.format`` templates (literal braces
doubled). Everything that depends on the project descriptor or on a feature
flag is a named placeholder filled in by the renderers in render.py.
"""

# ---------------------------------------------------------------------------
# Gradle
# ---------------------------------------------------------------------------

GRADLE_BUILD = """\
plugins {{
{plugins}
}}

group = '{group}'
version = '{version}'

application {{
    mainClass = '{entry_point}'
}}

java {{
    withSourcesJar()
    withJavadocJar()
}}

tasks.withType(JavaCompile).configureEach {{
    options.release = {java_release}
    options.encoding = 'UTF-8'
}}

repositories {{
    mavenCentral()
    google()
}}

dependencies {{
{dependencies}{test_dependencies}
}}

{test_block}

tasks.named('jar') {{
    manifest {{
        attributes(
            'Main-Class': '{entry_point}'
        )
    }}
}}
{fat_archive_block}"""

GRADLE_BASE_PLUGINS = (
    "id 'java'",
    "id 'application'",
    "id 'java-library'",
)

GRADLE_SHADOW_PLUGIN = "id 'com.github.johnrengelman.shadow' version '{version}'"

GRADLE_DEPENDENCY = "    implementation '{coordinate}'"

GRADLE_TEST_DEPENDENCIES = """\
    testImplementation 'org.junit.jupiter:junit-jupiter-api:5.8.2'
    testRuntimeOnly 'org.junit.jupiter:junit-jupiter-engine:5.8.2'"""

GRADLE_TEST_BLOCK = """\
test {
    useJUnitPlatform()
    testLogging {
        events "passed", "skipped", "failed"
    }
}"""

GRADLE_SHADOW_BLOCK = """
shadowJar {
    archiveClassifier.set('')
    archiveVersion.set(version)
    mergeServiceFiles()
}
"""

GRADLE_SETTINGS = """\
rootProject.name = '{name}'

dependencyResolutionManagement {{
    repositories {{
        mavenCentral()
        google()
        gradlePluginPortal()
    }}
}}
"""

GRADLE_PROPERTIES = """\
# Gradle performance improvements
org.gradle.jvmargs=-Xmx2g -XX:MaxMetaspaceSize=512m -XX:+HeapDumpOnOutOfMemoryError
org.gradle.parallel=true
org.gradle.caching=true
org.gradle.configureondemand=true

# Enable file system watching for faster incremental builds
org.gradle.vfs.watch=true
"""

# ---------------------------------------------------------------------------
# Maven
# ---------------------------------------------------------------------------

MAVEN_POM = """\
<?xml version="1.0" encoding="UTF-8"?>
<project xmlns="http://maven.apache.org/POM/4.0.0" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
    xsi:schemaLocation="http://maven.apache.org/POM/4.0.0 http://maven.apache.org/xsd/maven-4.0.0.xsd">
    <modelVersion>4.0.0</modelVersion>
    <groupId>{group}</groupId>
    <artifactId>{name}</artifactId>
    <version>{version}</version>
    <packaging>jar</packaging>

    <properties>
        <maven.compiler.release>{java_release}</maven.compiler.release>
        <project.build.sourceEncoding>UTF-8</project.build.sourceEncoding>
    </properties>

    <dependencies>
{dependencies}{test_dependencies}
    </dependencies>

    <build>
        <plugins>
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-compiler-plugin</artifactId>
                <version>3.11.0</version>
            </plugin>
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-jar-plugin</artifactId>
                <version>3.3.0</version>
                <configuration>
                    <archive>
                        <manifest>
                            <mainClass>{entry_point}</mainClass>
                        </manifest>
                    </archive>
                </configuration>
            </plugin>
{test_block}{fat_archive_block}
        </plugins>
    </build>
</project>
"""

MAVEN_DEPENDENCY = """\
        <dependency>
            <groupId>{group}</groupId>
            <artifactId>{artifact}</artifactId>
            <version>{version}</version>
        </dependency>"""

MAVEN_TEST_DEPENDENCIES = """\
        <dependency>
            <groupId>org.junit.jupiter</groupId>
            <artifactId>junit-jupiter</artifactId>
            <version>5.8.2</version>
            <scope>test</scope>
        </dependency>"""

MAVEN_TEST_BLOCK = """\
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-surefire-plugin</artifactId>
                <version>3.1.2</version>
            </plugin>"""

MAVEN_SHADE_BLOCK = """
            <plugin>
                <groupId>org.apache.maven.plugins</groupId>
                <artifactId>maven-shade-plugin</artifactId>
                <version>3.5.1</version>
                <executions>
                    <execution>
                        <phase>package</phase>
                        <goals>
                            <goal>shade</goal>
                        </goals>
                        <configuration>
                            <shadedArtifactAttached>false</shadedArtifactAttached>
                            <createDependencyReducedPom>false</createDependencyReducedPom>
                            <finalName>{name}-{version}</finalName>
                            <transformers>
                                <transformer implementation="org.apache.maven.plugins.shade.resource.ManifestResourceTransformer">
                                    <mainClass>{entry_point}</mainClass>
                                </transformer>
                                <transformer implementation="org.apache.maven.plugins.shade.resource.ServicesResourceTransformer"/>
                            </transformers>
                        </configuration>
                    </execution>
                </executions>
            </plugin>"""
