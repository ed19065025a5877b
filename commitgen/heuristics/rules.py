"""Rule tables for heuristic commit message classification.

Contains the static data the classifier walks in order:
- PathRule: predicate describing which file paths belong to a category
- KeywordRule: patch keywords mapped to a message or a category
- TEST_FILES, DOC_FILES, CONFIG_FILES: path rules for file-set categories
- TEST_REFINEMENTS, DOC_REFINEMENTS, CONFIG_REFINEMENTS: wording per category
- GENERIC_CATEGORIES: keyword families for the generic path, in priority order
"""

from dataclasses import dataclass, field
from pathlib import PurePosixPath


@dataclass(frozen=True)
class PathRule:
    """Matches a single file path against suffix, prefix and basename tables.

    All comparisons are case-insensitive. A path matches if any one of the
    tables matches.
    """

    name: str
    suffixes: tuple[str, ...] = ()
    prefixes: tuple[str, ...] = ()
    basenames: frozenset[str] = field(default_factory=frozenset)
    stems: frozenset[str] = field(default_factory=frozenset)
    basename_prefixes: tuple[str, ...] = ()

    def matches(self, path: str) -> bool:
        lowered = path.lower()
        basename = PurePosixPath(lowered).name

        if self.suffixes and lowered.endswith(self.suffixes):
            return True
        if self.prefixes and lowered.startswith(self.prefixes):
            return True
        if basename in self.basenames:
            return True
        if self.stems and basename.split(".", 1)[0] in self.stems:
            return True
        if self.basename_prefixes and basename.startswith(self.basename_prefixes):
            return True
        return False

    def matches_all(self, files: list[str]) -> bool:
        """Return True only if every file matches (and there is at least one)."""
        return bool(files) and all(self.matches(f) for f in files)


@dataclass(frozen=True)
class KeywordRule:
    """Maps a family of patch keywords to a result string."""

    keywords: tuple[str, ...]
    result: str

    def matches(self, lowered_patch: str) -> bool:
        return any(keyword in lowered_patch for keyword in self.keywords)


# ============================================================
# FILE-SET CATEGORIES
# ============================================================

TEST_FILES = PathRule(
    name="test",
    suffixes=(
        "_test.go",
        "_test.py",
        ".test.js",
        ".test.jsx",
        ".test.ts",
        ".test.tsx",
        ".spec.js",
        ".spec.ts",
        "_spec.rb",
        "test.java",
        "tests.cs",
    ),
    prefixes=("test/", "tests/", "__tests__/", "spec/", "testdata/"),
)

DOC_FILES = PathRule(
    name="docs",
    suffixes=(".md", ".markdown", ".mdx", ".rst", ".adoc", ".asciidoc"),
    prefixes=("docs/", "doc/", "documentation/"),
    stems=frozenset({"readme", "changelog", "contributing"}),
)

CONFIG_FILES = PathRule(
    name="config",
    suffixes=(".json", ".yaml", ".yml", ".toml", ".ini", ".cfg", ".conf", ".properties"),
    prefixes=(".github/", ".circleci/", ".gitlab/", "config/", "configs/", ".vscode/"),
    basenames=frozenset({
        "makefile",
        "dockerfile",
        "docker-compose.yml",
        "go.mod",
        "go.sum",
        "requirements.txt",
        "setup.py",
        "gemfile",
        "gemfile.lock",
        "cargo.lock",
        "jenkinsfile",
        "procfile",
        ".gitignore",
        ".gitattributes",
        ".dockerignore",
        ".editorconfig",
        ".gitlab-ci.yml",
        ".travis.yml",
        ".prettierrc",
        ".eslintrc",
        ".babelrc",
        ".npmrc",
        ".nvmrc",
        "webpack.config.js",
        "gulpfile.js",
        "vite.config.ts",
    }),
    basename_prefixes=(".env",),
)

# ============================================================
# WORDING REFINEMENTS (first match wins)
# ============================================================

TEST_FIX_MESSAGE = "test: fix failing tests"
TEST_ADD_MESSAGE = "test: add test coverage"
TEST_UPDATE_MESSAGE = "test: update test cases"

DOC_REFINEMENTS = (
    KeywordRule(("readme",), "docs: update README"),
    KeywordRule(("api",), "docs: update API documentation"),
    KeywordRule(("fix", "typo"), "docs: fix documentation typos"),
)
DOC_DEFAULT_MESSAGE = "docs: update documentation"

CONFIG_REFINEMENTS = (
    KeywordRule(("dependency", "dependencies", "package", "version"), "chore: update dependencies"),
    KeywordRule(("ci", "workflow", "pipeline"), "ci: update CI configuration"),
    KeywordRule(("build", "webpack", "gulp"), "build: update build configuration"),
)
CONFIG_DEFAULT_MESSAGE = "chore: update configuration"

# ============================================================
# RENAME DETECTION
# ============================================================

RENAME_FROM_MARKER = "rename from"
RENAME_TO_MARKER = "rename to"
HUNK_HEADER_MARKER = "@@"

# ============================================================
# GENERIC PATH
# ============================================================

GENERIC_CATEGORIES = (
    KeywordRule(("fix", "bug", "error", "issue"), "fix"),
    KeywordRule(("performance", "optimize", "optimise", "speed up", "faster", "perf"), "perf"),
    KeywordRule(("security", "vulnerab", "xss", "csrf", "injection", "sanitiz", "cve-"), "security"),
    KeywordRule(("refactor", "restructure", "reorganize", "cleanup", "clean up", "simplify"), "refactor"),
    KeywordRule(("style", "format", "lint", "whitespace", "indent"), "style"),
)
FEATURE_CATEGORY = "feat"
CHORE_CATEGORY = "chore"

# A change counts as a feature when added lines exceed this multiple of removed lines
FEATURE_ADDITION_RATIO = 2

# Number of file names spelled out in a generic message
MAX_NAMED_FILES = 2

EMPTY_CHANGESET_MESSAGE = "chore: add missing files"
