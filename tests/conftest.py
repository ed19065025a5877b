"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import pytest

from commitgen.config import ProviderConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def cache_dir(temp_dir):
    """A cache directory that does not exist yet."""
    return temp_dir / "cache"


@pytest.fixture
def sample_files():
    """Staged file paths in git order."""
    return ["src/app.py", "src/utils.py"]


@pytest.fixture
def sample_patch():
    """Sample staged diff for testing."""
    return """diff --git a/src/app.py b/src/app.py
index 1234567..abcdefg 100644
--- a/src/app.py
+++ b/src/app.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
diff --git a/src/utils.py b/src/utils.py
index 2345678..bcdefgh 100644
--- a/src/utils.py
+++ b/src/utils.py
@@ -10,3 +10,4 @@
 def load():
     pass
+    return None
"""


@pytest.fixture
def rename_patch():
    """A pure rename without content changes."""
    return """diff --git a/old_name.py b/new_name.py
similarity index 100%
rename from old_name.py
rename to new_name.py
"""


@pytest.fixture
def openai_config():
    """A valid OpenAI provider configuration."""
    return ProviderConfig(
        provider="openai",
        api_key="sk-test-1234567890",
        model="gpt-4o-mini",
        base_url="https://api.openai.com/v1",
    )


@pytest.fixture
def ollama_config():
    """A valid Ollama provider configuration."""
    return ProviderConfig(
        provider="ollama",
        model="llama3.2:3b",
        base_url="http://localhost:11434",
    )


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
