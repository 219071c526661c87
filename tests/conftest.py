"""
Shared test fixtures and configuration.
"""

import pytest
import os
import sys

# Add the parent directory to the path so we can import the awscred package
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

SAMPLE_CREDENTIALS = """\
# managed by hand
[default]
aws_access_key_id = AKIADEFAULT
aws_secret_access_key = default-secret

[dev]
aws_access_key_id = AKIADEV
aws_secret_access_key = dev-secret
aws_session_token = dev-token
region = eu-west-1
"""

@pytest.fixture
def credentials_file(tmp_path):
    """Fixture writing a sample credentials file and returning its path."""
    path = tmp_path / "credentials"
    path.write_text(SAMPLE_CREDENTIALS)
    return path

@pytest.fixture
def aws_env(monkeypatch, tmp_path):
    """Fixture isolating the AWS environment variables and home directory."""
    for var in ("AWS_SHARED_CREDENTIALS_FILE", "AWS_PROFILE", "AWS_DEFAULT_PROFILE"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return monkeypatch
