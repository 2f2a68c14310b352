"""
Pytest configuration for the SSO service tests.

Points the service at a throwaway SQLite database before any service module
is imported, since the engine is created at import time.
"""
import os
import tempfile

_tmp_dir = tempfile.mkdtemp(prefix="sso-tests-")

os.environ.pop("CONFIG_PATH", None)
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmp_dir, 'sso_test.db')}"
os.environ["ENV"] = "local"
