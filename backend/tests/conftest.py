"""Root conftest — shared test configuration."""

import os

# Never forward test signups to a real mailing-list provider
os.environ.pop("LOOPS_FORM_ID", None)
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("API_BASE_URL", "http://test")
