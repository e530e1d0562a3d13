"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database or auth provider
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("SUPABASE_URL", "http://auth.test")
os.environ.setdefault("SUPABASE_ANON_KEY", "anon-test-key")
os.environ.setdefault("LOG_FORMAT", "text")
