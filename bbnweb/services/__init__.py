"""Adapters for external services (Supabase auth and profile lookups)."""
