"""Environment settings and process logging setup."""
