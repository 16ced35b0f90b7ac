"""Configuration: settings, rule-file discovery, and logging setup."""
