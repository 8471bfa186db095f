"""taskflow - in-memory task lifecycle tracking engine."""
