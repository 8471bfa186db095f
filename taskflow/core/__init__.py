"""Cross-cutting infrastructure: configuration, logging, errors, templates."""
