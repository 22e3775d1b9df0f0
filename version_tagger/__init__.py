"""Git tag management for CI pipelines driven by Version files."""
