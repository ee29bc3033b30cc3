"""Helper utilities shared by the pipeline stages."""
