"""notelinks API layer."""
