"""Core capability logic for verbosity control."""
