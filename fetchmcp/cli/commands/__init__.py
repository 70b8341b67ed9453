"""CLI subcommands; each module exposes ``register_commands``."""
