# ABOUTME: Subcommands for the bookmatch CLI, one module per command.
# ABOUTME: Each module exposes a single click command registered on the root group.
