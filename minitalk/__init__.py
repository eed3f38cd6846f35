"""Send text between processes bit by bit over SIGUSR1 and SIGUSR2, with the helpers the client and server use."""

__version__ = "1.0.0"