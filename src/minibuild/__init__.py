"""minibuild - a minimal sequential build orchestrator."""

__version__ = "0.1.0"
