"""Mode-aware selection and clipboard commands for a modal text editor."""

__all__ = [
    "application",
    "buffer",
    "commands",
    "errors",
    "modes",
    "runtime",
    "search",
    "view",
    "workspace",
]

__version__ = "0.1.0"
