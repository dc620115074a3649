"""labcheck: input-validation and calculation rules with a small CLI."""

__version__ = "0.1.0"
