"""Hole generators, catalogues, golfer bookkeeping, GitHub sync and Discord embeds for a code golf site."""

__version__ = "0.1.0"