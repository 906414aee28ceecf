"""Monte Carlo catalogue of mine-cluster shapes on random boards."""

__version__ = "0.1.0"
