"""An arcade game of dropping bombs on passing enemies against the clock."""

__version__ = "0.1.0"