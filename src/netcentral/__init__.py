"""netcentral: build small networks from node/edge records and score their nodes."""

__version__ = "0.1.0"
