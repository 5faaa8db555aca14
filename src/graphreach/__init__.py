"""graphreach — depth-first reachability over object graphs and adjacency maps."""

__version__ = "0.1.0"
