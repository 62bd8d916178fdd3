"""verbnav - verb dispatch and command templating for a terminal file-tree navigator."""

__version__ = "0.1.0"
