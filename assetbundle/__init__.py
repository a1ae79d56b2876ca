"""Reader for Unity asset bundle files: headers, block tables, directories and entry data."""

__version__ = "0.1.0"