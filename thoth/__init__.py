"""thoth — komendy wyszukiwania w dokumencie zasad (CLI i tryb czatu)."""

__version__ = "0.1.0"
