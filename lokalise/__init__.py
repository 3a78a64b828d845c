"""Client library for the Lokalise translation management web API: keys, languages, files and more."""

__version__ = "3.0.0"