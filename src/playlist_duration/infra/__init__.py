"""Infrastructure helpers: settings, logging and exceptions."""
