"""Core settings, logging and error types shared by the application."""
