"""unittesting command line interface."""
