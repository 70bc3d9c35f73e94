"""globtree command line interface."""
