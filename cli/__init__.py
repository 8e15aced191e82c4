"""Command line front end for the Hold'em simulator."""
