"""Web dashboard and command-line front ends."""
