"""gest command line interface."""
