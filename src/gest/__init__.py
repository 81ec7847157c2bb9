"""gest - human-friendly reports for go test -json output and coverage profiles."""

__version__ = "0.1.0"
