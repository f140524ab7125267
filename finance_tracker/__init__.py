"""Interactive console program for the finance tracker."""
