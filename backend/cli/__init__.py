"""Terminal front end for the storefront core."""
