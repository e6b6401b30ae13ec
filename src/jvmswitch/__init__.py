"""Select an installed Java runtime by version for the current shell."""
