"""foxtype - a terminal typing test."""
