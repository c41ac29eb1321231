"""Calendar document building."""
