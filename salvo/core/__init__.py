"""Grid model, domain types and errors."""
