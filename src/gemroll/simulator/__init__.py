"""Desktop front end for Gemroll (pygame)."""
