"""Terminal presentation and CLI for list views."""
