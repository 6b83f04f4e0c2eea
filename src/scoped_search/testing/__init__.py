"""Testing – in-memory doubles for the search wire contract."""
