"""Output layer: report payloads and human/JSON rendering of results."""
