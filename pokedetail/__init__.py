"""Pokemon detail view service: PokeAPI fetch + display-ready view-model."""
