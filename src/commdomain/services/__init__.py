"""Service layer — policy and result envelopes over the domain registry."""
