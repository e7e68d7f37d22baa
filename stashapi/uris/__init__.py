"""Chainable builders for REST API endpoint URIs."""