"""
Pydantic schema definitions for API payloads.

Request bodies are parsed into loosely typed candidate models so that
field rules can be checked by the validator and reported together;
responses use strict models wrapped in the success envelope.
"""
