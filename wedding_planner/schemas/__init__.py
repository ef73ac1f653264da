"""
Pydantic request/response schemas, one module per resource.

Request models keep every field optional so the services can apply the
required-field rules (and their exact messages) themselves; type errors are
still rejected by Pydantic and surface as 400 responses.
"""
